"""
Database helper functions for the read-only dashboard queries.

Every helper converts driver failures into ``DatabaseError`` so callers
only deal with one exception type.
"""

from typing import Any

import psycopg

from app.db.pool import get_db_connection
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class DatabaseError(Exception):
    """Custom exception for database operations."""

    def __init__(self, message: str, operation: str = "unknown", recoverable: bool = True):
        super().__init__(message)
        self.operation = operation
        self.recoverable = recoverable


async def _execute(
    query: str,
    params: tuple,
    operation: str,
    connection: psycopg.AsyncConnection | None,
    many: bool,
):
    try:
        if connection:
            async with connection.cursor() as cur:
                await cur.execute(query, params)
                return await (cur.fetchall() if many else cur.fetchone())

        async with await get_db_connection() as conn:
            async with conn.cursor() as cur:
                await cur.execute(query, params)
                return await (cur.fetchall() if many else cur.fetchone())

    except psycopg.Error as e:
        logger.error(f"Database {operation} error", query=query[:100], error=str(e))
        raise DatabaseError(f"Query failed: {e}", operation=operation) from e
    except RuntimeError as e:
        # Pool missing or closed.
        logger.error(f"Database {operation} unavailable", error=str(e))
        raise DatabaseError(str(e), operation=operation, recoverable=False) from e


async def fetch_one(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> dict[str, Any] | None:
    """
    Execute query and return single row as dict.

    Args:
        query: SQL query with %s placeholders
        params: Query parameters
        connection: Optional existing connection

    Returns:
        Dict with row data or None if no results
    """
    row = await _execute(query, params, "fetch_one", connection, many=False)
    return row if row else None


async def fetch_all(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> list[dict[str, Any]]:
    """Execute query and return all rows as list of dicts."""
    return await _execute(query, params, "fetch_all", connection, many=True)


async def fetch_val(
    query: str, params: tuple = (), *, connection: psycopg.AsyncConnection | None = None
) -> Any:
    """Execute query and return the first column of the first row."""
    row = await _execute(query, params, "fetch_val", connection, many=False)
    return list(row.values())[0] if row else None
