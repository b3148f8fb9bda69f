"""
Application-level errors and their HTTP rendering.

Dashboard clients read a ``{"message": ...}`` body on failures, so the
handlers below render domain errors that way instead of FastAPI's
``{"detail": ...}``.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from app.db.helpers import DatabaseError
from app.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

SERVICE_UNAVAILABLE_MESSAGE = "Service temporairement indisponible"
DEMO_READ_ONLY_MESSAGE = "Action indisponible en mode démonstration"


class ResourceNotFoundError(Exception):
    """A single-resource lookup found nothing for the requested id."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": exc.message})


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    logger.error(
        "Database error while serving request",
        path=request.url.path,
        operation=exc.operation,
        recoverable=exc.recoverable,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"message": SERVICE_UNAVAILABLE_MESSAGE},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ResourceNotFoundError, resource_not_found_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
