"""Waitlist endpoint with per-status counters."""

from collections import Counter
from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import WaitlistRepository

WAITLIST_STATUSES = ("waiting", "notified", "confirmed", "expired")


def summarize_waitlist(entries: list[dict[str, Any]]) -> dict[str, int]:
    counts = Counter(entry.get("status") for entry in entries)
    stats = {status: counts.get(status, 0) for status in WAITLIST_STATUSES}
    stats["total"] = len(entries)
    return stats


def build_router(repository: WaitlistRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/waitlist", tags=["waitlist"])

    @router.get("")
    async def list_waitlist(user_id: str = Depends(current_user_id)):
        entries = await repository.list_entries(user_id)
        return {"entries": entries, "total": len(entries), "stats": summarize_waitlist(entries)}

    return router
