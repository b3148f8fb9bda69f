"""Notification centre endpoints."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import NotificationFilters, NotificationRepository
from app.utils.query_params import parse_bool


def build_router(repository: NotificationRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/notifications", tags=["notifications"])

    @router.get("/unread-count")
    async def get_unread_count(user_id: str = Depends(current_user_id)):
        return {"count": await repository.count_unread(user_id)}

    @router.get("")
    async def list_notifications(
        timeFilter: str | None = None,
        type: str | None = None,
        isRead: str | None = None,
        user_id: str = Depends(current_user_id),
    ):
        """
        List notifications, newest first.

        ``unreadCount`` always covers the whole inbox, not just the
        filtered page, so the badge stays stable while filtering.
        """
        filters = NotificationFilters(time_filter=timeFilter, type=type, is_read=parse_bool(isRead))
        notifications = await repository.list_notifications(user_id, filters)
        return {
            "notifications": notifications,
            "unreadCount": await repository.count_unread(user_id),
        }

    return router
