"""Monthly report listing."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import ReportRepository


def build_router(repository: ReportRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/reports", tags=["reports"])

    @router.get("")
    async def list_reports(user_id: str = Depends(current_user_id)):
        reports = await repository.list_reports(user_id)
        return {"reports": reports, "total": len(reports)}

    return router
