"""
Call log endpoints: paginated history, headline stats, chart data and
AI insights.
"""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.errors import ResourceNotFoundError
from app.repositories.dashboard_repository import CallRepository
from app.utils.query_params import parse_positive_int, total_pages

DEFAULT_PAGE = 1
DEFAULT_CALLS_PER_PAGE = 10


def build_router(repository: CallRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/calls", tags=["calls"])

    @router.get("/stats")
    async def get_call_stats(timeFilter: str | None = None, user_id: str = Depends(current_user_id)):
        """Headline counters; volume fields follow the selected window."""
        return await repository.get_stats(user_id, timeFilter)

    @router.get("/chart-data")
    async def get_call_chart_data(
        timeFilter: str | None = None, user_id: str = Depends(current_user_id)
    ):
        return await repository.get_chart_data(user_id, timeFilter)

    @router.get("/ai-insights")
    async def get_ai_insights(
        timeFilter: str | None = None, user_id: str = Depends(current_user_id)
    ):
        insights = await repository.get_ai_insights(user_id, timeFilter)
        return {"insights": insights, "generated": True}

    @router.get("")
    async def list_calls(
        page: str | None = None,
        limit: str | None = None,
        user_id: str = Depends(current_user_id),
    ):
        """Paginated call history, newest first."""
        page_number = parse_positive_int(page, DEFAULT_PAGE)
        page_size = parse_positive_int(limit, DEFAULT_CALLS_PER_PAGE)

        result = await repository.list_calls(
            user_id, offset=(page_number - 1) * page_size, limit=page_size
        )
        return {
            "calls": result.calls,
            "total": result.total,
            "page": page_number,
            "limit": page_size,
            "totalPages": total_pages(result.total, page_size),
        }

    @router.get("/{call_id}")
    async def get_call(call_id: str, user_id: str = Depends(current_user_id)):
        call = await repository.get_call(user_id, call_id)
        if call is None:
            raise ResourceNotFoundError("Appel non trouvé")
        return call

    return router
