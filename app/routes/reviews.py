"""Review endpoints: list with filters, stats, review requests and incentives."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.errors import ResourceNotFoundError
from app.repositories.dashboard_repository import ReviewFilters, ReviewRepository
from app.utils.query_params import parse_int


def build_router(repository: ReviewRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/reviews", tags=["reviews"])

    @router.get("")
    async def list_reviews(
        platform: str | None = None,
        ratingMin: str | None = None,
        search: str | None = None,
        user_id: str = Depends(current_user_id),
    ):
        filters = ReviewFilters(
            platform=platform or None,
            rating_min=parse_int(ratingMin),
            search=search.strip() if search and search.strip() else None,
        )
        return await repository.list_reviews(user_id, filters)

    @router.get("/stats")
    async def get_review_stats(user_id: str = Depends(current_user_id)):
        return await repository.get_stats(user_id)

    @router.get("/requests")
    async def list_review_requests(user_id: str = Depends(current_user_id)):
        requests = await repository.list_requests(user_id)
        return {"requests": requests, "total": len(requests)}

    @router.get("/requests/stats")
    async def get_review_request_stats(user_id: str = Depends(current_user_id)):
        return await repository.get_request_stats(user_id)

    @router.get("/incentives")
    async def list_incentives(user_id: str = Depends(current_user_id)):
        return await repository.list_incentives(user_id)

    @router.get("/{review_id}")
    async def get_review(review_id: str, user_id: str = Depends(current_user_id)):
        review = await repository.get_review(user_id, review_id)
        if review is None:
            raise ResourceNotFoundError("Avis non trouvé")
        return review

    return router
