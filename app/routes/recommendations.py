from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import RecommendationRepository


def build_router(
    repository: RecommendationRepository, current_user_id: Callable[..., str]
) -> APIRouter:
    router = APIRouter(prefix="/recommendations", tags=["recommendations"])

    @router.get("")
    async def list_recommendations(user_id: str = Depends(current_user_id)):
        recommendations = await repository.list_recommendations(user_id)
        return {"recommendations": recommendations, "total": len(recommendations)}

    return router
