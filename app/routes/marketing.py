"""Marketing analytics, contacts and campaign listings (read-only)."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import MarketingRepository


def build_router(repository: MarketingRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/marketing", tags=["marketing"])

    @router.get("/analytics/overview")
    async def get_overview(user_id: str = Depends(current_user_id)):
        return await repository.get_overview(user_id)

    @router.get("/analytics/performance")
    async def get_performance(user_id: str = Depends(current_user_id)):
        return await repository.get_performance(user_id)

    @router.get("/contacts/stats")
    async def get_contact_stats(user_id: str = Depends(current_user_id)):
        return await repository.get_contact_stats(user_id)

    @router.get("/contacts")
    async def list_contacts(user_id: str = Depends(current_user_id)):
        contacts = await repository.list_contacts(user_id)
        return {"contacts": contacts, "total": len(contacts)}

    @router.get("/campaigns")
    async def list_campaigns(user_id: str = Depends(current_user_id)):
        campaigns = await repository.list_campaigns(user_id)
        return {"campaigns": campaigns, "total": len(campaigns)}

    @router.get("/automations")
    async def list_automations(user_id: str = Depends(current_user_id)):
        automations = await repository.list_automations(user_id)
        return {"automations": automations, "total": len(automations)}

    @router.get("/segments")
    async def list_segments(user_id: str = Depends(current_user_id)):
        segments = await repository.list_segments(user_id)
        return {"segments": segments, "total": len(segments)}

    @router.get("/templates")
    async def list_templates(user_id: str = Depends(current_user_id)):
        templates = await repository.list_templates(user_id)
        return {"templates": templates, "total": len(templates)}

    return router
