"""Third-party integration endpoints: connections, synced customers and orders."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.repositories.dashboard_repository import IntegrationRepository


def build_router(repository: IntegrationRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(prefix="/integrations", tags=["integrations"])

    @router.get("")
    async def list_integrations(user_id: str = Depends(current_user_id)):
        integrations = await repository.list_connections(user_id)
        return {"integrations": integrations, "total": len(integrations)}

    @router.get("/customers")
    async def list_customers(user_id: str = Depends(current_user_id)):
        customers, total = await repository.list_customers(user_id)
        return {"customers": customers, "total": total}

    @router.get("/orders/stats")
    async def get_order_stats(period: str | None = None, user_id: str = Depends(current_user_id)):
        return await repository.get_order_stats(user_id, period)

    @router.get("/orders")
    async def list_orders(
        source: str | None = None,
        status: str | None = None,
        user_id: str = Depends(current_user_id),
    ):
        return await repository.list_orders(user_id, source=source or None, status=status or None)

    return router
