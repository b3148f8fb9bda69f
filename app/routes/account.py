"""Current-user endpoints: /auth/me, /user, /user/profile and /settings."""

from collections.abc import Callable

from fastapi import APIRouter, Depends

from app.errors import ResourceNotFoundError
from app.repositories.dashboard_repository import AccountRepository


def build_router(repository: AccountRepository, current_user_id: Callable[..., str]) -> APIRouter:
    router = APIRouter(tags=["account"])

    async def load_account(user_id: str = Depends(current_user_id)):
        account = await repository.get_account(user_id)
        if account is None:
            raise ResourceNotFoundError("Utilisateur non trouvé")
        return account

    @router.get("/auth/me")
    async def get_me(account=Depends(load_account)):
        return account

    @router.get("/user")
    async def get_user(account=Depends(load_account)):
        return account

    @router.get("/user/profile")
    async def get_user_profile(account=Depends(load_account)):
        return account

    @router.get("/settings")
    async def get_settings(user_id: str = Depends(current_user_id)):
        return await repository.get_settings(user_id)

    return router
