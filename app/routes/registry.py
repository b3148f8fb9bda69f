"""
Mounting of the dashboard route tables.

The same router factories back every table; a table is defined by its
URL prefix, the repositories injected into the routers and the
dependency that resolves the current user id.
"""

from collections.abc import Callable

from fastapi import APIRouter, FastAPI

from app.auth.verify import current_user_id
from app.infrastructure.observability.logging import get_logger
from app.repositories.dashboard_repository import DashboardRepositories
from app.routes import (
    account,
    calls,
    guarantee,
    integrations,
    marketing,
    notifications,
    recommendations,
    reports,
    reviews,
    waitlist,
)

logger = get_logger(__name__)

LIVE_PREFIX = "/api"

_ROUTER_FACTORIES = {
    "calls": calls.build_router,
    "reviews": reviews.build_router,
    "marketing": marketing.build_router,
    "guarantee": guarantee.build_router,
    "integrations": integrations.build_router,
    "reports": reports.build_router,
    "waitlist": waitlist.build_router,
    "recommendations": recommendations.build_router,
    "notifications": notifications.build_router,
    "account": account.build_router,
}


def build_dashboard_router(
    repositories: DashboardRepositories, user_id_dependency: Callable[..., str]
) -> tuple[APIRouter, list[str]]:
    """Build one router holding every area that has a repository."""
    router = APIRouter()
    mounted = []
    for area, factory in _ROUTER_FACTORIES.items():
        repository = getattr(repositories, area)
        if repository is None:
            continue
        router.include_router(factory(repository, user_id_dependency))
        mounted.append(area)
    return router, mounted


def register_live_routes(app: FastAPI, repositories: DashboardRepositories) -> None:
    """Mount the authenticated dashboard routes under ``/api``."""
    router, mounted = build_dashboard_router(repositories, current_user_id)
    app.include_router(router, prefix=LIVE_PREFIX)
    logger.info("Live dashboard routes mounted", prefix=LIVE_PREFIX, areas=mounted)
