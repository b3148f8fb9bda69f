"""
Demo route table.

When demo mode is on, every read endpoint of the dashboard gets a twin
under ``/api/demo`` answered by the fixture repositories for a fixed
demo user. When it is off nothing is registered, so the framework's
default 404 answers any ``/api/demo`` path.
"""

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.routing import Match

from app.errors import DEMO_READ_ONLY_MESSAGE
from app.features.demo_mode.fixtures.account import DEMO_USER_ID
from app.features.demo_mode.repository import build_fixture_repositories
from app.infrastructure.observability.logging import get_logger
from app.repositories.dashboard_repository import DashboardRepositories
from app.routes.registry import build_dashboard_router

logger = get_logger(__name__)

DEMO_ROUTE_PREFIX = "/api/demo"
WRITE_METHODS = ["POST", "PUT", "PATCH", "DELETE"]
CATCH_ALL_NAME = "demo_catch_all"


def demo_user_id() -> str:
    return DEMO_USER_ID


def _trailing_slash_redirect(request: Request) -> RedirectResponse | None:
    """Redirect like the router does when the path without its trailing slash resolves."""
    path = request.url.path
    if not path.endswith("/") or path == "/":
        return None

    target = path.rstrip("/")
    scope = {**request.scope, "path": target}
    for route in request.app.router.routes:
        if getattr(route, "name", None) == CATCH_ALL_NAME:
            continue
        match, _ = route.matches(scope)
        if match == Match.FULL:
            return RedirectResponse(str(request.url.replace(path=target)))
    return None


def _build_read_only_guard() -> APIRouter:
    router = APIRouter(tags=["demo"])

    @router.api_route(
        "/{path:path}",
        methods=["GET", *WRITE_METHODS],
        include_in_schema=False,
        name=CATCH_ALL_NAME,
    )
    async def demo_catch_all(path: str, request: Request):
        if request.method == "GET":
            redirect = _trailing_slash_redirect(request)
            if redirect is not None:
                return redirect
            # Unknown demo read path, same answer as an unmounted route.
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return JSONResponse(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            content={"message": DEMO_READ_ONLY_MESSAGE},
        )

    return router


def register_demo_routes(
    app: FastAPI, demo_mode: bool, repositories: DashboardRepositories | None = None
) -> bool:
    """
    Mount the demo twins if ``demo_mode`` is set.

    Returns whether anything was mounted.
    """
    if not demo_mode:
        logger.info("Demo mode disabled, demo routes not mounted", prefix=DEMO_ROUTE_PREFIX)
        return False

    router, mounted = build_dashboard_router(
        repositories or build_fixture_repositories(), demo_user_id
    )
    # Registered after the read routes so GETs still resolve to their handlers.
    router.include_router(_build_read_only_guard())
    app.include_router(router, prefix=DEMO_ROUTE_PREFIX)

    logger.info("Demo mode enabled, demo routes mounted", prefix=DEMO_ROUTE_PREFIX, areas=mounted)
    return True
