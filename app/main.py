"""
Application entry point.

``create_app`` wires the dashboard for a given ``Settings``: the demo
route table is mounted when ``DEMO_MODE`` is on, the live route table
when a database is configured.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings
from app.db.pool import db_pool
from app.errors import register_exception_handlers
from app.features.demo_mode import register_demo_routes
from app.infrastructure.observability.logging import get_logger, log_request, setup_logging
from app.middleware import RequestContextMiddleware
from app.repositories.postgres_repository import build_postgres_repositories
from app.routes import health
from app.routes.registry import register_live_routes

setup_logging(log_level=settings.LOG_LEVEL)
logger = get_logger(__name__)


def _build_lifespan(config: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the database pool for live mode and close it on shutdown."""
        logger.info(
            "Application starting",
            environment=config.environment,
            debug=config.debug,
            demo_mode=config.DEMO_MODE,
            live_storage=config.live_storage_configured(),
        )

        if config.live_storage_configured():
            logger.info("Initializing database pool")
            db_pool.configure(config)
            await db_pool.initialize()

        yield

        logger.info("Application shutting down")
        if config.live_storage_configured():
            await db_pool.close()

    return lifespan


def create_app(config: Settings = settings) -> FastAPI:
    app = FastAPI(
        title="SpeedAI Dashboard API",
        description="Dashboard backend with a fixture-backed demo mode",
        version="0.1.0",
        lifespan=_build_lifespan(config),
    )
    app.state.settings = config

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log HTTP requests with timing."""
        start_time = time.time()
        response = await call_next(request)
        log_request(
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.time() - start_time) * 1000, 2),
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    app.include_router(health.build_router(config))
    register_demo_routes(app, demo_mode=config.DEMO_MODE)

    if config.live_storage_configured():
        register_live_routes(app, build_postgres_repositories())
    else:
        logger.info("DATABASE_URL not set, live dashboard routes not mounted")

    return app


app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
