"""
Health endpoints.

``/healthz`` answers as long as the process is up and reports whether
the demo twins are mounted. ``/readyz`` additionally checks the database
pool when live storage is configured.
"""

import time

from fastapi import APIRouter

from app.config import Settings
from app.db.pool import db_health_check

SERVICE_NAME = "speedai-dashboard"


def build_router(settings: Settings) -> APIRouter:
    router = APIRouter(tags=["health"])

    @router.get("/healthz")
    async def healthz():
        """Basic health check - always returns 200 if app is running."""
        return {"status": "ok", "service": SERVICE_NAME, "demo_mode": settings.DEMO_MODE}

    @router.get("/readyz")
    async def readyz():
        checks = {}
        overall_ok = True

        if settings.live_storage_configured():
            t0 = time.time()
            db_health = await db_health_check()
            is_healthy = db_health.get("healthy", False)
            checks["database"] = {
                "ok": is_healthy,
                "latency_ms": round((time.time() - t0) * 1000, 1),
            }
            if "pool_stats" in db_health:
                pool_stats = db_health["pool_stats"]
                checks["database"].update(
                    {
                        "pool_size": pool_stats.get("pool_size", 0),
                        "pool_available": pool_stats.get("pool_available", 0),
                        "pool_utilization_percent": pool_stats.get("pool_utilization_percent", 0),
                    }
                )
            if "warnings" in db_health:
                checks["database"]["warnings"] = db_health["warnings"]
            if not is_healthy:
                checks["database"]["error"] = db_health.get("error", "Database unhealthy")
            overall_ok = overall_ok and is_healthy
        else:
            checks["database"] = {"ok": True, "configured": False}

        checks["configuration"] = {
            "ok": True,
            "environment": settings.environment,
            "demo_mode": settings.DEMO_MODE,
        }

        return {"overall_ok": overall_ok, "checks": checks, "timestamp": time.time()}

    return router
