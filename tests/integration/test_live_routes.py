"""
Live route table: same routers, authenticated, mounted under /api.
"""

from unittest.mock import AsyncMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.db.helpers import DatabaseError
from app.errors import register_exception_handlers
from app.repositories.dashboard_repository import DashboardRepositories
from app.repositories.postgres_repository import PostgresCallRepository, PostgresNotificationRepository
from app.routes.registry import register_live_routes


def test_live_routes_require_a_token(live_app):
    client = TestClient(live_app)

    response = client.get("/api/calls")

    assert response.status_code == 401


def test_live_routes_with_authenticated_user(live_app, apply_auth_override):
    apply_auth_override(live_app)
    client = TestClient(live_app)

    response = client.get("/api/calls?page=3&limit=10")

    assert response.status_code == 200
    body = response.json()
    assert [call["id"] for call in body["calls"]] == [f"call-{n:03d}" for n in range(21, 26)]
    assert body["totalPages"] == 3


def test_live_and_demo_share_envelopes(live_app, apply_auth_override, demo_client):
    apply_auth_override(live_app)
    live = TestClient(live_app).get("/api/notifications").json()
    demo = demo_client.get("/api/demo/notifications").json()

    assert set(live) == set(demo) == {"notifications", "unreadCount"}


def test_live_writes_are_not_routed(live_app, apply_auth_override):
    apply_auth_override(live_app)
    response = TestClient(live_app).post("/api/calls")

    assert response.status_code == 405
    assert "message" not in response.json()


def test_database_failure_renders_503(monkeypatch, apply_auth_override):
    monkeypatch.setattr(
        "app.repositories.postgres_repository.fetch_val",
        AsyncMock(side_effect=DatabaseError("connection refused", operation="fetch_val")),
    )
    app = FastAPI()
    register_exception_handlers(app)
    register_live_routes(app, DashboardRepositories(notifications=PostgresNotificationRepository()))
    apply_auth_override(app)

    response = TestClient(app).get("/api/notifications/unread-count")

    assert response.status_code == 503
    assert response.json() == {"message": "Service temporairement indisponible"}


def test_unmounted_area_is_404(apply_auth_override):
    app = FastAPI()
    register_live_routes(app, DashboardRepositories(notifications=PostgresNotificationRepository()))
    apply_auth_override(app)

    assert TestClient(app).get("/api/marketing/contacts").status_code == 404


def test_ai_insights_forward_the_time_filter(monkeypatch, apply_auth_override):
    fetch_all = AsyncMock(return_value=[])
    monkeypatch.setattr("app.repositories.postgres_repository.fetch_all", fetch_all)
    app = FastAPI()
    register_live_routes(app, DashboardRepositories(calls=PostgresCallRepository()))
    apply_auth_override(app)

    response = TestClient(app).get("/api/calls/ai-insights?timeFilter=today")

    assert response.status_code == 200
    assert response.json()["generated"] is True
    _, start, end = fetch_all.await_args.args[1]
    assert start == end.replace(hour=0, minute=0, second=0, microsecond=0)
