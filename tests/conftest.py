import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.auth.verify import current_user_id
from app.config import Settings
from app.errors import register_exception_handlers
from app.features.demo_mode.repository import build_fixture_repositories
from app.main import create_app
from app.routes.registry import register_live_routes


def _settings(**overrides) -> Settings:
    values = {"DEMO_MODE": True, "DATABASE_URL": None, "JWT_SECRET": None}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def make_settings():
    return _settings


@pytest.fixture
def demo_client():
    return TestClient(create_app(_settings(DEMO_MODE=True)))


@pytest.fixture
def demo_disabled_client():
    return TestClient(create_app(_settings(DEMO_MODE=False)))


@pytest.fixture
def auth_override():
    def _override():
        return "user-123"

    return _override


@pytest.fixture
def apply_auth_override(auth_override):
    def _apply(app):
        app.dependency_overrides[current_user_id] = auth_override

    return _apply


@pytest.fixture
def live_app():
    """Live route table backed by fixture repositories, no database needed."""
    app = FastAPI()
    register_exception_handlers(app)
    register_live_routes(app, build_fixture_repositories())
    return app
