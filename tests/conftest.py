import pytest
from fastapi.testclient import TestClient

from user_service.main import app

ENV_VARS = ("SERVER_PORT", "DB_HOST", "REDIS_HOST", "KAFKA_SERVERS", "NODE_ENV")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def unbind_settings():
    yield
    if hasattr(app.state, "settings"):
        del app.state.settings


@pytest.fixture
def client():
    return TestClient(app)
