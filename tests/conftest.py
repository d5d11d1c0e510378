import pytest
from fastapi.testclient import TestClient

from demok8s.config import Settings, reset_settings_cache
from demok8s.main import create_app


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("APP_MESSAGE", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def make_client():
    """Return a factory building a client from the current environment."""

    def _make() -> TestClient:
        return TestClient(create_app(Settings(_env_file=None)))

    return _make
