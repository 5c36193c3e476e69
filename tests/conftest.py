"""Shared test fixtures."""

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from httpboom import internal, method_not_allowed, not_found, unauthorized, wrap
from httpboom.api import install_exception_handlers
from httpboom.config import reload_config

SETTINGS_ENV_VARS = (
    "HTTPBOOM_INTERNAL_ERROR_MESSAGE",
    "HTTPBOOM_UNKNOWN_ERROR_LABEL",
    "HTTPBOOM_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from default settings."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reload_config()
    yield
    reload_config()


def build_test_app(*, catch_all: bool = True) -> FastAPI:
    """Create a FastAPI app whose routes raise decorated and plain errors."""
    app = FastAPI()
    install_exception_handlers(app, catch_all=catch_all)

    @app.get("/missing")
    async def missing() -> None:
        raise not_found("No such widget")

    @app.get("/login")
    async def login() -> None:
        raise unauthorized("Bad token", "Bearer", {"realm": "widgets"})

    @app.get("/readonly")
    async def readonly() -> None:
        raise method_not_allowed("Read only", None, ["GET", "HEAD"])

    @app.get("/wrapped")
    async def wrapped() -> None:
        raise wrap(ValueError("bad input"), 400)

    @app.get("/internal")
    async def internal_error() -> None:
        raise internal("secret detail")

    @app.get("/crash")
    async def crash() -> None:
        raise RuntimeError("database exploded")

    return app


@pytest.fixture
def api_app_factory() -> Callable[..., FastAPI]:
    """Expose the app builder for tests that need non-default handlers."""
    return build_test_app


@pytest.fixture
def api_test_app() -> FastAPI:
    """App with every exception routed through the error handler."""
    return build_test_app()


@pytest.fixture
def api_test_client(api_test_app: FastAPI) -> Generator[TestClient, None, None]:
    """TestClient that returns 500 responses instead of re-raising."""
    with TestClient(api_test_app, raise_server_exceptions=False) as client:
        yield client
