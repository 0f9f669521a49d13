"""Root conftest: environment isolation and shared fixtures."""

import pytest
from pydantic import BaseModel

from tool_builder.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    for name in ("API_BASE_URL", "TOOL_CONTEXT_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def factory_calls():
    """Factory recording every context it receives."""
    calls = []

    def factory(ctx):
        calls.append(ctx)
        key = ctx.api_key if isinstance(ctx, BaseModel) else ctx.get("api_key")
        return {"name": "t", "description": "uses an api key", "key": key}

    factory.calls = calls
    return factory
