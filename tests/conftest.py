"""Pytest fixtures shared by all tests."""
from collections.abc import Generator

import pytest

from core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """
    Give every test a fresh Settings instance.

    Fallback credentials are unset so tests only see the token/account they mock.
    """
    monkeypatch.delenv("GRAPHQL_API_TOKEN", raising=False)
    monkeypatch.delenv("DEFAULT_ACCOUNT_ID", raising=False)
    monkeypatch.delenv("GRAPHQL_ENDPOINT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
