"""Tests for the MCP authentication utilities."""

from unittest.mock import patch

import pytest

from graphql_mcp_server.auth import AuthenticationError, get_bearer_token


def test__get_bearer_token__valid() -> None:
    """Test extracting valid Bearer token."""
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {"authorization": "Bearer cf_test_token"}

        token = get_bearer_token()

        assert token == "cf_test_token"


def test__get_bearer_token__case_insensitive_bearer() -> None:
    """Test Bearer prefix is case-insensitive."""
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {"authorization": "bearer cf_test_token"}

        assert get_bearer_token() == "cf_test_token"


def test__get_bearer_token__invalid_scheme() -> None:
    """Test error when not using Bearer scheme."""
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {"authorization": "Basic abc123"}

        with pytest.raises(AuthenticationError, match="Missing or invalid"):
            get_bearer_token()


def test__get_bearer_token__empty_token() -> None:
    """Test error when token is empty (Bearer with trailing space only)."""
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {"authorization": "Bearer "}

        with pytest.raises(AuthenticationError, match="Missing or invalid"):
            get_bearer_token()


def test__get_bearer_token__missing_header_without_fallback() -> None:
    """Test error when no header and no configured token."""
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {}

        with pytest.raises(AuthenticationError, match="Missing or invalid"):
            get_bearer_token()


def test__get_bearer_token__configured_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test GRAPHQL_API_TOKEN is used when the request has no Authorization header."""
    monkeypatch.setenv("GRAPHQL_API_TOKEN", "cf_env_token")
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {}

        assert get_bearer_token() == "cf_env_token"


def test__get_bearer_token__header_wins_over_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GRAPHQL_API_TOKEN", "cf_env_token")
    with patch("graphql_mcp_server.auth.get_http_headers") as mock_headers:
        mock_headers.return_value = {"authorization": "Bearer cf_header_token"}

        assert get_bearer_token() == "cf_header_token"
