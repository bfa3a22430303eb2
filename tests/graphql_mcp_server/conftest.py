"""Test fixtures for GraphQL MCP server tests."""

from typing import Any
from unittest.mock import patch

import pytest
import respx

from core.config import CLOUDFLARE_GRAPHQL_ENDPOINT
from graphql_mcp_server import server

GRAPHQL_URL = CLOUDFLARE_GRAPHQL_ENDPOINT


@pytest.fixture
def mock_api() -> respx.MockRouter:
    """Context manager for mocking GraphQL API responses."""
    # Reset the module-level HTTP client to ensure respx captures requests
    server._http_client = None
    with respx.mock(assert_all_called=False) as respx_mock:
        yield respx_mock
    server._http_client = None


@pytest.fixture
def mock_auth():
    """Mock the bearer token for tool tests."""
    with patch("graphql_mcp_server.server.get_bearer_token") as mock:
        mock.return_value = "cf_test_token"
        yield mock


@pytest.fixture
def mock_account():
    """Mock an active account for tool tests."""
    with patch("graphql_mcp_server.server.get_active_account_id") as mock:
        mock.return_value = "acc_123"
        yield mock


def _field(name: str, type_name: str | None, description: str | None = None) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "type": {"name": type_name, "kind": "SCALAR", "ofType": None},
    }


@pytest.fixture
def sample_introspection() -> dict[str, Any]:
    """Sample introspection response data."""
    return {
        "data": {
            "__schema": {
                "types": [
                    {
                        "name": "Query",
                        "kind": "OBJECT",
                        "description": None,
                        "fields": [_field("viewer", "viewer")],
                    },
                    {
                        "name": "dnsAnalyticsAdaptive",
                        "kind": "OBJECT",
                        "description": "DNS queries answered by the authoritative nameservers",
                        "fields": [
                            _field("queryName", "string", "Name of the queried record"),
                            _field("responseCode", "string"),
                            {
                                "name": "dimensions",
                                "description": None,
                                "type": {
                                    "name": None,
                                    "kind": "NON_NULL",
                                    "ofType": {"name": "dnsDimensions", "kind": "OBJECT"},
                                },
                            },
                        ],
                    },
                    {
                        "name": "firewallEventsAdaptive",
                        "kind": "OBJECT",
                        "description": "Firewall events",
                        "fields": [_field("action", "string"), _field("clientIP", "string")],
                    },
                    {
                        "name": "String",
                        "kind": "SCALAR",
                        "description": "UTF-8 text",
                        "fields": None,
                    },
                ],
            },
        },
    }


@pytest.fixture
def large_introspection() -> dict[str, Any]:
    """Introspection response with seven zone types, each with twelve fields."""
    types = [
        {
            "name": f"zoneGroup{i}",
            "kind": "OBJECT",
            "description": None,
            "fields": [_field(f"metric{j}", "uint64") for j in range(12)],
        }
        for i in range(7)
    ]
    return {"data": {"__schema": {"types": types}}}
