"""HTTP client helpers for talking to the GraphQL endpoint."""

from typing import Any

import httpx

from core.config import get_settings
from schemas.introspection import SchemaDocument

from .queries import INTROSPECTION_QUERY


def get_graphql_endpoint() -> str:
    """Get the GraphQL endpoint URL from settings."""
    return get_settings().graphql_endpoint


def get_default_timeout() -> float:
    """Get the default request timeout."""
    return get_settings().graphql_api_timeout


def _get_headers(token: str) -> dict[str, str]:
    """Get common headers for API requests."""
    return {
        "Authorization": f"Bearer {token}",
        "Content-Type": "application/json",
    }


async def graphql_post(
    client: httpx.AsyncClient,
    token: str,
    query: str,
    variables: dict[str, Any] | None = None,
) -> Any:
    """
    POST a GraphQL document to the endpoint and return the decoded JSON body.

    Raises:
        httpx.HTTPStatusError: On a non-2xx response.
        httpx.RequestError: On network failure.
    """
    body: dict[str, Any] = {"query": query}
    if variables is not None:
        body["variables"] = variables
    response = await client.post(
        get_graphql_endpoint(),
        json=body,
        headers=_get_headers(token),
    )
    response.raise_for_status()
    return response.json()


async def fetch_schema(client: httpx.AsyncClient, token: str) -> SchemaDocument:
    """
    Run the introspection query and decode the result.

    Raises:
        SchemaDecodeError: If the response is not a usable introspection result.
    """
    payload = await graphql_post(client, token, INTROSPECTION_QUERY)
    return SchemaDocument.from_introspection(payload)


async def execute_query(
    client: httpx.AsyncClient,
    token: str,
    query: str,
    account_id: str,
) -> Any:
    """Execute a caller-supplied query with `accountId` bound as a variable."""
    return await graphql_post(client, token, query, {"accountId": account_id})
