"""FastMCP server exposing GraphQL schema exploration and query tools."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

import httpx
from fastmcp import FastMCP
from pydantic import Field

from schemas.introspection import SchemaDecodeError
from services.schema_search import build_search_response, extract_key_terms, find_relevant_types
from shared.api_errors import describe_http_error, describe_request_error
from shared.mcp_utils import load_instructions, load_tool_descriptions

from .account import MISSING_ACCOUNT_MESSAGE, get_active_account_id
from .api_client import execute_query, fetch_schema, get_default_timeout
from .auth import AuthenticationError, get_bearer_token

logger = logging.getLogger(__name__)

_DIR = Path(__file__).parent
_TOOLS = load_tool_descriptions(_DIR, required_tools=("explore_graphql_schema", "graphql_query"))

NO_TERMS_MESSAGE = (
    "I couldn't identify any specific terms to search for. "
    "Try being more specific about what you're looking for."
)

# Module-level client for connection reuse (can be overridden in tests)
# Created lazily by _get_http_client(), closed by cleanup() when the server shuts down
_http_client: httpx.AsyncClient | None = None


async def _get_http_client() -> httpx.AsyncClient:
    """Get or create the HTTP client for API requests."""
    global _http_client  # noqa: PLW0603
    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.AsyncClient(timeout=get_default_timeout())
    return _http_client


async def cleanup() -> None:
    """Close the shared HTTP client."""
    global _http_client  # noqa: PLW0603
    if _http_client is not None and not _http_client.is_closed:
        await _http_client.aclose()
    _http_client = None


@asynccontextmanager
async def lifespan(_: FastMCP) -> AsyncIterator[None]:
    """Server lifespan handler: closes the shared HTTP client on shutdown."""
    try:
        yield
    finally:
        await cleanup()


mcp = FastMCP(
    name="GraphQL MCP Server",
    instructions=load_instructions(_DIR),
    lifespan=lifespan,
)


def _describe_error(e: Exception) -> str:
    """Turn a failure from the API round-trip into a message for the caller."""
    if isinstance(e, httpx.HTTPStatusError):
        info = describe_http_error(e)
        logger.warning("GraphQL API returned %s (%s)", info.status, info.category)
        return info.message
    if isinstance(e, httpx.RequestError):
        logger.warning("GraphQL API request failed: %s", e)
        return describe_request_error(e)
    if isinstance(e, (AuthenticationError, SchemaDecodeError, ValueError)):
        logger.warning("%s: %s", type(e).__name__, e)
        return str(e)
    logger.exception("Unexpected error calling GraphQL API")
    return str(e) or type(e).__name__


@mcp.tool(
    description=_TOOLS["explore_graphql_schema"]["description"],
    annotations={"readOnlyHint": True},
)
async def explore_graphql_schema(
    searchTerm: Annotated[  # noqa: N803
        str,
        Field(description=_TOOLS["explore_graphql_schema"]["parameters"]["searchTerm"]),
    ],
    page: Annotated[
        int,
        Field(ge=1, description=_TOOLS["explore_graphql_schema"]["parameters"]["page"]),
    ] = 1,
) -> str:
    """
    Search the introspected schema for types related to a natural-language query.

    Examples:
    - "What DNS analytics fields are available?" searches for "dns analytics"
    - "firewall events", page=2 shows matches 6-10
    """
    if not get_active_account_id():
        return MISSING_ACCOUNT_MESSAGE

    try:
        client = await _get_http_client()
        schema = await fetch_schema(client, get_bearer_token())

        terms = extract_key_terms(searchTerm)
        if not terms:
            return NO_TERMS_MESSAGE

        matches = find_relevant_types(schema, terms)
        if not matches:
            return (
                f'No data found related to "{" ".join(terms)}". '
                "Try using different terms or being more specific."
            )

        return build_search_response(terms, matches, page)
    except Exception as e:
        return f"Error exploring schema: {_describe_error(e)}"


@mcp.tool(
    description=_TOOLS["graphql_query"]["description"],
    annotations={"readOnlyHint": False},
)
async def graphql_query(
    query: Annotated[str, Field(description=_TOOLS["graphql_query"]["parameters"]["query"])],
) -> str:
    """Forward a GraphQL query to the API and return the JSON response as text."""
    account_id = get_active_account_id()
    if not account_id:
        return MISSING_ACCOUNT_MESSAGE

    try:
        client = await _get_http_client()
        data = await execute_query(client, get_bearer_token(), query, account_id)
        return json.dumps(data, indent=2)
    except Exception as e:
        return f"Error executing GraphQL query: {_describe_error(e)}"
