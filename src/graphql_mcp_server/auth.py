"""Authentication utilities for the GraphQL MCP server."""

from fastmcp.server.dependencies import get_http_headers

from core.config import get_settings


class AuthenticationError(Exception):
    """Raised when no API token is available."""

    pass


def get_bearer_token() -> str:
    """
    Get the API token for outgoing GraphQL requests.

    The Bearer token from the incoming Authorization header is forwarded as-is.
    Without one (e.g. over stdio), the configured GRAPHQL_API_TOKEN is used.

    Returns:
        The token string (without 'Bearer ' prefix).

    Raises:
        AuthenticationError: If neither a valid Bearer header nor a configured
            token is present.
    """
    headers = get_http_headers(include_all=True)
    auth_header = headers.get("authorization", "")

    if auth_header:
        parts = auth_header.split(maxsplit=1)
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise AuthenticationError("Missing or invalid Authorization header")
        return parts[1]

    token = get_settings().graphql_api_token
    if not token:
        raise AuthenticationError("Missing or invalid Authorization header")
    return token
