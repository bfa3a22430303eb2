"""
Shared API error parsing for the GraphQL MCP server.

The parsing extracts semantic meaning from HTTP errors returned by the GraphQL
endpoint. Tools render the parsed message as text rather than raising, so the
message always carries the HTTP status for the caller.
"""

from dataclasses import dataclass
from typing import Any, Literal

import httpx

ErrorCategory = Literal[
    "auth",          # 401 - Invalid or expired token
    "forbidden",     # 403 - Token lacks permission for the account
    "not_found",     # 404 - Endpoint not found
    "rate_limited",  # 429 - Too many requests
    "validation",    # 400/422 - Malformed request body
    "internal",      # 5xx or unexpected errors
]

_DEFAULT_MESSAGES: dict[ErrorCategory, str] = {
    "auth": "Invalid or expired token",
    "forbidden": "Access denied",
    "not_found": "Endpoint not found",
    "rate_limited": "Rate limit exceeded",
    "validation": "Invalid request",
    "internal": "API error",
}


@dataclass
class ParsedApiError:
    """Parsed API error with semantic category and message."""

    category: ErrorCategory
    status: int
    message: str


def _categorize(status: int) -> ErrorCategory:  # noqa: PLR0911
    if status == 401:
        return "auth"
    if status == 403:
        return "forbidden"
    if status == 404:
        return "not_found"
    if status == 429:
        return "rate_limited"
    if status in (400, 422):
        return "validation"
    return "internal"


def describe_http_error(e: httpx.HTTPStatusError) -> ParsedApiError:
    """
    Parse HTTP error into a semantic category and a status-bearing message.

    Args:
        e: The HTTP status error from httpx

    Returns:
        ParsedApiError whose message looks like
        "HTTP error 403: Access denied (Authentication error)"
    """
    status = e.response.status_code
    category = _categorize(status)
    message = f"HTTP error {status}: {_DEFAULT_MESSAGES[category]}"

    details = extract_error_messages(_safe_get_body(e))
    if details:
        message += f" ({'; '.join(details)})"
    return ParsedApiError(category, status, message)


def describe_request_error(e: httpx.RequestError) -> str:
    """Describe a network-level failure (connection refused, timeout, ...)."""
    return f"API unavailable: {e}"


def extract_error_messages(body: Any) -> list[str]:
    """
    Pull human-readable messages out of an API error body.

    Handles the GraphQL `{"errors": [{"message": ...}]}` envelope, which the
    Cloudflare API also uses for REST-level failures.
    """
    if not isinstance(body, dict):
        return []
    errors = body.get("errors")
    if not isinstance(errors, list):
        return []
    messages = []
    for err in errors:
        if isinstance(err, dict) and err.get("message"):
            messages.append(str(err["message"]))
        elif isinstance(err, str) and err:
            messages.append(err)
    return messages


def _safe_get_body(e: httpx.HTTPStatusError) -> Any:
    """Safely decode the error response body."""
    try:
        return e.response.json()
    except ValueError:
        return None
