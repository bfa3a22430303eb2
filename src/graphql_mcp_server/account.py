"""Lookup of the active account that scopes GraphQL requests."""

from fastmcp.server.dependencies import get_http_headers

from core.config import get_settings

ACCOUNT_ID_HEADER = "x-account-id"

MISSING_ACCOUNT_MESSAGE = (
    "No currently active accountId. Try listing your accounts (accounts_list) "
    "and then setting an active account (set_active_account)"
)


def get_active_account_id() -> str | None:
    """
    Return the active account id, or None if no account is selected.

    Account selection happens outside this server; the host passes the choice
    in the X-Account-Id header, with DEFAULT_ACCOUNT_ID as a fallback.
    """
    headers = get_http_headers(include_all=True)
    account_id = headers.get(ACCOUNT_ID_HEADER, "").strip()
    if account_id:
        return account_id
    return get_settings().default_account_id.strip() or None
