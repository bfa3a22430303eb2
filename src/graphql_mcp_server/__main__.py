"""Entry point for running the GraphQL MCP server."""

import logging

from core.config import get_settings

from .server import mcp

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve over the configured transport."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting GraphQL MCP server (%s transport, endpoint %s)",
        settings.mcp_transport,
        settings.graphql_endpoint,
    )
    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport="http",
            host=settings.mcp_host,
            port=settings.mcp_port,
            stateless_http=True,
        )


if __name__ == "__main__":
    main()
