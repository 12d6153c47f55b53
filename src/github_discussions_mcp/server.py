"""MCP server main entry point."""

import sys

import structlog

from . import shared
from .config import settings
from .shared import mcp

# Import tools to register them
from .tools import categories, comments, discussions  # noqa: F401

# Logging is configured in shared.py when the module is imported

# Get structured logger
logger = structlog.get_logger(__name__)
logger.info(
    "GitHub Discussions MCP Server module loaded",
    log_level=settings.log_level,
    read_only=settings.read_only,
)


def initialize_server() -> None:
    """Initialize server components."""
    if settings.github_token:
        shared.initialize_github_client()
    else:
        logger.warning("No GitHub token provided; tools will fail until GITHUB_TOKEN is set")


def main() -> None:
    """Main entry point for the MCP server."""

    try:
        initialize_server()

        logger.info(
            "Starting GitHub Discussions MCP Server from main()",
            log_level=settings.log_level,
            transport=settings.transport,
        )

        # Run the MCP server
        mcp.run(transport=settings.transport)

    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error("Server failed to start", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
