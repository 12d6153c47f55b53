"""Shared instances and resources for GitHub Discussions MCP Server."""

import sys
import logging
from typing import Optional

import structlog

from .config import settings

# Redirect stdout to stderr before importing FastMCP
_original_stdout = sys.stdout
sys.stdout = sys.stderr

from fastmcp import FastMCP

# Restore stdout after FastMCP import
sys.stdout = _original_stdout


def _configure_logging():
    """Configure logging for the application, directing all output to a file.

    stdout carries the MCP stdio protocol, so nothing may be logged there.
    """
    # Only configure once
    if logging.getLogger().handlers:
        return

    file_handler = logging.FileHandler(settings.log_file, mode="w", encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(name)s - %(levelname)s - %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.addHandler(file_handler)
    root_logger.setLevel(getattr(logging, settings.log_level))

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event", "logger"]
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Silence noisy loggers
    fastmcp_silent_loggers = ["fastmcp.transport", "fastmcp.protocol"]
    for logger_name in fastmcp_silent_loggers:
        logging.getLogger(logger_name).setLevel(logging.CRITICAL + 1)

    logging.getLogger("github_discussions_mcp").info(
        "Logging configured to file '%s'", settings.log_file
    )


_configure_logging()


from github_discussions_mcp.utils.github_client import GitHubClient

# FastMCP server instance; write tools are hidden in read-only mode
mcp = FastMCP(
    "GitHub Discussions MCP Server",
    instructions=(
        "Tools for reading and writing GitHub Discussions: list and read "
        "discussions, browse categories and comments, start discussions "
        "and reply to them."
    ),
    exclude_tags={"write"} if settings.read_only else None,
)

# GitHub client instance
github_client: Optional[GitHubClient] = None


def initialize_github_client() -> Optional[GitHubClient]:
    """Initialize GitHub client from settings."""
    global github_client
    logger = structlog.get_logger(__name__)
    if not settings.github_token:
        logger.warning("No GitHub token provided")
        return None
    try:
        github_client = GitHubClient(
            settings.github_token,
            base_url=settings.github_api_url,
            timeout=settings.request_timeout,
            max_attempts=settings.max_retries,
        )
        logger.info("GitHub client initialized", base_url=settings.github_api_url)
    except ValueError as e:
        logger.error("Failed to initialize GitHub client", error=str(e))
        github_client = None
    return github_client
