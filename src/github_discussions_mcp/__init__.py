"""GitHub Discussions MCP Server.

A Model Context Protocol (MCP) server exposing GitHub Discussions
(list, read, create, comment) as tools for AI agents.
"""

__version__ = "0.1.0"
__author__ = "GitHub Discussions MCP Team"
__email__ = "team@github-discussions-mcp.dev"

__all__ = [
    "__version__",
    "__author__",
    "__email__",
]
