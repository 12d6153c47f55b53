"""MCP tools implementation package.

This package contains all MCP tool implementations for the GitHub Discussions
MCP Server: discussions, discussion categories and discussion comments.
"""

# Import all MCP tools to register them
from . import categories, comments, discussions

__all__ = ["discussions", "categories", "comments"]
