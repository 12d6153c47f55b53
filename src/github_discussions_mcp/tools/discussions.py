"""Discussion MCP tools: list, get and create discussions."""

from typing import Annotated, Literal

import structlog
from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_github_api_errors
from ..common.github_helpers import get_github_client, render_response, safe_github_request
from ..common.logging_helpers import log_function_call
from ..common.validators import (
    optional_choice,
    optional_pagination,
    parse_pinned,
    require_int,
    require_string,
    validate_owner,
    validate_repo_name,
)
from ..models import DEFAULT_PAGE, DEFAULT_PER_PAGE, DiscussionListOptions, DiscussionRequest
from ..shared import mcp

logger = structlog.get_logger(__name__)


@handle_github_api_errors("list discussions")
@log_function_call("list_discussions_impl")
async def _list_discussions_impl(
    ctx: Context,
    owner: str,
    repo: str,
    direction: str | None = None,
    category_id: str | None = None,
    pinned: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> str:
    """Internal implementation for listing discussions.

    Returns:
        JSON array of discussions exactly as GitHub returned it
    """
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    pagination = optional_pagination(page, per_page)
    opts = DiscussionListOptions(
        page=pagination.page,
        per_page=pagination.per_page,
        direction=optional_choice(direction, "direction", ("asc", "desc")),
        category_id=category_id or None,
        pinned=parse_pinned(pinned),
    )

    github_client = get_github_client()
    await ctx.info(f"Listing discussions in {owner}/{repo}")

    response = await safe_github_request(
        "list discussions", github_client.list_discussions, owner, repo, opts
    )
    return render_response(response, 200, "failed to list discussions")


@handle_github_api_errors("get discussion")
@log_function_call("get_discussion_impl")
async def _get_discussion_impl(
    ctx: Context, owner: str, repo: str, discussion_number: int
) -> str:
    """Internal implementation for fetching a single discussion."""
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    number = require_int(discussion_number, "discussion_number")

    github_client = get_github_client()
    await ctx.info(f"Fetching discussion #{number} in {owner}/{repo}")

    response = await safe_github_request(
        "get discussion", github_client.get_discussion, owner, repo, number
    )
    return render_response(response, 200, "failed to get discussion")


@handle_github_api_errors("create discussion")
@log_function_call("create_discussion_impl")
async def _create_discussion_impl(
    ctx: Context, owner: str, repo: str, title: str, body: str, category_id: str
) -> str:
    """Internal implementation for creating a discussion.

    Succeeds only on 201 Created; the created discussion is returned as JSON.
    """
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    discussion = DiscussionRequest(
        title=require_string(title, "title"),
        body=require_string(body, "body"),
        category_id=require_string(category_id, "category_id"),
    )

    github_client = get_github_client()
    await ctx.info(f"Creating discussion '{discussion.title}' in {owner}/{repo}")

    response = await safe_github_request(
        "create discussion", github_client.create_discussion, owner, repo, discussion
    )
    result = render_response(response, 201, "failed to create discussion")
    logger.info("Discussion created", owner=owner, repo=repo)
    return result


@mcp.tool(name="list_discussions", tags={"discussions", "read"})
@log_function_call("list_discussions")
async def list_discussions(
    ctx: Context,
    owner: Annotated[str, Field(description="Repository owner")],
    repo: Annotated[str, Field(description="Repository name")],
    direction: Annotated[
        Literal["asc", "desc"] | None, Field(description="Sort direction ('asc', 'desc')")
    ] = None,
    category_id: Annotated[str | None, Field(description="Filter by category ID")] = None,
    pinned: Annotated[
        Literal["true", "false"] | None,
        Field(description="Filter by pinned status ('true', 'false')"),
    ] = None,
    page: Annotated[
        int, Field(description="Page number for pagination (min 1)", ge=1)
    ] = DEFAULT_PAGE,
    perPage: Annotated[  # noqa: N803
        int, Field(description="Results per page for pagination (min 1, max 100)", ge=1, le=100)
    ] = DEFAULT_PER_PAGE,
) -> str:
    """List discussions in a GitHub repository with filtering options.

    Returns the discussions as a JSON array, one page at a time. Use `page`
    and `perPage` to walk through larger result sets.
    """
    return await _list_discussions_impl(
        ctx, owner, repo, direction, category_id, pinned, page, perPage
    )


@mcp.tool(name="get_discussion", tags={"discussions", "read"})
@log_function_call("get_discussion")
async def get_discussion(
    ctx: Context,
    owner: Annotated[str, Field(description="The owner of the repository")],
    repo: Annotated[str, Field(description="The name of the repository")],
    discussion_number: Annotated[int, Field(description="The number of the discussion")],
) -> str:
    """Get details of a specific discussion in a GitHub repository."""
    return await _get_discussion_impl(ctx, owner, repo, discussion_number)


@mcp.tool(name="create_discussion", tags={"discussions", "write"})
@log_function_call("create_discussion")
async def create_discussion(
    ctx: Context,
    owner: Annotated[str, Field(description="Repository owner")],
    repo: Annotated[str, Field(description="Repository name")],
    title: Annotated[str, Field(description="Discussion title")],
    body: Annotated[str, Field(description="Discussion body content")],
    category_id: Annotated[str, Field(description="Category ID for the discussion")],
) -> str:
    """Create a new discussion in a GitHub repository.

    Use `get_discussion_categories` first to find a valid `category_id`.
    """
    return await _create_discussion_impl(ctx, owner, repo, title, body, category_id)
