"""Discussion comment MCP tools."""

from typing import Annotated

import structlog
from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_github_api_errors
from ..common.github_helpers import get_github_client, render_response, safe_github_request
from ..common.logging_helpers import log_function_call
from ..common.validators import (
    optional_pagination,
    require_int,
    require_string,
    validate_owner,
    validate_repo_name,
)
from ..models import (
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DiscussionCommentListOptions,
    DiscussionCommentRequest,
)
from ..shared import mcp

logger = structlog.get_logger(__name__)


@handle_github_api_errors("get discussion comments")
@log_function_call("get_discussion_comments_impl")
async def _get_discussion_comments_impl(
    ctx: Context,
    owner: str,
    repo: str,
    discussion_number: int,
    page: int | None = None,
    per_page: int | None = None,
) -> str:
    """Internal implementation for listing the comments of a discussion."""
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    number = require_int(discussion_number, "discussion_number")
    pagination = optional_pagination(page, per_page)
    opts = DiscussionCommentListOptions(page=pagination.page, per_page=pagination.per_page)

    github_client = get_github_client()
    await ctx.info(f"Fetching comments for discussion #{number} in {owner}/{repo}")

    response = await safe_github_request(
        "get discussion comments",
        github_client.list_discussion_comments,
        owner,
        repo,
        number,
        opts,
    )
    return render_response(response, 200, "failed to get discussion comments")


@handle_github_api_errors("create discussion comment")
@log_function_call("add_discussion_comment_impl")
async def _add_discussion_comment_impl(
    ctx: Context, owner: str, repo: str, discussion_number: int, body: str
) -> str:
    """Internal implementation for commenting on a discussion.

    All parameters are checked before the client is touched, so an empty
    ``body`` never reaches GitHub.
    """
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    number = require_int(discussion_number, "discussion_number")
    comment = DiscussionCommentRequest(body=require_string(body, "body"))

    github_client = get_github_client()
    await ctx.info(f"Adding comment to discussion #{number} in {owner}/{repo}")

    response = await safe_github_request(
        "create discussion comment",
        github_client.create_discussion_comment,
        owner,
        repo,
        number,
        comment,
    )
    result = render_response(response, 201, "failed to create discussion comment")
    logger.info("Discussion comment created", owner=owner, repo=repo, discussion_number=number)
    return result


@mcp.tool(name="get_discussion_comments", tags={"discussions", "read"})
@log_function_call("get_discussion_comments")
async def get_discussion_comments(
    ctx: Context,
    owner: Annotated[str, Field(description="Repository owner")],
    repo: Annotated[str, Field(description="Repository name")],
    discussion_number: Annotated[int, Field(description="Discussion number")],
    page: Annotated[
        int, Field(description="Page number for pagination (min 1)", ge=1)
    ] = DEFAULT_PAGE,
    perPage: Annotated[  # noqa: N803
        int, Field(description="Results per page for pagination (min 1, max 100)", ge=1, le=100)
    ] = DEFAULT_PER_PAGE,
) -> str:
    """Get comments for a GitHub discussion."""
    return await _get_discussion_comments_impl(
        ctx, owner, repo, discussion_number, page, perPage
    )


@mcp.tool(name="add_discussion_comment", tags={"discussions", "write"})
@log_function_call("add_discussion_comment")
async def add_discussion_comment(
    ctx: Context,
    owner: Annotated[str, Field(description="Repository owner")],
    repo: Annotated[str, Field(description="Repository name")],
    discussion_number: Annotated[int, Field(description="Discussion number to comment on")],
    body: Annotated[str, Field(description="Comment text")],
) -> str:
    """Add a comment to an existing discussion."""
    return await _add_discussion_comment_impl(ctx, owner, repo, discussion_number, body)
