"""Discussion categories MCP tool."""

from typing import Annotated

from fastmcp import Context
from pydantic import Field

from ..common.error_handlers import handle_github_api_errors
from ..common.github_helpers import get_github_client, render_response, safe_github_request
from ..common.logging_helpers import log_function_call
from ..common.validators import optional_pagination, validate_owner, validate_repo_name
from ..models import DEFAULT_PAGE, DEFAULT_PER_PAGE
from ..shared import mcp


@handle_github_api_errors("get discussion categories")
@log_function_call("get_discussion_categories_impl")
async def _get_discussion_categories_impl(
    ctx: Context,
    owner: str,
    repo: str,
    page: int | None = None,
    per_page: int | None = None,
) -> str:
    owner = validate_owner(owner)
    repo = validate_repo_name(repo)
    opts = optional_pagination(page, per_page)

    github_client = get_github_client()
    await ctx.info(f"Fetching discussion categories for {owner}/{repo}")

    response = await safe_github_request(
        "get discussion categories",
        github_client.list_discussion_categories,
        owner,
        repo,
        opts,
    )
    return render_response(response, 200, "failed to get discussion categories")


@mcp.tool(name="get_discussion_categories", tags={"discussions", "read"})
@log_function_call("get_discussion_categories")
async def get_discussion_categories(
    ctx: Context,
    owner: Annotated[str, Field(description="Repository owner")],
    repo: Annotated[str, Field(description="Repository name")],
    page: Annotated[
        int, Field(description="Page number for pagination (min 1)", ge=1)
    ] = DEFAULT_PAGE,
    perPage: Annotated[  # noqa: N803
        int, Field(description="Results per page for pagination (min 1, max 100)", ge=1, le=100)
    ] = DEFAULT_PER_PAGE,
) -> str:
    """Get discussion categories in a GitHub repository.

    Category IDs returned here are what `create_discussion` and the
    `category_id` filter of `list_discussions` expect.
    """
    return await _get_discussion_categories_impl(ctx, owner, repo, page, perPage)
