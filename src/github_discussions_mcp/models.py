"""Data models for GitHub Discussions MCP Server.

Discussions, categories and comments themselves are owned by GitHub and are
passed through untouched; the models here describe what we *send*: query
options for the list endpoints and JSON bodies for the create endpoints.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 30
MAX_PER_PAGE = 100


class ListOptions(BaseModel):
    """Pagination options shared by every list endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(default=DEFAULT_PAGE, ge=1, description="Page number")
    per_page: int = Field(
        default=DEFAULT_PER_PAGE,
        ge=1,
        le=MAX_PER_PAGE,
        alias="perPage",
        description="Results per page",
    )

    def to_params(self) -> dict[str, str]:
        """Render the options as REST query parameters."""
        return {"page": str(self.page), "per_page": str(self.per_page)}


class DiscussionListOptions(ListOptions):
    """Filters for listing discussions in a repository."""

    direction: Literal["asc", "desc"] | None = Field(
        default=None, description="Sort direction"
    )
    category_id: str | None = Field(default=None, description="Filter by category ID")
    pinned: bool | None = Field(default=None, description="Filter by pinned status")

    def to_params(self) -> dict[str, str]:
        params = super().to_params()
        if self.direction:
            params["direction"] = self.direction
        if self.category_id:
            params["category"] = self.category_id
        if self.pinned is not None:
            params["pinned"] = "true" if self.pinned else "false"
        return params


class DiscussionCommentListOptions(ListOptions):
    """Options for listing comments on a discussion."""


class DiscussionRequest(BaseModel):
    """Body of a create-discussion request."""

    title: str = Field(description="Discussion title")
    body: str = Field(description="Discussion body content")
    category_id: str = Field(description="Category ID for the discussion")


class DiscussionCommentRequest(BaseModel):
    """Body of a create-comment request."""

    body: str = Field(description="Comment text")


class GitHubResponse(BaseModel):
    """A single REST response as returned by GitHub.

    ``data`` holds the decoded JSON payload, or None when the body was not
    JSON; ``text`` always holds the raw body.
    """

    status_code: int = Field(description="HTTP status code")
    data: Any = Field(default=None, description="Decoded JSON body")
    text: str = Field(default="", description="Raw response body")
