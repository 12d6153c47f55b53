"""GitHub API client module."""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import GitHubAPIError
from ..models import (
    DiscussionCommentListOptions,
    DiscussionCommentRequest,
    DiscussionListOptions,
    DiscussionRequest,
    GitHubResponse,
    ListOptions,
)

# Configure structured logging
logger = structlog.get_logger(__name__)

DEFAULT_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


class GitHubClient:
    """Async GitHub REST client for the Discussions endpoints.

    Every method issues exactly one logical request and hands back the
    :class:`GitHubResponse` whatever its status code; deciding what counts as
    success is left to the caller. Connection errors and timeouts are retried
    with exponential backoff and, once attempts are exhausted, raised as
    :class:`GitHubAPIError`.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        max_attempts: int = 3,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize GitHub client.

        Args:
            token: GitHub personal access token
            base_url: REST API base URL
            timeout: Per-request timeout in seconds
            max_attempts: Attempts made on connection errors and timeouts
            transport: Optional httpx transport, used by tests
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.max_attempts = max_attempts
        self._transport = transport
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": API_VERSION,
            "User-Agent": "github-discussions-mcp-server/0.1",
        }

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        ) as client:
            return await client.request(
                method,
                path,
                headers=self.headers,
                params=params,
                json=json_body,
            )

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> GitHubResponse:
        """Execute a REST request against the GitHub API.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            params: Optional query parameters
            json_body: Optional JSON request body

        Returns:
            The GitHub response, whatever its status code

        Raises:
            GitHubAPIError: If the request could not be completed
        """
        logger.info("Executing REST request", method=method, path=path, params=params)

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=wait_exponential(multiplier=1, min=4, max=10),
                retry=retry_if_exception_type((httpx.RequestError, httpx.TimeoutException)),
                reraise=True,
            ):
                with attempt:
                    response = await self._send(method, path, params, json_body)
        except httpx.TimeoutException as e:
            logger.error("Request timeout", method=method, path=path, error=str(e))
            raise GitHubAPIError(f"Request timeout: {str(e)}") from e
        except httpx.RequestError as e:
            logger.error("Request error", method=method, path=path, error=str(e))
            raise GitHubAPIError(f"Request failed: {str(e)}") from e

        if response.status_code == 401:
            logger.error("Authentication failed", status_code=response.status_code)
        elif response.status_code in (403, 429) and "rate limit" in response.text.lower():
            logger.warning(
                "Rate limit exceeded",
                status_code=response.status_code,
                reset=response.headers.get("x-ratelimit-reset"),
            )
        elif response.status_code >= 400:
            logger.error("HTTP error", status_code=response.status_code, response_text=response.text)
        else:
            logger.info("REST request successful", status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            data = None

        return GitHubResponse(status_code=response.status_code, data=data, text=response.text)

    async def list_discussions(
        self, owner: str, repo: str, opts: Optional[DiscussionListOptions] = None
    ) -> GitHubResponse:
        """List discussions in a repository."""
        opts = opts or DiscussionListOptions()
        return await self.request(
            "GET", f"{_repo_path(owner, repo)}/discussions", params=opts.to_params()
        )

    async def get_discussion(self, owner: str, repo: str, number: int) -> GitHubResponse:
        """Get a single discussion by number."""
        return await self.request("GET", f"{_repo_path(owner, repo)}/discussions/{number}")

    async def list_discussion_categories(
        self, owner: str, repo: str, opts: Optional[ListOptions] = None
    ) -> GitHubResponse:
        """List the discussion categories of a repository."""
        opts = opts or ListOptions()
        return await self.request(
            "GET",
            f"{_repo_path(owner, repo)}/discussions/categories",
            params=opts.to_params(),
        )

    async def list_discussion_comments(
        self,
        owner: str,
        repo: str,
        number: int,
        opts: Optional[DiscussionCommentListOptions] = None,
    ) -> GitHubResponse:
        """List comments on a discussion."""
        opts = opts or DiscussionCommentListOptions()
        return await self.request(
            "GET",
            f"{_repo_path(owner, repo)}/discussions/{number}/comments",
            params=opts.to_params(),
        )

    async def create_discussion_comment(
        self, owner: str, repo: str, number: int, comment: DiscussionCommentRequest
    ) -> GitHubResponse:
        """Add a comment to a discussion."""
        return await self.request(
            "POST",
            f"{_repo_path(owner, repo)}/discussions/{number}/comments",
            json_body=comment.model_dump(),
        )

    async def create_discussion(
        self, owner: str, repo: str, discussion: DiscussionRequest
    ) -> GitHubResponse:
        """Create a new discussion."""
        return await self.request(
            "POST",
            f"{_repo_path(owner, repo)}/discussions",
            json_body=discussion.model_dump(),
        )
