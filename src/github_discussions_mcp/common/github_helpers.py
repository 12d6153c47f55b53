"""Common GitHub client utilities."""

import json

import structlog

from ..exceptions import ConfigurationError, GitHubAPIError, UnexpectedStatusError
from ..models import GitHubResponse
from ..utils.github_client import GitHubClient

logger = structlog.get_logger(__name__)


def ensure_github_client(github_client: GitHubClient | None) -> GitHubClient:
    """Ensure a GitHub client is available and properly configured.

    Args:
        github_client: Optional GitHub client instance

    Returns:
        Validated GitHub client

    Raises:
        ConfigurationError: If client is not available or not configured
    """
    if github_client is None:
        raise ConfigurationError(
            "GitHub client not initialized; set GITHUB_TOKEN to enable it"
        )

    if not hasattr(github_client, 'token') or not github_client.token:
        raise ConfigurationError("GitHub client not properly configured with token")

    return github_client


async def safe_github_request(operation: str, request_func, *args, **kwargs) -> GitHubResponse:
    """Execute a GitHub API request, logging around it.

    Args:
        operation: Description of the operation for logging
        request_func: The GitHub client method to call
        *args: Arguments to pass to the request function
        **kwargs: Keyword arguments to pass to the request function

    Returns:
        The GitHub response

    Raises:
        GitHubAPIError: If the request could not be completed
    """
    try:
        logger.debug(f"Executing GitHub API request: {operation}")
        result = await request_func(*args, **kwargs)
        logger.debug(f"GitHub API request completed: {operation}", status_code=result.status_code)
        return result
    except GitHubAPIError:
        raise
    except Exception as e:
        logger.error(
            f"GitHub API request failed for {operation}",
            original_error=str(e),
            original_error_type=type(e).__name__
        )
        raise GitHubAPIError(f"GitHub API request failed for {operation}: {str(e)}") from e


def render_response(response: GitHubResponse, expected_status: int, error_message: str) -> str:
    """Check the status of a GitHub response and serialize its payload.

    Args:
        response: Response returned by the GitHub client
        expected_status: The one status code that counts as success
        error_message: Prefix for the error raised on any other status

    Returns:
        The response payload re-serialized as JSON text

    Raises:
        UnexpectedStatusError: If the status differs from ``expected_status``
    """
    if response.status_code != expected_status:
        raise UnexpectedStatusError(
            error_message,
            status_code=response.status_code,
            expected_status=expected_status,
            body=response.text,
            response_data=response.data,
        )
    return json.dumps(response.data, ensure_ascii=False)


def get_github_client() -> GitHubClient:
    """Return the shared GitHub client, creating it from settings on first use."""
    from .. import shared

    return ensure_github_client(shared.github_client or shared.initialize_github_client())
