"""Common error handling utilities."""

from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import structlog
from fastmcp.exceptions import ToolError

from ..exceptions import GitHubAPIError, UnexpectedStatusError, ValidationError

logger = structlog.get_logger(__name__)

T = TypeVar('T')


def handle_github_api_errors(operation_name: str):
    """Decorator to handle GitHub API errors consistently.

    Parameter errors and unexpected HTTP statuses become tool-level errors
    the agent can read; transport failures propagate as hard errors.

    Args:
        operation_name: Name of the operation for logging
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except ToolError:
                raise
            except ValidationError as e:
                logger.warning(
                    f"Invalid parameters for {operation_name}",
                    error=e.message,
                    field_errors=e.field_errors,
                )
                raise ToolError(e.message) from e
            except UnexpectedStatusError as e:
                logger.warning(
                    f"Unexpected status for {operation_name}",
                    status_code=e.status_code,
                    expected_status=e.expected_status,
                )
                raise ToolError(e.message) from e
            except GitHubAPIError:
                # Re-raise GitHub API errors as-is
                raise
            except Exception as e:
                logger.error(
                    f"Unexpected error in {operation_name}",
                    error=str(e),
                    error_type=type(e).__name__
                )
                raise GitHubAPIError(
                    f"Failed to {operation_name}: {str(e)}"
                ) from e
        return wrapper
    return decorator
