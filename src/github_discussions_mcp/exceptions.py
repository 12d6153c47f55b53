"""Custom exception classes for GitHub Discussions MCP Server."""

from typing import Any


class GitHubDiscussionsMCPError(Exception):
    """Base exception class for GitHub Discussions MCP Server."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self) -> str:
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class GitHubAPIError(GitHubDiscussionsMCPError):
    """Base exception class for GitHub API related errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        status_code: int | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message, error_code, details)
        self.status_code = status_code
        self.response_data = response_data


class UnexpectedStatusError(GitHubAPIError):
    """Exception raised when GitHub answers with a status other than the expected one.

    The raw response body is kept verbatim and appended to the message, so
    the agent sees exactly what GitHub returned.
    """

    def __init__(
        self,
        operation_message: str,
        status_code: int,
        expected_status: int,
        body: str,
        **kwargs,
    ) -> None:
        super().__init__(
            f"{operation_message}: {body}",
            status_code=status_code,
            details={"expected_status": expected_status},
            **kwargs,
        )
        self.body = body
        self.expected_status = expected_status


class ValidationError(GitHubDiscussionsMCPError):
    """Exception raised when tool parameter validation fails."""

    def __init__(
        self, message: str, field_errors: dict[str, str] | None = None, **kwargs
    ) -> None:
        super().__init__(message, error_code="VALIDATION_ERROR", **kwargs)
        self.field_errors = field_errors or {}


class ConfigurationError(GitHubDiscussionsMCPError):
    """Exception raised when there are configuration issues."""

    def __init__(self, message: str = "Configuration error", **kwargs) -> None:
        super().__init__(message, error_code="CONFIGURATION_ERROR", **kwargs)
