"""Configuration management module.

This module handles all configuration settings for the GitHub Discussions MCP Server,
including GitHub personal access token authentication, the REST endpoint, and logging.
"""

from pydantic import field_validator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings configuration.

    This class manages all configuration settings for the GitHub Discussions MCP Server.
    Settings can be loaded from environment variables or .env file.

    Attributes:
        github_token: GitHub personal access token for API authentication
        github_api_url: Base URL of the GitHub REST API
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: File receiving all log output
        request_timeout: Timeout in seconds for a single REST request
        max_retries: Attempts made on connection errors and timeouts
        read_only: Hide tools that modify discussions
        transport: MCP transport used by ``main()``
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    log_level: str = "INFO"
    log_file: str = "mcp_server_debug.log"
    request_timeout: float = Field(default=30.0, gt=0)
    max_retries: int = Field(default=3, ge=1)
    read_only: bool = False
    transport: str = "stdio"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        normalized = v.upper()
        if normalized not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return normalized

    @field_validator('github_api_url')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator('transport')
    @classmethod
    def validate_transport(cls, v: str) -> str:
        """Validate the MCP transport name."""
        valid_transports = {"stdio", "http", "sse"}
        normalized = v.lower()
        if normalized not in valid_transports:
            raise ValueError(f"Invalid transport: {v}. Must be one of {valid_transports}")
        return normalized


# Global settings instance
settings = Settings()
