"""Pytest configuration and fixtures for GitHub Discussions MCP Server tests."""

import os
import tempfile
from typing import Any, Callable, Dict, List
from unittest.mock import AsyncMock, MagicMock

# Keep the server's log file out of the working tree
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "github_discussions_mcp_test.log"))

import httpx
import pytest
from fastmcp import Context

from github_discussions_mcp import shared
from github_discussions_mcp.config import Settings
from github_discussions_mcp.utils.github_client import GitHubClient


class RecordingTransport:
    """Builds an httpx.MockTransport that records every request it serves."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with mock values."""
    return Settings(
        github_token="test_token_123",
        log_level="DEBUG"
    )


@pytest.fixture
def mock_context() -> Context:
    """Create a mock FastMCP context for testing."""
    context = MagicMock(spec=Context)
    context.info = AsyncMock()
    context.warning = AsyncMock()
    context.error = AsyncMock()
    context.debug = AsyncMock()
    return context


@pytest.fixture
def make_github_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], tuple]:
    """Factory returning a GitHub client wired to a recording mock transport."""

    def factory(handler):
        recorder = RecordingTransport(handler)
        client = GitHubClient(
            "test_token_123",
            max_attempts=1,
            transport=recorder.transport(),
        )
        return client, recorder

    return factory


@pytest.fixture
def install_github_client(monkeypatch, make_github_client):
    """Install a mock-transport GitHub client as the server's shared client."""

    def install(handler):
        client, recorder = make_github_client(handler)
        monkeypatch.setattr(shared, "github_client", client)
        return recorder

    return install


@pytest.fixture
def mock_github_client(monkeypatch) -> AsyncMock:
    """Install a fully mocked GitHub client as the server's shared client."""
    client = AsyncMock(spec=GitHubClient)
    client.token = "test_token_123"
    monkeypatch.setattr(shared, "github_client", client)
    return client


@pytest.fixture
def sample_discussions() -> List[Dict[str, Any]]:
    """Sample discussions as returned by the REST API."""
    return [
        {
            "number": 123,
            "title": "First Discussion",
            "body": "This is the first test discussion",
            "html_url": "https://github.com/owner/repo/discussions/123",
            "created_at": "2023-01-01T00:00:00Z",
            "category_id": "1",
            "category": {"id": "1", "name": "General"},
            "answer_html_url": "https://github.com/owner/repo/discussions/123#discussioncomment-1234",
        },
        {
            "number": 456,
            "title": "Second Discussion",
            "body": "This is the second test discussion",
            "html_url": "https://github.com/owner/repo/discussions/456",
            "created_at": "2023-02-01T00:00:00Z",
            "category_id": "2",
            "category": {"id": "2", "name": "Q&A"},
        },
    ]


@pytest.fixture
def sample_discussion() -> Dict[str, Any]:
    """A single discussion as returned by the REST API."""
    return {
        "number": 42,
        "title": "Test Discussion",
        "body": "This is a test discussion",
        "html_url": "https://github.com/owner/repo/discussions/42",
        "category_id": "1",
        "category": {"id": "1", "name": "General"},
    }


@pytest.fixture
def sample_categories() -> List[Dict[str, Any]]:
    """Sample discussion categories."""
    return [
        {
            "id": "1",
            "name": "General",
            "description": "General discussions",
            "emoji": ":speech_balloon:",
            "is_answerable": False,
            "created_at": "2023-01-01T00:00:00Z",
        },
        {
            "id": "2",
            "name": "Q&A",
            "description": "Ask questions",
            "emoji": ":question:",
            "is_answerable": True,
            "created_at": "2023-01-01T00:00:00Z",
        },
    ]


@pytest.fixture
def sample_comments() -> List[Dict[str, Any]]:
    """Sample discussion comments."""
    return [
        {
            "id": 1,
            "body": "This is the first comment",
            "html_url": "https://github.com/owner/repo/discussions/42#discussioncomment-1",
            "created_at": "2023-01-01T01:00:00Z",
            "user": {"login": "octocat"},
        },
        {
            "id": 2,
            "body": "This is the second comment",
            "html_url": "https://github.com/owner/repo/discussions/42#discussioncomment-2",
            "created_at": "2023-01-01T02:00:00Z",
            "user": {"login": "hubot"},
        },
    ]
