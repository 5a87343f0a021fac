"""
Shared pytest fixtures for the activity CLI tests.

HTTP traffic never leaves the process: services are built on top of an
httpx.Client whose transport is an httpx.MockTransport driven by a handler
supplied by each test.
"""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from services.github import GitHubService

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def make_service():
    """
    Return a factory building a GitHubService around a mock transport.

    Clients created by the factory are closed when the test finishes.
    """
    clients = []

    def _make(handler: Handler) -> GitHubService:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return GitHubService(client=client, base_url="https://api.github.com")

    yield _make

    for client in clients:
        client.close()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep configuration variables from the host out of the tests."""
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


# ---------------------------------------------------------------------------
# Reusable payload factory helpers
# ---------------------------------------------------------------------------


def make_event(
    type: str = "PushEvent",
    repo_name: str = "octocat/Hello-World",
    size: Optional[int] = None,
    **extra: Any,
) -> dict[str, Any]:
    """Return a raw event dict shaped like the GitHub API response."""
    event: dict[str, Any] = {
        "type": type,
        "repo": {
            "name": repo_name,
            "url": f"https://api.github.com/repos/{repo_name}",
        },
        "created_at": "2024-01-01T12:00:00Z",
    }
    if size is not None:
        event["payload"] = {"size": size}
    event.update(extra)
    return event


def json_response(body: Any, status_code: int = 200) -> Handler:
    """Return a handler answering every request with ``body`` as JSON."""

    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=json.dumps(body).encode())

    return _handler
