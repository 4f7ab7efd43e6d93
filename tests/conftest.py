"""Pytest configuration and fixtures."""

import asyncio
from typing import Any

import httpx
import pytest

from github_profile_analyzer.config import Config, set_config

# 2023-11-19 00:00:00 UTC, a Sunday
WEEK_START = 1700352000
SECONDS_PER_WEEK = 7 * 86400


def repo_payload(
    name: str,
    owner: str = "octocat",
    repo_id: int = 1,
    description: str | None = "A test repository",
    stars: int = 0,
    forks: int = 0,
) -> dict[str, Any]:
    """Repository object shaped like the /users/{username}/repos response."""
    return {
        "id": repo_id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "description": description,
        "stargazers_count": stars,
        "forks_count": forks,
        "owner": {"login": owner, "id": 583231},
        "fork": False,
    }


def weeks_payload(count: int, start: int = WEEK_START, offset: int = 0) -> list[dict[str, Any]]:
    """Weekly commit buckets whose day values run 1, 2, 3... in order (plus offset)."""
    weeks = []
    for w in range(count):
        days = [offset + w * 7 + d + 1 for d in range(7)]
        weeks.append({"week": start + w * SECONDS_PER_WEEK, "total": sum(days), "days": days})
    return weeks


class FakeGitHubAPI:
    """Serves canned JSON per request path through an httpx.MockTransport.

    A path can be gated: its request then waits until the gate's event is set,
    which lets tests control the order in which overlapping requests resolve.
    Missing paths answer 404.
    """

    def __init__(self, routes: dict[str, tuple[int, Any]] | None = None):
        self.routes = dict(routes or {})
        self.gates: dict[str, asyncio.Event] = {}
        self.failures: dict[str, Exception] = {}
        self.requested: list[str] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def fail(self, path: str, exc: Exception) -> None:
        self.failures[path] = exc

    def gate(self, path: str) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[path] = event
        return event

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        self.requested.append(path)

        if path in self.gates:
            await self.gates[path].wait()
        if path in self.failures:
            raise self.failures[path]
        if path not in self.routes:
            return httpx.Response(404, json={"message": "Not Found"})

        status, body = self.routes[path]
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    async def wait_for_request(self, path: str, timeout: float = 2.0) -> None:
        """Wait until `path` has been requested at least once."""

        async def _poll():
            while path not in self.requested:
                await asyncio.sleep(0)

        await asyncio.wait_for(_poll(), timeout)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(
        github_api_url="https://api.github.com",
        default_username="octocat",
        request_timeout=5.0,
    )
    set_config(config)
    return config


@pytest.fixture
def unguarded_config():
    """Configuration that lets every completion write to the state."""
    config = Config(
        github_api_url="https://api.github.com",
        default_username="octocat",
        request_timeout=5.0,
        guard_stale_cycles=False,
    )
    set_config(config)
    return config


@pytest.fixture
def fake_api():
    """Fake API with one user, one repository and five weeks of activity."""
    api = FakeGitHubAPI()
    api.add(
        "/users/octocat/repos",
        [
            repo_payload("hello-world", repo_id=1, stars=5, forks=2),
            repo_payload("spoon-knife", repo_id=2, description=None, stars=12, forks=140),
        ],
    )
    api.add("/repos/octocat/hello-world/stats/commit_activity", weeks_payload(5))
    return api
