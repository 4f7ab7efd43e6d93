"""GitHub REST API client."""

import logging
from typing import Any, Optional

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from github_profile_analyzer._version import __version__
from github_profile_analyzer.config import Config, get_config
from github_profile_analyzer.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubTransportError,
    UnexpectedPayloadError,
)

logger = logging.getLogger(__name__)


class GitHubRestClient:
    """Async client for the two GitHub REST endpoints the dashboard reads."""

    def __init__(
        self,
        config: Optional[Config] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or get_config()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        return {
            "Accept": "application/vnd.github+json",
            "User-Agent": f"github-profile-analyzer/{__version__}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.github_api_url,
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubRestClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @staticmethod
    def _body(response: httpx.Response) -> Any:
        """Decode a response body, returning None when it is not JSON."""
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    async def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Send one request and translate failures into package exceptions."""
        client = await self._get_client()
        logger.debug("%s %s", method, endpoint)

        try:
            response = await client.request(method, endpoint, **kwargs)
        except httpx.TransportError as e:
            raise GitHubTransportError(
                f"Request to {endpoint} failed: {e!r}",
                endpoint=endpoint,
            ) from e

        if response.status_code == 404:
            body = self._body(response)
            raise GitHubNotFoundError(
                f"Resource not found: {endpoint}",
                response_body=body if isinstance(body, dict) else None,
            )
        elif not response.is_success:
            body = self._body(response)
            message = body.get("message", "Unknown error") if isinstance(body, dict) else "Unknown error"
            raise GitHubAPIError(
                f"API error {response.status_code}: {message}",
                status_code=response.status_code,
                response_body=body if isinstance(body, dict) else None,
            )

        return response

    async def _request(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        """Make an API request, retrying transport errors when configured to."""
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(GitHubTransportError),
            stop=stop_after_attempt(self.config.max_attempts),
            wait=wait_exponential(multiplier=1, min=1, max=10),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                return await self._send(method, endpoint, **kwargs)

    async def get_list(self, endpoint: str) -> list[Any]:
        """Make a GET request and return the JSON array it answers with."""
        response = await self._request("GET", endpoint)
        data = self._body(response)

        if not isinstance(data, list):
            raise UnexpectedPayloadError(
                f"Expected a JSON array from {endpoint} "
                f"(HTTP {response.status_code}), got {type(data).__name__}",
                status_code=response.status_code,
            )
        return data

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        """Get user's public repositories (first page only, API order)."""
        return await self.get_list(f"/users/{username}/repos")

    async def get_commit_activity(self, owner: str, repo: str) -> list[dict[str, Any]]:
        """Get the last year of weekly commit counts for a repository."""
        return await self.get_list(f"/repos/{owner}/{repo}/stats/commit_activity")
