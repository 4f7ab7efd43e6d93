"""Repository collector service."""

import logging

from pydantic import ValidationError

from github_profile_analyzer.exceptions import UnexpectedPayloadError
from github_profile_analyzer.models.repository import RepositorySummary
from github_profile_analyzer.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class RepoCollector:
    """Collects a user's repository summaries."""

    def __init__(self, rest_client: GitHubRestClient):
        self.rest_client = rest_client

    async def collect_repos(self, username: str) -> list[RepositorySummary]:
        """Collect user's public repositories in the order the API returns them.

        Args:
            username: GitHub username, passed through unvalidated

        Returns:
            List of RepositorySummary, possibly empty

        Raises:
            ProfileAnalyzerError: If the request fails or the payload is malformed
        """
        logger.debug("Fetching repositories for %s", username)

        repos_data = await self.rest_client.get_user_repos(username)
        if not all(isinstance(r, dict) for r in repos_data):
            raise UnexpectedPayloadError(
                f"Repository list for {username} contains non-object entries"
            )

        try:
            repos = [RepositorySummary.from_api(r) for r in repos_data]
        except (AttributeError, ValidationError) as e:
            raise UnexpectedPayloadError(
                f"Malformed repository list for {username}: {e}"
            ) from e

        logger.debug("Found %d public repositories", len(repos))
        return repos
