"""Commit activity collector service."""

import logging
from datetime import timezone, tzinfo

from pydantic import ValidationError

from github_profile_analyzer.exceptions import UnexpectedPayloadError
from github_profile_analyzer.models.commit_activity import (
    DAILY_POINT_LIMIT,
    DailyCommitPoint,
    WeeklyCommitBucket,
    expand_weekly_buckets,
)
from github_profile_analyzer.services.github_rest_client import GitHubRestClient

logger = logging.getLogger(__name__)


class CommitActivityCollector:
    """Collects weekly commit activity and expands it into daily points."""

    def __init__(
        self,
        rest_client: GitHubRestClient,
        tz: tzinfo | None = timezone.utc,
    ):
        self.rest_client = rest_client
        self.tz = tz

    async def collect_weekly(self, owner: str, repo: str) -> list[WeeklyCommitBucket]:
        """Fetch the raw weekly buckets for a repository."""
        logger.debug("Fetching commit activity for %s/%s", owner, repo)

        weeks_data = await self.rest_client.get_commit_activity(owner, repo)
        try:
            return [WeeklyCommitBucket.from_api(w) for w in weeks_data]
        except (AttributeError, ValidationError) as e:
            raise UnexpectedPayloadError(
                f"Malformed commit activity for {owner}/{repo}: {e}"
            ) from e

    async def collect_daily_commits(
        self,
        owner: str,
        repo: str,
        limit: int = DAILY_POINT_LIMIT,
    ) -> list[DailyCommitPoint]:
        """Collect the trailing daily commit counts for a repository.

        Args:
            owner: Repository owner login
            repo: Repository name
            limit: Number of trailing days to keep

        Returns:
            Up to `limit` DailyCommitPoint entries in chronological order
        """
        buckets = await self.collect_weekly(owner, repo)
        try:
            points = expand_weekly_buckets(buckets, limit=limit, tz=self.tz)
        except (ValueError, OverflowError, OSError) as e:
            # Week timestamps outside the range datetime can represent
            raise UnexpectedPayloadError(
                f"Unusable week timestamp in commit activity for {owner}/{repo}: {e}"
            ) from e

        logger.debug(
            "Expanded %d weekly buckets into %d daily points", len(buckets), len(points)
        )
        return points
