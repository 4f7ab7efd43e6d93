"""Commit activity models and the weekly-to-daily expansion."""

from datetime import date, datetime, timezone, tzinfo
from typing import Any, Iterable

from pydantic import BaseModel, Field

SECONDS_PER_DAY = 86400
DAILY_POINT_LIMIT = 30  # Only the last 30 days are ever displayed


class WeeklyCommitBucket(BaseModel):
    """One week of commit counts from the commit activity statistics endpoint."""

    week: int  # Unix timestamp of the start of the week (Sunday)
    total: int = 0
    days: list[int] = Field(min_length=7, max_length=7)  # Sunday first

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "WeeklyCommitBucket":
        """Create from GitHub REST API response."""
        return cls(
            week=data.get("week", 0),
            total=data.get("total", 0),
            days=data.get("days") or [],
        )


class DailyCommitPoint(BaseModel):
    """A calendar date paired with its commit count."""

    date: date
    commits: int = 0

    @property
    def iso_date(self) -> str:
        """Date formatted as YYYY-MM-DD."""
        return self.date.isoformat()


def resolve_timezone(name: str) -> tzinfo | None:
    """Map a configured timezone name to the tzinfo used for date derivation.

    Returns None for "local", which makes datetime.fromtimestamp use the host
    timezone.
    """
    if name == "utc":
        return timezone.utc
    if name == "local":
        return None
    raise ValueError(f"Unknown date timezone: {name}")


def day_date(week: int, day_index: int, tz: tzinfo | None = timezone.utc) -> date:
    """Calendar date of the day_index-th day of the week starting at week."""
    timestamp = week + day_index * SECONDS_PER_DAY
    return datetime.fromtimestamp(timestamp, tz=tz).date()


def expand_weekly_buckets(
    buckets: Iterable[WeeklyCommitBucket],
    limit: int = DAILY_POINT_LIMIT,
    tz: tzinfo | None = timezone.utc,
) -> list[DailyCommitPoint]:
    """Flatten weekly buckets into daily points and keep the last `limit` of them.

    Points are produced in week order, then day order; no re-sorting happens, so
    the input order of the buckets is the chronological order of the output.

    Args:
        buckets: Weekly buckets as returned by the API
        limit: Maximum number of trailing points to keep
        tz: Timezone for date derivation (None means local time)

    Returns:
        At most `limit` DailyCommitPoint entries
    """
    if limit <= 0:
        return []

    points = [
        DailyCommitPoint(date=day_date(bucket.week, i, tz), commits=commits)
        for bucket in buckets
        for i, commits in enumerate(bucket.days)
    ]
    return points[-limit:]
