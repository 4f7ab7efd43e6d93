"""Data models for GitHub Profile Analyzer."""

from github_profile_analyzer.models.commit_activity import (
    DAILY_POINT_LIMIT,
    DailyCommitPoint,
    WeeklyCommitBucket,
    expand_weekly_buckets,
)
from github_profile_analyzer.models.dashboard import DashboardPhase, DashboardState
from github_profile_analyzer.models.repository import RepositorySummary

__all__ = [
    "RepositorySummary",
    "WeeklyCommitBucket",
    "DailyCommitPoint",
    "DAILY_POINT_LIMIT",
    "expand_weekly_buckets",
    "DashboardPhase",
    "DashboardState",
]
