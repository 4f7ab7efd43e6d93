"""GitHub Profile Analyzer - a user's repositories and recent commit activity.

The analyzer fetches a user's public repositories, then the weekly commit
activity of the first one, and expands it into daily commit counts for the
last 30 days. Results are rendered as a terminal dashboard.

Example usage:
    ```python
    from github_profile_analyzer import GitHubProfileAnalyzer

    async with GitHubProfileAnalyzer() as analyzer:
        state = await analyzer.fetch_repositories("octocat")
        print(len(state.repositories), len(state.commit_data))
    ```
"""

from github_profile_analyzer._version import __version__
from github_profile_analyzer.config import Config
from github_profile_analyzer.exceptions import (
    GitHubAPIError,
    GitHubNotFoundError,
    GitHubTransportError,
    ProfileAnalyzerError,
    UnexpectedPayloadError,
)
from github_profile_analyzer.models import (
    DailyCommitPoint,
    DashboardPhase,
    DashboardState,
    RepositorySummary,
    WeeklyCommitBucket,
    expand_weekly_buckets,
)
from github_profile_analyzer.sdk import GitHubProfileAnalyzer

__all__ = [
    "__version__",
    # Main SDK class
    "GitHubProfileAnalyzer",
    # Configuration
    "Config",
    # Exceptions
    "ProfileAnalyzerError",
    "GitHubAPIError",
    "GitHubNotFoundError",
    "GitHubTransportError",
    "UnexpectedPayloadError",
    # Models
    "RepositorySummary",
    "WeeklyCommitBucket",
    "DailyCommitPoint",
    "expand_weekly_buckets",
    "DashboardPhase",
    "DashboardState",
]
