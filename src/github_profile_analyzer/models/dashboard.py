"""Dashboard UI state."""

from dataclasses import dataclass, field
from enum import Enum

from github_profile_analyzer.models.commit_activity import DailyCommitPoint
from github_profile_analyzer.models.repository import RepositorySummary


class DashboardPhase(str, Enum):
    """Where the dashboard is in its fetch cycle."""

    IDLE = "idle"
    LOADING = "loading"
    IDLE_WITH_DATA = "idle_with_data"
    IDLE_EMPTY = "idle_empty"


@dataclass
class DashboardState:
    """In-memory state rendered by the dashboard.

    Repository and commit lists are always replaced wholesale, never merged.
    """

    username: str = ""
    repositories: list[RepositorySummary] = field(default_factory=list)
    commit_data: list[DailyCommitPoint] = field(default_factory=list)
    commit_repository: str | None = None  # owner/name the commit data belongs to
    loading: bool = False
    cycles_started: int = 0

    @property
    def phase(self) -> DashboardPhase:
        """Current phase of the fetch cycle state machine."""
        if self.loading:
            return DashboardPhase.LOADING
        if self.repositories or self.commit_data:
            return DashboardPhase.IDLE_WITH_DATA
        if self.cycles_started == 0:
            return DashboardPhase.IDLE
        return DashboardPhase.IDLE_EMPTY

    def set_repositories(self, repositories: list[RepositorySummary]) -> None:
        """Replace the repository list."""
        self.repositories = list(repositories)

    def set_commit_data(
        self,
        points: list[DailyCommitPoint],
        repository: str | None = None,
    ) -> None:
        """Replace commit data; the repository is only kept when there are points."""
        self.commit_data = list(points)
        self.commit_repository = repository if points else None

    def clear_commits(self) -> None:
        """Drop commit data, keeping repositories."""
        self.commit_data = []
        self.commit_repository = None

    def clear(self) -> None:
        """Drop repositories and commit data."""
        self.repositories = []
        self.clear_commits()
