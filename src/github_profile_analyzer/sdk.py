"""GitHub Profile Analyzer SDK - fetch cycles that feed the dashboard state."""

import logging

import httpx

from github_profile_analyzer.config import Config, get_config
from github_profile_analyzer.exceptions import ProfileAnalyzerError
from github_profile_analyzer.models.commit_activity import DAILY_POINT_LIMIT, resolve_timezone
from github_profile_analyzer.models.dashboard import DashboardState
from github_profile_analyzer.services.commit_activity_collector import CommitActivityCollector
from github_profile_analyzer.services.github_rest_client import GitHubRestClient
from github_profile_analyzer.services.repo_collector import RepoCollector

logger = logging.getLogger(__name__)


class GitHubProfileAnalyzer:
    """Runs fetch cycles against the GitHub REST API and keeps the dashboard state.

    A fetch cycle is the repository-list request followed, when the list is not
    empty, by the commit activity request for the first repository. Failures
    never propagate out of a cycle: the affected part of the state is cleared
    and the condition is logged.

    Every cycle takes a new cycle token. With ``guard_stale_cycles`` enabled
    (the default), a cycle that has been superseded by a newer trigger stops
    writing to the state when its requests complete. With it disabled, every
    completion writes to the state and the last one to resolve wins.

    Example usage:
        ```python
        from github_profile_analyzer import GitHubProfileAnalyzer

        async with GitHubProfileAnalyzer() as analyzer:
            state = await analyzer.fetch_repositories("octocat")
            for repo in state.repositories:
                print(repo.name, repo.stargazers_count)
            print([p.commits for p in state.commit_data])
        ```

    Args:
        config: Configuration (defaults to the global one loaded from env)
        transport: Optional httpx transport, used by tests to stub the API
        state: Existing state to update (a fresh one is created otherwise)
    """

    def __init__(
        self,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        state: DashboardState | None = None,
    ):
        self._config = config or get_config()
        self._transport = transport
        self.state = state or DashboardState(username=self._config.default_username)
        self._rest_client: GitHubRestClient | None = None
        self._initialized = False
        self._cycle = 0

    @property
    def current_cycle(self) -> int:
        """Token of the most recently started fetch cycle."""
        return self._cycle

    async def __aenter__(self) -> "GitHubProfileAnalyzer":
        """Async context manager entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize clients."""
        if self._initialized:
            return

        self._rest_client = GitHubRestClient(
            config=self._config,
            transport=self._transport,
        )
        self._initialized = True
        logger.debug(
            "GitHubProfileAnalyzer initialized (api_url=%s, guard_stale_cycles=%s)",
            self._config.github_api_url,
            self._config.guard_stale_cycles,
        )

    async def close(self) -> None:
        """Close all HTTP connections."""
        if self._rest_client:
            await self._rest_client.close()
        self._initialized = False
        logger.debug("GitHubProfileAnalyzer closed")

    def _ensure_initialized(self) -> None:
        """Ensure the client is initialized."""
        if not self._initialized:
            raise ProfileAnalyzerError(
                "Client not initialized. Use 'async with GitHubProfileAnalyzer(...) as analyzer:'"
            )

    def _is_stale(self, cycle: int) -> bool:
        """Check whether results of `cycle` must be dropped."""
        return self._config.guard_stale_cycles and cycle != self._cycle

    async def fetch_repositories(self, username: str | None = None) -> DashboardState:
        """Run one fetch cycle for a user.

        Fetches the user's repositories and, if there are any, the commit
        activity of the first one. The loading flag stays set until both
        requests have completed or the first one has failed.

        Args:
            username: GitHub username (defaults to the username already in state).
                Passed to the API unchanged.

        Returns:
            The dashboard state after the cycle
        """
        self._ensure_initialized()

        if username is not None:
            self.state.username = username
        username = self.state.username

        self._cycle += 1
        cycle = self._cycle
        self.state.cycles_started += 1
        self.state.loading = True
        logger.info("Fetch cycle %d started for %s", cycle, username)

        try:
            collector = RepoCollector(self._rest_client)
            try:
                repos = await collector.collect_repos(username)
            except ProfileAnalyzerError as e:
                if self._is_stale(cycle):
                    logger.info("Discarding failure of superseded fetch cycle %d", cycle)
                    return self.state
                logger.warning("Fetching repositories for %s failed: %s", username, e)
                self.state.clear()
                return self.state

            if self._is_stale(cycle):
                logger.info("Discarding repositories from superseded fetch cycle %d", cycle)
                return self.state

            self.state.set_repositories(repos)

            if repos:
                first = repos[0]
                await self._fetch_commit_stats(first.owner_login, first.name, cycle)
            else:
                logger.info("%s has no public repositories", username)
                self.state.clear_commits()
        finally:
            if not self._is_stale(cycle):
                self.state.loading = False

        logger.info(
            "Fetch cycle %d finished for %s (%d repositories, %d daily points)",
            cycle,
            username,
            len(self.state.repositories),
            len(self.state.commit_data),
        )
        return self.state

    async def fetch_commit_stats(self, owner: str, repository_name: str) -> DashboardState:
        """Fetch commit activity for one repository into the dashboard state.

        Runs as part of the current fetch cycle. On failure only the commit data
        is cleared; the repository list is left alone.

        Args:
            owner: Repository owner login
            repository_name: Repository name

        Returns:
            The dashboard state after the request
        """
        self._ensure_initialized()
        await self._fetch_commit_stats(owner, repository_name, self._cycle)
        return self.state

    async def _fetch_commit_stats(self, owner: str, repo: str, cycle: int) -> None:
        collector = CommitActivityCollector(
            self._rest_client,
            tz=resolve_timezone(self._config.date_timezone),
        )

        try:
            points = await collector.collect_daily_commits(owner, repo, limit=DAILY_POINT_LIMIT)
        except ProfileAnalyzerError as e:
            if self._is_stale(cycle):
                logger.info("Discarding failure of superseded fetch cycle %d", cycle)
                return
            logger.warning("Fetching commit activity for %s/%s failed: %s", owner, repo, e)
            self.state.clear_commits()
            return

        if self._is_stale(cycle):
            logger.info("Discarding commit activity from superseded fetch cycle %d", cycle)
            return

        if not points:
            logger.debug("No commit activity returned for %s/%s", owner, repo)
        self.state.set_commit_data(points, f"{owner}/{repo}")
