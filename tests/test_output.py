"""Tests for dashboard rendering and JSON snapshots."""

import io
import json
from datetime import date

from rich.console import Console as RichConsole

from github_profile_analyzer.models.commit_activity import (
    DailyCommitPoint,
    WeeklyCommitBucket,
    expand_weekly_buckets,
)
from github_profile_analyzer.models.dashboard import DashboardState
from github_profile_analyzer.models.repository import RepositorySummary
from github_profile_analyzer.output.console import (
    BAR_GLYPH,
    CHART_HEIGHT,
    Console,
    build_commit_chart,
    build_repo_grid,
    render_dashboard,
    scale_bars,
)
from github_profile_analyzer.output.json_writer import build_snapshot, write_json_snapshot

from conftest import repo_payload, weeks_payload


def _render(renderable) -> str:
    console = RichConsole(record=True, width=200, file=io.StringIO())
    console.print(renderable)
    return console.export_text()


def _repos(count: int) -> list[RepositorySummary]:
    return [
        RepositorySummary.from_api(
            repo_payload(
                f"repo-{i}",
                repo_id=i,
                description=f"Description number {i}",
                stars=10 + i,
                forks=i,
            )
        )
        for i in range(count)
    ]


def _points(values: list[int]) -> list[DailyCommitPoint]:
    return [DailyCommitPoint(date=date(2024, 1, i + 1), commits=v) for i, v in enumerate(values)]


class TestScaleBars:
    """Tests for bar height scaling."""

    def test_peak_fills_height(self):
        """Test that the largest count fills the chart."""
        assert scale_bars([1, 2, 4], height=4) == [1, 2, 4]

    def test_small_counts_get_one_row(self):
        """Test that any non-zero count is visible."""
        assert scale_bars([1, 100], height=8) == [1, 8]

    def test_all_zero(self):
        """Test that all-zero counts give empty bars."""
        assert scale_bars([0, 0, 0]) == [0, 0, 0]

    def test_empty(self):
        """Test scaling nothing."""
        assert scale_bars([]) == []


class TestRepoGrid:
    """Tests for the repository card grid."""

    def test_no_grid_without_repos(self):
        """Test that no grid is built for an empty list."""
        assert build_repo_grid([]) is None

    def test_one_card_per_repo(self):
        """Test that N repositories give N cards with their fields verbatim."""
        repos = _repos(3)
        text = _render(build_repo_grid(repos))

        assert text.count("⭐") == 3
        for repo in repos:
            assert repo.name in text
            assert repo.description in text
            assert f"⭐ {repo.stargazers_count} | 🍴 {repo.forks_count}" in text

    def test_card_without_description(self):
        """Test that a missing description renders as nothing."""
        repo = RepositorySummary.from_api(repo_payload("bare", description=None, stars=1))
        text = _render(build_repo_grid([repo]))

        assert "bare" in text
        assert "None" not in text

    def test_markup_in_description_is_literal(self):
        """Test that rich markup in a description is not interpreted."""
        repo = RepositorySummary.from_api(repo_payload("tricky", description="[bold]x[/bold]"))
        text = _render(build_repo_grid([repo]))
        assert "[bold]x[/bold]" in text


class TestCommitChart:
    """Tests for the commit bar chart."""

    def test_no_chart_without_points(self):
        """Test that no chart is built for empty commit data."""
        assert build_commit_chart([]) is None

    def test_one_bar_per_point(self):
        """Test that each point gets its own full-height column."""
        text = _render(build_commit_chart(_points([3] * 30)))
        assert text.count(BAR_GLYPH) == 30 * CHART_HEIGHT

    def test_bar_heights_follow_counts(self):
        """Test that the drawn glyphs match the scaled heights."""
        values = [0, 1, 2, 4, 8]
        text = _render(build_commit_chart(_points(values)))
        assert text.count(BAR_GLYPH) == sum(scale_bars(values))

    def test_expanded_weeks_chart(self):
        """Test the chart for five weeks of activity: 30 non-empty bars."""
        buckets = [WeeklyCommitBucket.from_api(w) for w in weeks_payload(5)]
        points = expand_weekly_buckets(buckets)
        text = _render(build_commit_chart(points))

        # The bottom row has one glyph per bar since all counts are non-zero
        bottom_row = [line for line in text.splitlines() if BAR_GLYPH in line][-1]
        assert bottom_row.count(BAR_GLYPH) == 30

    def test_x_axis_hidden_y_axis_labelled(self):
        """Test that dates are not drawn but the peak count is."""
        text = _render(build_commit_chart(_points([5, 17, 2])))
        assert "2024-01" not in text
        assert "17" in text

    def test_title_names_repository(self):
        """Test that the chart title names the repository."""
        text = _render(build_commit_chart(_points([1]), "octocat/hello-world"))
        assert "Commits in Last 30 Days (octocat/hello-world)" in text


class TestRenderDashboard:
    """Tests for the full dashboard rendering."""

    def test_idle_dashboard(self):
        """Test a dashboard with nothing fetched yet."""
        text = _render(render_dashboard(DashboardState(username="octocat")))

        assert "octocat" in text
        assert "Loading..." not in text
        assert "⭐" not in text
        assert "Commits in Last" not in text

    def test_loading_indicator(self):
        """Test that the loading flag shows the indicator."""
        text = _render(render_dashboard(DashboardState(username="octocat", loading=True)))
        assert "Loading..." in text

    def test_full_dashboard(self):
        """Test cards and chart together."""
        state = DashboardState(username="octocat")
        state.set_repositories(_repos(2))
        state.set_commit_data(_points([1, 2, 3]), "octocat/repo-0")

        text = _render(render_dashboard(state))

        assert text.count("⭐") == 2
        assert "Commits in Last 30 Days (octocat/repo-0)" in text

    def test_cards_without_chart(self):
        """Test that repositories render even when commit data is empty."""
        state = DashboardState(username="octocat")
        state.set_repositories(_repos(1))

        text = _render(render_dashboard(state))

        assert "repo-0" in text
        assert "Commits in Last" not in text


class TestConsole:
    """Tests for the console wrapper."""

    def test_quiet_prints_nothing(self):
        """Test that quiet mode suppresses the dashboard."""
        buffer = io.StringIO()
        console = Console(quiet=True, console=RichConsole(file=buffer, width=120))
        state = DashboardState(username="octocat")
        state.set_repositories(_repos(1))

        console.print_dashboard(state)

        assert buffer.getvalue() == ""

    def test_print_dashboard(self):
        """Test that the dashboard is printed."""
        buffer = io.StringIO()
        console = Console(console=RichConsole(file=buffer, width=120))
        state = DashboardState(username="octocat")
        state.set_repositories(_repos(1))

        console.print_dashboard(state)

        assert "repo-0" in buffer.getvalue()


class TestJsonSnapshot:
    """Tests for JSON snapshots."""

    def test_build_snapshot(self):
        """Test the snapshot structure."""
        state = DashboardState(username="octocat", cycles_started=1)
        state.set_repositories(_repos(2))
        state.set_commit_data(_points([4, 5]), "octocat/repo-0")

        snapshot = build_snapshot(state)

        assert snapshot["username"] == "octocat"
        assert snapshot["phase"] == "idle_with_data"
        assert [r["name"] for r in snapshot["repositories"]] == ["repo-0", "repo-1"]
        assert snapshot["repositories"][1] == {
            "id": 1,
            "name": "repo-1",
            "owner": "octocat",
            "description": "Description number 1",
            "stars": 11,
            "forks": 1,
        }
        assert snapshot["commit_repository"] == "octocat/repo-0"
        assert snapshot["commit_activity"] == [
            {"date": "2024-01-01", "commits": 4},
            {"date": "2024-01-02", "commits": 5},
        ]

    def test_write_json_snapshot(self, tmp_path):
        """Test writing a snapshot to disk."""
        state = DashboardState(username="octocat")
        state.set_repositories(_repos(1))

        path = write_json_snapshot(state, tmp_path / "out" / "snapshot.json")

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["repositories"][0]["name"] == "repo-0"
        assert data["commit_activity"] == []
        assert isinstance(data["generated_at"], str)

    def test_write_json_snapshot_default_path(self, tmp_path, monkeypatch):
        """Test the default file name."""
        monkeypatch.chdir(tmp_path)
        path = write_json_snapshot(DashboardState(username="octocat"))
        assert path.name == "octocat_dashboard.json"
        assert (tmp_path / "octocat_dashboard.json").exists()
