"""Rich console rendering of the dashboard."""

import math
from typing import Optional

from rich.columns import Columns
from rich.console import Console as RichConsole
from rich.console import Group, RenderableType
from rich.cells import cell_len
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from github_profile_analyzer.models.commit_activity import DAILY_POINT_LIMIT, DailyCommitPoint
from github_profile_analyzer.models.dashboard import DashboardState
from github_profile_analyzer.models.repository import RepositorySummary

BAR_GLYPH = "█"
BAR_STYLE = "#3b82f6"
CHART_HEIGHT = 8
CARD_WIDTH = 44


def scale_bars(counts: list[int], height: int = CHART_HEIGHT) -> list[int]:
    """Scale commit counts to bar heights in rows.

    The largest count fills `height` rows; any non-zero count gets at least one.
    """
    peak = max(counts, default=0)
    if peak <= 0:
        return [0] * len(counts)
    return [math.ceil(count * height / peak) if count > 0 else 0 for count in counts]


def build_repo_card(repo: RepositorySummary) -> Panel:
    """Card showing a repository's name, description, stars and forks."""
    body = Text()
    body.append(repo.name, style="bold")
    body.append("\n")
    body.append(repo.description or "", style="dim")
    body.append("\n")
    body.append(f"⭐ {repo.stargazers_count} | 🍴 {repo.forks_count}", style="bright_black")
    return Panel(body, width=CARD_WIDTH)


def build_repo_grid(repos: list[RepositorySummary]) -> Optional[Columns]:
    """Grid of repository cards, or None when there are no repositories."""
    if not repos:
        return None
    return Columns([build_repo_card(r) for r in repos], equal=True)


def build_commit_chart(
    points: list[DailyCommitPoint],
    repository: str | None = None,
    height: int = CHART_HEIGHT,
) -> Optional[Panel]:
    """Bar chart with one column per daily point, or None when there is no data.

    Only the y-axis is drawn; dates are left off the x-axis.
    """
    if not points:
        return None

    counts = [p.commits for p in points]
    bars = scale_bars(counts, height)
    peak = max(counts)
    label_width = len(str(peak))

    chart = Text()
    for level in range(height, 0, -1):
        label = str(round(peak * level / height)) if peak else "0"
        chart.append(f"{label:>{label_width}} │", style="dim")
        for bar in bars:
            chart.append(BAR_GLYPH if bar >= level else " ", style=BAR_STYLE)
            chart.append(" ")
        if level > 1:
            chart.append("\n")

    title = f"Commits in Last {DAILY_POINT_LIMIT} Days"
    if repository:
        title += f" ({repository})"
    # Wide enough for the title as well as the bars
    row_width = label_width + 2 + 2 * len(bars)
    width = max(row_width, cell_len(title) + 2) + 4
    return Panel(chart, title=title, title_align="left", width=width)


def render_dashboard(state: DashboardState) -> RenderableType:
    """Render the whole dashboard for a state. Has no side effects."""
    parts: list[RenderableType] = [
        Text.assemble(("GitHub username: ", "dim"), (state.username, "bold")),
    ]

    if state.loading:
        parts.append(Text("Loading..."))

    grid = build_repo_grid(state.repositories)
    if grid is not None:
        parts.append(grid)

    chart = build_commit_chart(state.commit_data, state.commit_repository)
    if chart is not None:
        parts.append(chart)

    return Group(*parts)


class Console:
    """Wrapper for rich console output."""

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        console: Optional[RichConsole] = None,
    ):
        self.console = console or RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_header(self):
        """Print dashboard header."""
        if self.quiet:
            return

        self.console.print()
        self.console.print(
            Panel("[bold blue]GitHub Profile Analyzer[/bold blue]", expand=False)
        )
        self.console.print()

    def print_dashboard(self, state: DashboardState):
        """Print the dashboard for a state."""
        if self.quiet:
            return
        self.console.print(render_dashboard(state))
        if self.verbose and not state.repositories and not state.loading:
            self.console.print("[dim]No repositories to show.[/dim]")

    def create_live(self, state: DashboardState) -> Live:
        """Create a live view that re-renders the dashboard on refresh."""
        return Live(
            render_dashboard(state),
            console=self.console,
            refresh_per_second=8,
            transient=True,
            get_renderable=lambda: render_dashboard(state),
        )

    def print_output_path(self, path: str):
        """Print output file path."""
        if not self.quiet:
            self.console.print(f"\n[green]Snapshot saved to:[/green] {path}")
