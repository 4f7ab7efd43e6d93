"""CLI interface for GitHub Profile Analyzer."""

import asyncio
import dataclasses
import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt

from github_profile_analyzer import __version__
from github_profile_analyzer.config import Config, get_config
from github_profile_analyzer.models.dashboard import DashboardState
from github_profile_analyzer.output.console import Console as OutputConsole
from github_profile_analyzer.output.json_writer import (
    build_snapshot,
    serialize_for_json,
    write_json_snapshot,
)
from github_profile_analyzer.sdk import GitHubProfileAnalyzer

app = typer.Typer(
    name="github-profile-analyzer",
    help="Show a GitHub user's repositories and recent commit activity",
    add_completion=False,
)

console = Console()

QUIT_ANSWERS = ("q", "quit", "exit")


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-profile-analyzer version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Profile Analyzer - repositories and commit activity at a glance."""
    pass


def setup_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on verbosity level."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_config(local_time: bool) -> Config:
    """Load configuration, exiting with an error message when it is invalid."""
    try:
        config = get_config()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(1)

    if local_time:
        config = dataclasses.replace(config, date_timezone="local")
    return config


async def _run_cycle(
    analyzer: GitHubProfileAnalyzer,
    username: str,
    output_console: OutputConsole,
) -> DashboardState:
    """Run one fetch cycle, showing the dashboard live on a terminal."""
    task = asyncio.create_task(analyzer.fetch_repositories(username))

    if output_console.quiet or not output_console.console.is_terminal:
        return await task

    with output_console.create_live(analyzer.state):
        return await task


async def _analyze_once(
    config: Config,
    username: str,
    output_console: OutputConsole,
) -> DashboardState:
    async with GitHubProfileAnalyzer(config=config) as analyzer:
        return await _run_cycle(analyzer, username, output_console)


@app.command()
def analyze(
    username: Optional[str] = typer.Argument(
        None,
        help="GitHub username to analyze (defaults to PROFILE_ANALYZER_USERNAME)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write a JSON snapshot to this path",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the JSON snapshot instead of the dashboard",
    ),
    local_time: bool = typer.Option(
        False,
        "--local-time",
        help="Derive commit dates in local time instead of UTC",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging",
    ),
):
    """Fetch a user's repositories and the commit activity of the first one.

    Examples:
        github-profile-analyzer analyze octocat
        github-profile-analyzer analyze octocat --json
        github-profile-analyzer analyze octocat -o octocat.json
    """
    setup_logging(verbose, debug)
    config = _load_config(local_time)
    output_console = OutputConsole(verbose=verbose, quiet=json_output)

    try:
        state = asyncio.run(
            _analyze_once(config, username or config.default_username, output_console)
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Analysis cancelled[/yellow]")
        raise typer.Exit(1)

    if json_output:
        typer.echo(
            json.dumps(serialize_for_json(build_snapshot(state)), indent=2, ensure_ascii=False)
        )
    else:
        output_console.print_header()
        output_console.print_dashboard(state)

    if output is not None:
        output_file = write_json_snapshot(state, output)
        output_console.print_output_path(str(output_file))


async def _interactive_loop(config: Config, output_console: OutputConsole) -> int:
    """Prompt for usernames and run a fetch cycle for each. Returns cycles run."""
    async with GitHubProfileAnalyzer(config=config) as analyzer:
        while True:
            try:
                # Blocking read, kept off the event loop
                answer = await asyncio.to_thread(
                    Prompt.ask,
                    "GitHub username ([bold]q[/bold] to quit)",
                    default=analyzer.state.username,
                    console=output_console.console,
                )
            except EOFError:
                break

            answer = answer.strip()
            if answer.lower() in QUIT_ANSWERS:
                break

            await _run_cycle(analyzer, answer, output_console)
            output_console.print_dashboard(analyzer.state)
            output_console.print()

        return analyzer.current_cycle


@app.command()
def interactive(
    local_time: bool = typer.Option(
        False,
        "--local-time",
        help="Derive commit dates in local time instead of UTC",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Debug logging",
    ),
):
    """Prompt for usernames and show the dashboard for each one.

    Press Enter to re-run the last username, or type q to quit.
    """
    setup_logging(verbose, debug)
    config = _load_config(local_time)
    output_console = OutputConsole(verbose=verbose)
    output_console.print_header()

    try:
        asyncio.run(_interactive_loop(config, output_console))
    except KeyboardInterrupt:
        console.print("\n[yellow]Bye[/yellow]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
