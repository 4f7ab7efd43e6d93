#!/usr/bin/env python3
"""CLI utility to exercise the GitHub Profile Analyzer SDK against the live API."""

import argparse
import asyncio
import dataclasses
import logging
import os
import sys

# Add src to path for local development
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from github_profile_analyzer import GitHubProfileAnalyzer, __version__
from github_profile_analyzer.config import get_config


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


async def check_cycle(analyzer: GitHubProfileAnalyzer, username: str):
    """Run one fetch cycle and print what the dashboard would show."""
    print(f"\n{'='*50}")
    print(f"Checking fetch_repositories('{username}')")
    print("=" * 50)

    state = await analyzer.fetch_repositories(username)
    print(f"Phase: {state.phase.value}")
    print(f"Repositories: {len(state.repositories)}")
    for repo in state.repositories[:5]:
        print(f"  - {repo.name}: {repo.stargazers_count} stars, {repo.forks_count} forks")

    print(f"Commit activity for: {state.commit_repository or '-'}")
    print(f"Daily points: {len(state.commit_data)}")
    if state.commit_data:
        first, last = state.commit_data[0], state.commit_data[-1]
        print(f"  {first.iso_date} .. {last.iso_date}, total {sum(p.commits for p in state.commit_data)}")
    return state


async def check_overlap(analyzer: GitHubProfileAnalyzer, first: str, second: str):
    """Trigger two cycles at once and report which user's data survived."""
    print(f"\n{'='*50}")
    print(f"Checking overlapping cycles ('{first}' then '{second}')")
    print("=" * 50)

    await asyncio.gather(
        analyzer.fetch_repositories(first),
        analyzer.fetch_repositories(second),
    )
    state = analyzer.state
    owners = {r.owner_login for r in state.repositories}
    print(f"Repository owners: {sorted(owners)}")
    print(f"Commit activity for: {state.commit_repository or '-'}")
    print(f"Loading: {state.loading}")
    return state


async def main():
    parser = argparse.ArgumentParser(
        description="Exercise the GitHub Profile Analyzer SDK locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/check_sdk.py octocat
  python scripts/check_sdk.py octocat --local-time
  python scripts/check_sdk.py octocat --overlap torvalds
  python scripts/check_sdk.py octocat --overlap torvalds --no-guard
""",
    )
    parser.add_argument("username", help="GitHub username to analyze")
    parser.add_argument("--overlap", metavar="OTHER", help="Also race a cycle for OTHER")
    parser.add_argument("--no-guard", action="store_true", help="Let stale cycles write state")
    parser.add_argument("--local-time", action="store_true", help="Derive dates in local time")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Debug output")
    parser.add_argument("--version", action="version", version=f"github-profile-analyzer {__version__}")

    args = parser.parse_args()

    setup_logging(verbose=args.verbose, debug=args.debug)

    config = get_config()
    if args.no_guard:
        config = dataclasses.replace(config, guard_stale_cycles=False)
    if args.local_time:
        config = dataclasses.replace(config, date_timezone="local")

    print(f"GitHub Profile Analyzer SDK v{__version__}")
    print(f"API: {config.github_api_url}")

    async with GitHubProfileAnalyzer(config=config) as analyzer:
        await check_cycle(analyzer, args.username)
        if args.overlap:
            await check_overlap(analyzer, args.username, args.overlap)

    print("\nDone.")


if __name__ == "__main__":
    asyncio.run(main())
