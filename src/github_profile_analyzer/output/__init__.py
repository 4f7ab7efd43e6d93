"""Output handlers for GitHub Profile Analyzer."""

from github_profile_analyzer.output.console import Console, render_dashboard
from github_profile_analyzer.output.json_writer import build_snapshot, write_json_snapshot

__all__ = [
    "Console",
    "render_dashboard",
    "build_snapshot",
    "write_json_snapshot",
]
