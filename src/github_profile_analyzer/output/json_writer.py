"""JSON snapshots of the dashboard state."""

import json
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel

from github_profile_analyzer.models.dashboard import DashboardState


def serialize_for_json(obj: Any) -> Any:
    """Convert objects to JSON-serializable format."""
    if isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, date):
        return obj.isoformat()
    elif isinstance(obj, BaseModel):
        return serialize_for_json(obj.model_dump())
    elif isinstance(obj, dict):
        return {k: serialize_for_json(v) for k, v in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_for_json(item) for item in obj]
    return obj


def build_snapshot(state: DashboardState) -> dict[str, Any]:
    """Build a JSON-ready snapshot of what the dashboard shows.

    Args:
        state: Dashboard state to capture

    Returns:
        Dictionary with the repository cards and the daily commit points
    """
    return {
        "username": state.username,
        "generated_at": datetime.now(timezone.utc),
        "phase": state.phase.value,
        "repositories": [
            {
                "id": r.id,
                "name": r.name,
                "owner": r.owner_login,
                "description": r.description,
                "stars": r.stargazers_count,
                "forks": r.forks_count,
            }
            for r in state.repositories
        ],
        "commit_repository": state.commit_repository,
        "commit_activity": [
            {"date": p.iso_date, "commits": p.commits} for p in state.commit_data
        ],
    }


def write_json_snapshot(
    state: DashboardState,
    output_path: Optional[Path] = None,
) -> Path:
    """Write a dashboard snapshot to a JSON file.

    Args:
        state: Dashboard state to capture
        output_path: Output file path (defaults to ./<username>_dashboard.json)

    Returns:
        Path to the written file
    """
    if output_path is None:
        output_path = Path(f"{state.username or 'dashboard'}_dashboard.json")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(serialize_for_json(build_snapshot(state)), f, indent=2, ensure_ascii=False)

    return output_path
