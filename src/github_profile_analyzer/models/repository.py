"""Repository data models."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RepositorySummary(BaseModel):
    """Display-ready subset of a GitHub repository's metadata."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    owner_login: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "RepositorySummary":
        """Create from GitHub REST API response."""
        owner = data.get("owner") or {}
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            description=data.get("description"),
            stargazers_count=data.get("stargazers_count", 0),
            forks_count=data.get("forks_count", 0),
            owner_login=owner.get("login", ""),
        )

    @property
    def full_name(self) -> str:
        """Repository name in owner/name form."""
        return f"{self.owner_login}/{self.name}"
