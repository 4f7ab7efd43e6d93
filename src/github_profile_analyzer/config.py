"""Configuration management for GitHub Profile Analyzer."""

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

DATE_TIMEZONES = ("utc", "local")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    """Application configuration."""

    github_api_url: str = "https://api.github.com"
    default_username: str = "ajay-7415"

    # Timeouts and retries (max_attempts=1 means a single request, no retry)
    request_timeout: float = 30.0
    max_attempts: int = 1

    # "utc" or "local": timezone used to turn week timestamps into dates
    date_timezone: str = "utc"

    # Discard completions from fetch cycles superseded by a newer trigger
    guard_stale_cycles: bool = True

    def __post_init__(self) -> None:
        if self.date_timezone not in DATE_TIMEZONES:
            raise ValueError(
                f"date_timezone must be one of {DATE_TIMEZONES}, got {self.date_timezone!r}"
            )
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(find_dotenv(usecwd=True), override=False)

        return cls(
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            default_username=os.getenv("PROFILE_ANALYZER_USERNAME", "ajay-7415"),
            request_timeout=float(os.getenv("PROFILE_ANALYZER_TIMEOUT", "30.0")),
            max_attempts=int(os.getenv("PROFILE_ANALYZER_MAX_ATTEMPTS", "1")),
            date_timezone=os.getenv("PROFILE_ANALYZER_TIMEZONE", "utc").lower(),
            guard_stale_cycles=_env_bool("PROFILE_ANALYZER_GUARD_STALE", True),
        )

    @property
    def retries_enabled(self) -> bool:
        """Check if transport errors are retried."""
        return self.max_attempts > 1


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
