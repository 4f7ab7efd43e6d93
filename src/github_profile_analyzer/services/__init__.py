"""Services for GitHub data collection."""

from github_profile_analyzer.services.commit_activity_collector import CommitActivityCollector
from github_profile_analyzer.services.github_rest_client import GitHubRestClient
from github_profile_analyzer.services.repo_collector import RepoCollector

__all__ = [
    "GitHubRestClient",
    "RepoCollector",
    "CommitActivityCollector",
]
