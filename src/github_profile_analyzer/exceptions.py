"""Exceptions for GitHub Profile Analyzer.

Exception Hierarchy:
    ProfileAnalyzerError (base)
    ├── GitHubAPIError (HTTP API errors with status codes)
    │   └── GitHubNotFoundError (404 not found)
    ├── GitHubTransportError (network failure or timeout, no response)
    └── UnexpectedPayloadError (2xx response whose body has the wrong shape)

Usage:
    - The REST client raises these for every failed request.
    - GitHubProfileAnalyzer catches all of them during a fetch cycle, clears the
      affected dashboard state and logs the condition.
    - UnexpectedPayloadError also covers the commit statistics endpoint answering
      202 while GitHub is still computing the numbers.
"""

__all__ = [
    "ProfileAnalyzerError",
    "GitHubAPIError",
    "GitHubNotFoundError",
    "GitHubTransportError",
    "UnexpectedPayloadError",
]


class ProfileAnalyzerError(Exception):
    """Base exception for all GitHub Profile Analyzer errors."""

    pass


class GitHubAPIError(ProfileAnalyzerError):
    """Base exception for GitHub API errors (HTTP responses with error status codes)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: dict | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class GitHubNotFoundError(GitHubAPIError):
    """Raised when a GitHub resource is not found (HTTP 404)."""

    def __init__(
        self,
        message: str,
        status_code: int | None = 404,
        response_body: dict | None = None,
    ):
        super().__init__(message, status_code=status_code, response_body=response_body)


class GitHubTransportError(ProfileAnalyzerError):
    """Raised when a request never produced a response (connection error, timeout)."""

    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message)
        self.endpoint = endpoint


class UnexpectedPayloadError(ProfileAnalyzerError):
    """Raised when a successful response does not carry the expected JSON shape."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
