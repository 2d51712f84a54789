"""Exception types raised by the GitHub API client."""

from __future__ import annotations


class GitHubError(Exception):
    """Base exception for the GitHub client."""

    pass


class ConfigurationError(GitHubError):
    """No host, or no resolvable credentials, when building a client."""

    pass


class InvalidRequestError(GitHubError):
    """A request that cannot be expressed, e.g. nested data for a GET."""

    pass


class APIError(GitHubError):
    """Non-success HTTP status returned by the server."""

    def __init__(self, status_code: int, status_line: str, body: str = "", pretty_body: str = ""):
        self.status_code = status_code
        self.status_line = status_line
        self.body = body
        self.pretty_body = pretty_body or body
        super().__init__(f"{status_line}:\n{self.pretty_body}")
