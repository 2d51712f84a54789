"""Core components - configuration, API client, credentials and errors."""

from ghtools.core.api_client import APIClient, RequestOptions, pretty
from ghtools.core.config import ClientConfig, GitHubSettings
from ghtools.core.errors import APIError, ConfigurationError, GitHubError, InvalidRequestError

__all__ = [
    "APIClient",
    "RequestOptions",
    "pretty",
    "ClientConfig",
    "GitHubSettings",
    "GitHubError",
    "ConfigurationError",
    "InvalidRequestError",
    "APIError",
]
