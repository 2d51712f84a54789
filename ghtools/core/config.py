"""Client configuration and environment-backed settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ghtools.core.errors import ConfigurationError

PUBLIC_HOST = "github.com"
PUBLIC_API = "https://api.github.com"


def api_base_for(host: str) -> str:
    """Return the API root for a host; Enterprise installs live under /api/v3."""
    if host == PUBLIC_HOST:
        return PUBLIC_API
    return f"https://{host}/api/v3"


@dataclass
class ClientConfig:
    """Connection settings for one GitHub host."""

    host: str
    token: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    verbose: int = 0
    timeout: float = 60.0
    base_uri: str = field(init=False)

    def __post_init__(self):
        if not self.host:
            raise ConfigurationError("no GitHub host provided")
        self.verbose = max(0, min(int(self.verbose or 0), 2))
        self.base_uri = api_base_for(self.host)

    @classmethod
    def from_settings(
        cls,
        settings: "GitHubSettings",
        host: Optional[str] = None,
        token: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        verbose: int = 0,
    ) -> "ClientConfig":
        """Merge explicit values over environment settings.

        Explicit arguments win over the environment for every field.
        """
        return cls(
            host=host or settings.host or "",
            token=token or settings.token,
            username=username or settings.user,
            password=password or settings.password,
            verbose=verbose,
            timeout=settings.timeout,
        )


class GitHubSettings(BaseSettings):
    """GITHUB_* environment variables, optionally loaded from a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: Optional[str] = None
    token: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None
    timeout: float = 60.0

