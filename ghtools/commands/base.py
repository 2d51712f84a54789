"""Base command class for CLI commands."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Collection
from ghtools.core.api_client import APIClient


class UsageError(ValueError):
    """Bad command-line arguments."""

    pass


class BaseCommand(ABC):
    """Base class for all CLI commands."""

    name: str = "base"
    description: str = "Base command"
    usage: str = ""
    aliases: list[str] = []
    # Flags that never take a value
    switches: Collection[str] = ()

    def __init__(self, api: APIClient):
        self.api = api

    @abstractmethod
    def execute(self, args: list[str]) -> bool:
        """
        Execute the command.

        Args:
            args: Command arguments

        Returns:
            True if successful, False otherwise
        """
        pass

    def parse_flags(self, args: list[str]) -> tuple[dict[str, Any], list[str]]:
        """Parse command-line flags from arguments."""
        flags = {}
        remaining = []

        i = 0
        while i < len(args):
            arg = args[i]
            if arg.startswith("--"):
                key = arg[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    flags[key] = value
                elif key in self.switches:
                    flags[key] = True
                elif i + 1 < len(args) and not args[i + 1].startswith("-"):
                    flags[key] = args[i + 1]
                    i += 1
                else:
                    flags[key] = True
            else:
                remaining.append(arg)
            i += 1

        return flags, remaining

    def int_flag(self, flags: dict[str, Any], key: str) -> int | None:
        """Read an integer flag, raising UsageError on junk."""
        value = flags.get(key)
        if value is None:
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            raise UsageError(f"--{key} expects a number, got {value!r}") from None

    def require(self, remaining: list[str], count: int) -> list[str]:
        """Ensure at least ``count`` positional arguments were given."""
        if len(remaining) < count:
            raise UsageError(f"usage: {self.usage}")
        return remaining
