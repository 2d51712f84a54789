"""CLI commands for ghtools."""

from __future__ import annotations

from ghtools.commands.api import ApiCommand
from ghtools.commands.base import BaseCommand, UsageError
from ghtools.commands.browse import BrowseCommand
from ghtools.commands.help import HelpCommand
from ghtools.commands.protect import ProtectCommand
from ghtools.commands.search import SearchCommand
from ghtools.commands.status import StatusCommand
from ghtools.core.api_client import APIClient


def build_registry(api: APIClient) -> dict[str, BaseCommand]:
    """Map every command name and alias to a command instance."""
    commands: dict[str, BaseCommand] = {}
    help_command = HelpCommand(api, commands)

    for cmd in (
        ApiCommand(api),
        SearchCommand(api),
        StatusCommand(api),
        ProtectCommand(api),
        BrowseCommand(api),
        help_command,
    ):
        commands[cmd.name] = cmd
        for alias in cmd.aliases:
            commands[alias] = cmd

    return commands


__all__ = [
    "build_registry",
    "BaseCommand",
    "UsageError",
    "ApiCommand",
    "SearchCommand",
    "StatusCommand",
    "ProtectCommand",
    "BrowseCommand",
    "HelpCommand",
]
