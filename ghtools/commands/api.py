"""Api command - make a raw call against the GitHub API."""

from __future__ import annotations

import json
from typing import Any

from ghtools.commands.base import BaseCommand, UsageError
from ghtools.core.api_client import RequestOptions
from ghtools.ui.console import err_console, print_result


def parse_fields(fields: list[str]) -> dict[str, str]:
    """Turn ``key=value`` arguments into a mapping."""
    data = {}
    for field in fields:
        if "=" not in field:
            raise UsageError(f"expected key=value, got {field!r}")
        key, value = field.split("=", 1)
        data[key] = value
    return data


class ApiCommand(BaseCommand):
    """Send an arbitrary request and print the decoded result."""

    name = "api"
    description = "Make a raw API call; results are printed as JSON"
    usage = "/api <METHOD> <path> [key=value ...] [--data JSON] [--no-follow] [--page-limit N] [--accept TYPE]"
    aliases = []
    switches = ("no-follow",)

    def execute(self, args: list[str]) -> bool:
        """Run the call."""
        flags, remaining = self.parse_flags(args)
        method, target, *fields = self.require(remaining, 2)

        data: Any = parse_fields(fields) or None
        if "data" in flags:
            if fields:
                raise UsageError("use either --data or key=value fields, not both")
            try:
                data = json.loads(flags["data"])
            except ValueError:
                # Pre-formed query strings and raw bodies are passed through
                data = flags["data"]

        options = RequestOptions(
            content_type=flags.get("content-type"),
            accept_type=flags.get("accept"),
            no_follow=bool(flags.get("no-follow")),
            page_limit=self.int_flag(flags, "page-limit"),
        )

        result = self.api.command(method.upper(), target, data, options)
        print_result(result)

        if self.api.next_link:
            err_console.print(f"[muted]More results:[/muted] [url]{self.api.next_link}[/url]")

        return True
