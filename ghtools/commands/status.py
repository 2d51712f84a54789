"""Status command - set a commit status."""

from __future__ import annotations

from ghtools.commands.base import BaseCommand, UsageError
from ghtools.ui.console import err_console

STATES = ("error", "failure", "pending", "success")


class StatusCommand(BaseCommand):
    """Create a commit status for a SHA."""

    name = "status"
    description = "Set a commit status (error, failure, pending, success)"
    usage = "/status <owner/repo> <sha> <state> [--context C] [--description D] [--target-url URL]"
    aliases = []

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        repo, sha, state = self.require(remaining, 3)[:3]

        state = state.lower()
        if state not in STATES:
            raise UsageError(f"state must be one of: {', '.join(STATES)}")

        payload = {"state": state}
        for flag, key in (("context", "context"), ("description", "description"), ("target-url", "target_url")):
            if isinstance(flags.get(flag), str):
                payload[key] = flags[flag]

        result = self.api.command("POST", f"repos/{repo}/statuses/{sha}", payload)

        context = result.get("context", "default") if isinstance(result, dict) else "default"
        err_console.print(
            f"[state.{state}]● {state}[/state.{state}] [repo]{repo}[/repo]@{sha[:7]} [muted]({context})[/muted]"
        )
        return True
