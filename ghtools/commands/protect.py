"""Protect command - show, set or remove branch protection."""

from __future__ import annotations

from typing import Any

from ghtools.commands.base import BaseCommand
from ghtools.core.api_client import RequestOptions
from ghtools.core.errors import APIError
from ghtools.ui.console import console, print_result, print_success, print_warning
from ghtools.ui.panels import create_protection_panel

PROTECTION_PREVIEW = "application/vnd.github.luke-cage-preview+json"

# Statuses GitHub uses when push restrictions aren't available for a repo
UNSUPPORTED_RESTRICT_STATUSES = (404, 422)


def _split(value: Any) -> list[str]:
    if not isinstance(value, str):
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


class ProtectCommand(BaseCommand):
    """Manage protection settings for a branch."""

    name = "protect"
    description = "Show, set or remove branch protection"
    usage = "/protect <owner/repo> <branch> [--contexts a,b] [--strict] [--enforce-admins] [--restrict user1,user2] [--remove] [--json]"
    aliases = ["protection"]
    switches = ("strict", "enforce-admins", "remove", "json")

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        repo, branch = self.require(remaining, 2)[:2]
        path = f"repos/{repo}/branches/{branch}/protection"
        options = RequestOptions(accept_type=PROTECTION_PREVIEW)

        if flags.get("remove"):
            self.api.command("DELETE", path, None, options)
            print_success(f"Protection removed from {repo} {branch}")
            return True

        if any(k in flags for k in ("contexts", "strict", "enforce-admins", "restrict")):
            result = self._update(path, flags, options)
            if result is None:
                return False
        else:
            result = self.api.command("GET", path, None, options)

        if flags.get("json") or not isinstance(result, dict):
            print_result(result)
        else:
            console.print(create_protection_panel(repo, branch, result))
        return True

    def _update(self, path: str, flags: dict[str, Any], options: RequestOptions) -> Any:
        contexts = _split(flags.get("contexts"))
        users = _split(flags.get("restrict"))

        payload = {
            "required_status_checks": None,
            "enforce_admins": bool(flags.get("enforce-admins")),
            "required_pull_request_reviews": None,
            "restrictions": None,
        }
        if contexts or flags.get("strict"):
            payload["required_status_checks"] = {
                "strict": bool(flags.get("strict")),
                "contexts": contexts,
            }
        if users:
            payload["restrictions"] = {"users": users, "teams": []}

        try:
            return self.api.command("PUT", path, payload, options)
        except APIError as e:
            if users and e.status_code in UNSUPPORTED_RESTRICT_STATUSES:
                print_warning(
                    "Restricting push access is unsupported for this repository "
                    f"({e.status_line}). Only organization repositories accept user restrictions.",
                    title="Unsupported",
                )
                return None
            raise
