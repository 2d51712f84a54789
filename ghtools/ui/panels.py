"""Panel and table components for displaying API results."""

from __future__ import annotations

from typing import Any
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Column sets per search kind: (header, key)
SEARCH_COLUMNS = {
    "repositories": [("Repository", "full_name"), ("★", "stargazers_count"), ("Description", "description")],
    "issues": [("#", "number"), ("State", "state"), ("Title", "title"), ("URL", "html_url")],
    "code": [("Repository", "repository.full_name"), ("Path", "path")],
    "commits": [("SHA", "sha"), ("Repository", "repository.full_name"), ("Message", "commit.message")],
    "users": [("Login", "login"), ("Type", "type"), ("URL", "html_url")],
}


def _lookup(item: dict[str, Any], dotted: str) -> str:
    value: Any = item
    for part in dotted.split("."):
        if not isinstance(value, dict):
            return ""
        value = value.get(part)
    if value is None:
        return ""
    return str(value).splitlines()[0] if isinstance(value, str) and value else str(value)


def create_search_table(kind: str, data: dict[str, Any]) -> Table:
    """Create a table of search results."""
    items = data.get("items", []) or []
    columns = SEARCH_COLUMNS.get(kind, [("Name", "name"), ("URL", "html_url")])

    table = Table(
        title=f"[primary.bold]{kind}[/primary.bold] [muted]({len(items)} of {data.get('total_count', len(items))})[/muted]",
        border_style="border",
        header_style="primary.bold",
    )
    for header, _ in columns:
        table.add_column(header, overflow="fold")

    for item in items:
        table.add_row(*(_lookup(item, key) for _, key in columns))

    return table


def create_protection_panel(repo: str, branch: str, data: dict[str, Any]) -> Panel:
    """Create a panel describing a branch protection configuration."""
    text = Text()

    checks = data.get("required_status_checks") or {}
    text.append("Status checks:    ", style="muted")
    contexts = checks.get("contexts") or []
    text.append(", ".join(contexts) if contexts else "none", style="text")
    if checks.get("strict"):
        text.append("  (strict)", style="warning")
    text.append("\n")

    admins = data.get("enforce_admins") or {}
    text.append("Enforce admins:   ", style="muted")
    enabled = bool(admins.get("enabled"))
    text.append("yes" if enabled else "no", style="success" if enabled else "muted")
    text.append("\n")

    restrictions = data.get("restrictions") or {}
    users = [u.get("login", "?") for u in restrictions.get("users", []) or []]
    teams = [t.get("slug", "?") for t in restrictions.get("teams", []) or []]
    text.append("Push restricted:  ", style="muted")
    if restrictions:
        text.append(", ".join(users + [f"@{t}" for t in teams]) or "nobody", style="text")
    else:
        text.append("no", style="muted")

    return Panel(
        text,
        title=f"[primary]🔒 {repo}[/primary] [repo]{branch}[/repo]",
        border_style="primary",
        padding=(1, 2),
    )
