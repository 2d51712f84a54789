"""Search command - query the search API."""

from __future__ import annotations

from urllib.parse import quote_plus

from ghtools.commands.base import BaseCommand, UsageError
from ghtools.core.api_client import RequestOptions
from ghtools.ui.console import console, print_result
from ghtools.ui.panels import SEARCH_COLUMNS, create_search_table

# Commit search is only served under its preview media type
COMMITS_PREVIEW = "application/vnd.github.cloak-preview+json"


class SearchCommand(BaseCommand):
    """Search repositories, issues, code, commits or users."""

    name = "search"
    description = "Search GitHub (repositories, issues, code, commits, users)"
    usage = "/search <kind> <query ...> [--page-limit N] [--json]"
    aliases = ["find"]
    switches = ("json",)

    def execute(self, args: list[str]) -> bool:
        """Run the search and print the merged items."""
        flags, remaining = self.parse_flags(args)
        kind, *words = self.require(remaining, 2)

        if kind not in SEARCH_COLUMNS:
            raise UsageError(f"unknown search kind {kind!r}; one of: {', '.join(SEARCH_COLUMNS)}")

        # Query values go onto the URL verbatim, so encode here
        query = quote_plus(" ".join(words))
        options = RequestOptions(
            page_limit=self.int_flag(flags, "page-limit"),
            accept_type=COMMITS_PREVIEW if kind == "commits" else None,
        )
        result = self.api.command("GET", f"search/{kind}", {"q": query}, options)

        if flags.get("json") or not isinstance(result, dict):
            print_result(result)
        else:
            console.print(create_search_table(kind, result))

        return True
