"""Browse command - open a repository page in the browser."""

from __future__ import annotations

from ghtools.commands.base import BaseCommand
from ghtools.ui.console import print_error, print_info
from ghtools.utils.browser import open_url


class BrowseCommand(BaseCommand):
    """Look up a repository and open its web page."""

    name = "browse"
    description = "Open a repository in your browser"
    usage = "/browse <owner/repo> [--browser CMD]"
    aliases = ["open"]

    def execute(self, args: list[str]) -> bool:
        flags, remaining = self.parse_flags(args)
        repo = self.require(remaining, 1)[0]

        data = self.api.command("GET", f"repos/{repo}")
        url = data.get("html_url") if isinstance(data, dict) else None
        if not url:
            print_error(f"No web URL returned for {repo}")
            return False

        browser = flags.get("browser")
        print_info(url, title="Opening")
        return open_url(url, browser if isinstance(browser, str) else None) == 0
