"""Command completion for the REPL."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

COMMANDS = {
    "/api": "Raw API call",
    "/search": "Search repositories, issues, code...",
    "/status": "Set a commit status",
    "/protect": "Show or change branch protection",
    "/browse": "Open a repository in the browser",
    "/help": "Show help",
    "/quit": "Exit the CLI",
    "/exit": "Exit the CLI",
}

HTTP_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]

COMMAND_OPTIONS = {
    "/api": HTTP_METHODS + ["--data", "--no-follow", "--page-limit", "--accept", "--content-type"],
    "/search": ["repositories", "issues", "code", "commits", "users", "--page-limit", "--json"],
    "/status": ["error", "failure", "pending", "success", "--context", "--description", "--target-url"],
    "/protect": ["--contexts", "--strict", "--enforce-admins", "--restrict", "--remove", "--json"],
    "/browse": [],
    "/help": [c.lstrip("/") for c in COMMANDS if c not in ("/quit", "/exit")],
}

OPTION_META = {
    "--data": "JSON body",
    "--no-follow": "don't follow pages",
    "--page-limit": "last page to fetch",
    "--accept": "Accept media type",
    "--content-type": "body media type",
    "--json": "JSON output",
    "--context": "status context",
    "--description": "status description",
    "--target-url": "status link",
    "--contexts": "required checks",
    "--strict": "require up-to-date",
    "--enforce-admins": "include admins",
    "--restrict": "push users",
    "--remove": "remove protection",
}


class CommandCompleter(Completer):
    """Completer for REPL commands and their options."""

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """Get completions for the current input with descriptions."""
        text = document.text_before_cursor
        words = text.split()

        if not text or text.isspace():
            for cmd, desc in COMMANDS.items():
                yield Completion(cmd, start_position=0, display=cmd, display_meta=desc)
            return

        if len(words) == 1 and not text.endswith(" "):
            word = words[0]
            for cmd, desc in COMMANDS.items():
                if cmd.startswith(word.lower()) or cmd.lstrip("/").startswith(word.lower().lstrip("/")):
                    yield Completion(cmd, start_position=-len(word), display=cmd, display_meta=desc)
            # Bare HTTP methods are shorthand for /api
            for method in HTTP_METHODS:
                if method.startswith(word.upper()):
                    yield Completion(method, start_position=-len(word), display_meta="api call")
            return

        cmd = words[0].lower()
        if not cmd.startswith("/"):
            cmd = "/" + cmd
        if words[0].upper() in HTTP_METHODS:
            cmd = "/api"

        options = COMMAND_OPTIONS.get(cmd, [])
        current = "" if text.endswith(" ") else words[-1]

        for opt in options:
            if opt.lower().startswith(current.lower()):
                yield Completion(
                    opt,
                    start_position=-len(current),
                    display=opt,
                    display_meta=OPTION_META.get(opt, ""),
                )
