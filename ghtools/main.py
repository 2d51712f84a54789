"""Main CLI entry point - one-shot commands or an interactive REPL."""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import sys
from pathlib import Path

import httpx
from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.styles import Style
from pydantic import ValidationError
from rich.logging import RichHandler

from ghtools import __version__
from ghtools.commands import BaseCommand, UsageError, build_registry
from ghtools.core.api_client import APIClient
from ghtools.core.config import ClientConfig, GitHubSettings
from ghtools.core.credentials import TerminalPrompt
from ghtools.core.errors import ConfigurationError, GitHubError
from ghtools.ui.console import console, err_console, print_error
from ghtools.utils.completions import HTTP_METHODS, CommandCompleter
from ghtools.utils.history import CommandHistory

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2

PROMPT_STYLE = Style.from_dict({
    "prompt": "#58A6FF bold",
    "host": "#8B949E",
    "completion-menu": "bg:#161B22 #E6EDF3",
    "completion-menu.completion.current": "bg:#1F6FEB #ffffff bold",
    "completion-menu.meta.completion": "bg:#161B22 #8B949E",
})

logger = logging.getLogger(__name__)


def parse_line(line: str) -> tuple[str, list[str]]:
    """Split a REPL line into a command name and arguments.

    Lines starting with an HTTP method are shorthand for the api command.
    """
    parts = shlex.split(line)
    if not parts:
        return "", []
    if parts[0].upper() in HTTP_METHODS:
        return "api", parts
    return parts[0].lower().lstrip("/"), parts[1:]


def run_command(command: BaseCommand, args: list[str]) -> int:
    """Execute a command, mapping failures to an exit status."""
    try:
        return EXIT_OK if command.execute(args) else EXIT_FAILED
    except UsageError as e:
        print_error(str(e), title="Usage")
        return EXIT_USAGE
    except GitHubError as e:
        print_error(str(e), title=type(e).__name__)
        return EXIT_FAILED
    except httpx.HTTPError as e:
        print_error(f"{type(e).__name__}: {e}", title="Request failed")
        return EXIT_FAILED


class GitHubCLI:
    """Interactive REPL around a configured API client."""

    def __init__(self, api: APIClient, history_file: Path | None = None):
        self.api = api
        self.commands = build_registry(api)
        self.history = CommandHistory(history_file)
        self.session = PromptSession(
            history=self.history.history,
            completer=CommandCompleter(),
            style=PROMPT_STYLE,
            complete_while_typing=True,
        )

    def get_prompt(self) -> HTML:
        """Generate the prompt."""
        return HTML(f"<host>{self.api.config.host}</host> <prompt>❯</prompt> ")

    def run(self) -> int:
        """Run the REPL until /quit or EOF."""
        console.print(f"[primary.bold]ghtools {__version__}[/primary.bold] [muted]connected to[/muted] [url]{self.api.base_uri}[/url]")
        console.print("[muted]Type /help for commands, /quit to exit.[/muted]")

        while True:
            try:
                user_input = self.session.prompt(self.get_prompt()).strip()
                if not user_input:
                    continue
                self.history.add(user_input)

                try:
                    cmd_name, args = parse_line(user_input)
                except ValueError as e:
                    print_error(f"Could not parse input: {e}")
                    continue

                if cmd_name in ("quit", "exit"):
                    return EXIT_OK

                command = self.commands.get(cmd_name)
                if command is None:
                    print_error(f"Unknown command: {cmd_name}")
                    console.print("[muted]Type /help for available commands[/muted]")
                    continue

                run_command(command, args)

            except KeyboardInterrupt:
                console.print("\n[muted]Type /quit to exit[/muted]")
            except EOFError:
                return EXIT_OK


def setup_logging(verbose: int) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose >= 2 else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    # httpx logs every request at INFO; our own trace covers that
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ghtools",
        description="Command-line tools for the GitHub v3 API (github.com and Enterprise)",
        epilog="Environment: GITHUB_HOST, GITHUB_TOKEN, GITHUB_USER, GITHUB_PASSWORD",
    )
    parser.add_argument("-H", "--host", help="GitHub host, e.g. github.com or github.example.com")
    parser.add_argument("-t", "--token", help="personal access token")
    parser.add_argument("-u", "--user", help="username for basic auth when no token is set")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="trace requests (-vv adds bodies)")
    parser.add_argument("--version", action="version", version=f"ghtools {__version__}")
    parser.add_argument("command", nargs="?", help="command to run (starts the REPL if omitted)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    # Command-specific flags pass through to the command
    args, remaining = parser.parse_known_args(argv)
    setup_logging(args.verbose)

    try:
        settings = GitHubSettings()
        config = ClientConfig.from_settings(
            settings,
            host=args.host,
            token=args.token,
            username=args.user or (None if settings.user else os.environ.get("USER")),
            verbose=args.verbose,
        )
        prompt = TerminalPrompt() if sys.stdin.isatty() else None
        api = APIClient(config, prompt=prompt, console=err_console)
    except (ConfigurationError, ValidationError) as e:
        print_error(str(e), title="Configuration")
        return EXIT_USAGE
    logger.debug("Using API at %s", api.base_uri)

    with api:
        if args.command:
            cmd_name, cmd_args = parse_line(shlex.join([args.command, *remaining]))
            command = build_registry(api).get(cmd_name)
            if command is None:
                print_error(f"Unknown command: {args.command}")
                return EXIT_USAGE
            return run_command(command, cmd_args)

        cli = GitHubCLI(api, Path.home() / ".ghtools" / "history")
        return cli.run()


if __name__ == "__main__":
    sys.exit(main())
