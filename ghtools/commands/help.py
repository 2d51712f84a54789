"""Help command - display CLI help."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ghtools.commands.base import BaseCommand
from ghtools.ui.console import console, print_error


class HelpCommand(BaseCommand):
    """Show available commands, or details for one command."""

    name = "help"
    description = "Show this help message"
    usage = "/help [command]"
    aliases = ["h", "?"]

    def __init__(self, api, commands: dict[str, BaseCommand] | None = None):
        super().__init__(api)
        self.commands = commands if commands is not None else {}

    def execute(self, args: list[str]) -> bool:
        if args:
            return self._show_command(args[0].lstrip("/").lower())

        table = Table(show_header=True, header_style="primary.bold", border_style="border", padding=(0, 2))
        table.add_column("Command", style="command")
        table.add_column("Aliases", style="muted")
        table.add_column("Description", style="text")

        for cmd in self._unique():
            aliases = ", ".join(f"/{a}" for a in cmd.aliases)
            table.add_row(f"/{cmd.name}", aliases, cmd.description)
        table.add_row("GET|POST|... <path>", "", "Shorthand for /api")

        console.print(table)
        console.print("[muted]Type /help <command> for usage details.[/muted]")
        return True

    def _unique(self) -> list[BaseCommand]:
        seen = []
        for cmd in self.commands.values():
            if cmd not in seen:
                seen.append(cmd)
        return seen

    def _show_command(self, name: str) -> bool:
        cmd = self.commands.get(name)
        if cmd is None:
            print_error(f"Unknown command: {name}")
            return False

        text = Text()
        text.append(cmd.description + "\n\n", style="text")
        text.append("Usage: ", style="muted")
        text.append(cmd.usage, style="command")
        if cmd.aliases:
            text.append("\nAliases: ", style="muted")
            text.append(", ".join(f"/{a}" for a in cmd.aliases), style="text")

        console.print(Panel(text, title=f"[primary]/{cmd.name}[/primary]", border_style="primary", padding=(1, 2)))
        return True
