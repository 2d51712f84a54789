"""Rich console instances and helper functions.

Results go to ``console`` (stdout); messages, errors and traces go to
``err_console`` (stderr) so results can be piped into other tools.
Rich only emits color when writing to a terminal.
"""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.text import Text
from rich.panel import Panel
from rich import box
from ghtools.ui.theme import get_theme


console = Console(theme=get_theme().to_rich_theme(), highlight=False)
err_console = Console(theme=get_theme().to_rich_theme(), stderr=True, highlight=False)


def _print_panel(message: str, title: str, color: str, icon: str) -> None:
    content = Text()
    content.append(message, style=color)

    err_console.print(Panel(
        content,
        title=f"[{color} bold]{icon} {title}[/{color} bold]",
        border_style=color,
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_error(message: str, title: str = "Error") -> None:
    """Print an error message."""
    _print_panel(message, title, get_theme().error, "✖")


def print_success(message: str, title: str = "Success") -> None:
    """Print a success message."""
    _print_panel(message, title, get_theme().success, "✔")


def print_warning(message: str, title: str = "Warning") -> None:
    """Print a warning message."""
    _print_panel(message, title, get_theme().warning, "⚠")


def print_info(message: str, title: str = "Info") -> None:
    """Print an info message."""
    _print_panel(message, title, get_theme().info, "ℹ")


def print_result(content: Any) -> None:
    """Print an API result on stdout: JSON for structures, text as-is."""
    if isinstance(content, str):
        console.out(content, highlight=False)
    else:
        console.print_json(json.dumps(content), indent=2)
