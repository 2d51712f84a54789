"""UI components for the ghtools CLI."""

from ghtools.ui.console import (
    console,
    err_console,
    print_error,
    print_info,
    print_result,
    print_success,
    print_warning,
)
from ghtools.ui.panels import create_protection_panel, create_search_table
from ghtools.ui.theme import Theme, get_theme

__all__ = [
    # Theme
    "Theme",
    "get_theme",
    # Console
    "console",
    "err_console",
    "print_error",
    "print_success",
    "print_warning",
    "print_info",
    "print_result",
    # Panels
    "create_search_table",
    "create_protection_panel",
]
