"""Utility functions for the CLI."""

from ghtools.utils.browser import open_url
from ghtools.utils.completions import CommandCompleter
from ghtools.utils.history import CommandHistory

__all__ = ["CommandCompleter", "CommandHistory", "open_url"]
