"""Theme and color definitions for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from rich.style import Style
from rich.theme import Theme as RichTheme


@dataclass
class Theme:
    """Color theme for the CLI."""

    # Primary colors
    primary: str = "#58A6FF"      # Blue - main accent
    secondary: str = "#D2A8FF"    # Lavender - secondary accent

    # Status colors
    success: str = "#3FB950"      # Green
    error: str = "#F85149"        # Red
    warning: str = "#D29922"      # Amber
    info: str = "#79C0FF"         # Light blue

    # Text colors
    text: str = "#E6EDF3"         # Light gray
    muted: str = "#8B949E"        # Muted gray
    dim: str = "#484F58"          # Dim gray

    # UI colors
    border: str = "#30363D"       # Gray border
    accent: str = "#39C5CF"       # Cyan accent

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich theme."""
        return RichTheme({
            # Core styles
            "primary": Style(color=self.primary),
            "secondary": Style(color=self.secondary),
            "primary.bold": Style(color=self.primary, bold=True),

            # Status styles
            "success": Style(color=self.success, bold=True),
            "error": Style(color=self.error, bold=True),
            "warning": Style(color=self.warning),
            "info": Style(color=self.info),

            # Text styles
            "text": Style(color=self.text),
            "muted": Style(color=self.muted),
            "dim": Style(color=self.dim),
            "accent": Style(color=self.accent),

            # UI element styles
            "border": Style(color=self.border),
            "panel.title": Style(color=self.primary, bold=True),
            "panel.border": Style(color=self.border),

            # Semantic styles
            "command": Style(color=self.primary, bold=True),
            "repo": Style(color=self.secondary),
            "number": Style(color=self.warning),
            "url": Style(color=self.accent, underline=True),

            # Commit status states
            "state.success": Style(color=self.success, bold=True),
            "state.pending": Style(color=self.warning, bold=True),
            "state.failure": Style(color=self.error, bold=True),
            "state.error": Style(color=self.error, bold=True),
        })


# Default theme instance
_theme = Theme()


def get_theme() -> Theme:
    """Get the current theme."""
    return _theme
