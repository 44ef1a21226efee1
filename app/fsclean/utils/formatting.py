"""Rich console formatting utilities.

Provides consistent formatting for CLI error output using Rich. Standard
output is reserved for the banner and usage text.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "error": "bold #f53263",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stderr.isatty():
        return "truecolor"
    return None


# Shared console instance (theme loaded once at import)
err_console = Console(theme=_THEME, stderr=True, color_system=_detect_color_system())


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}", highlight=False)
