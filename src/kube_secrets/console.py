"""Rich console utilities for styled terminal output.

Secret listings go to standard output; status and error messages go to
standard error so the listing can be piped on its own.
"""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

# Custom theme with consistent colors
_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "cyan bold",
        "muted": "dim",
        "secret.name": "bright_blue",
        "secret.key": "bright_green",
    }
)

# Shared console instances
console = Console(theme=_THEME)
err_console = Console(theme=_THEME, stderr=True)


def line(text: str | Text) -> None:
    """Print one line of listing output exactly as given.

    Markup, emoji codes and automatic highlighting are not applied, and
    long lines are never wrapped. Styling comes only from Text spans.

    Args:
        text: The line to display.

    """
    console.print(text, markup=False, soft_wrap=True, highlight=False, emoji=False)


def info(message: str) -> None:
    """Print an informational message.

    Args:
        message: The message to display.

    """
    err_console.print(f"[info]ℹ[/info] {message}")


def warning(message: str) -> None:
    """Print a warning message.

    Args:
        message: The message to display.

    """
    err_console.print(f"[warning]⚠[/warning] {message}")


def error(message: str) -> None:
    """Print an error message.

    Args:
        message: The message to display.

    """
    err_console.print(f"[error]✗[/error] {message}")


def action(message: str) -> None:
    """Print an action/progress message.

    Args:
        message: The message to display.

    """
    err_console.print(f"[info]→[/info] {message}")


def highlight(text: str) -> str:
    """Return text wrapped in highlight markup.

    Args:
        text: The text to highlight.

    Returns:
        Text wrapped in Rich markup for highlighting.

    """
    return f"[highlight]{text}[/highlight]"
