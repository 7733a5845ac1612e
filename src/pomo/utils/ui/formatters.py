"""Output formatters for pomo status lines."""

from rich.console import Console

from .console import get_console

INDENT = "  "


def format_duration(seconds: float) -> str:
    """
    Format a number of seconds as ``HH:MM:SS``.

    Fractions are truncated and negative values clamp to zero. Hours are not
    wrapped, so long sessions simply grow the first field.
    """
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


def indent(level: int, text: str) -> str:
    return f"{INDENT * level}{text}"


def print_at_level(level: int, text: str, console: Console | None = None) -> None:
    """Print a status line indented by ``level``."""
    console = console or get_console()
    console.print(indent(level, text), markup=False)


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {message}")
