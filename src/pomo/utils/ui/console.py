"""Console utilities for pomo."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = False) -> Console:
    """Get a Rich Console instance shared by every pomo output path."""
    return Console(highlight=highlight)
