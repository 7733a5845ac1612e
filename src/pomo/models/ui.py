"""Terminal UI for pomo sessions."""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from rich.console import Console
from rich.progress import Progress, TextColumn
from rich.text import Text

from pomo.utils.ui.console import get_console
from pomo.utils.ui.formatters import format_duration, indent, print_at_level

from .runner import TickCallback
from .session import (
    Interval,
    SessionConfig,
    SessionState,
    block_noun,
    first_block_done_at,
    projected_end,
)

BANNER = (
    r" _ __   ___  _ __ ___   ___  ",
    r"| '_ \ / _ \| '_ ` _ \ / _ \ ",
    r"| |_) | (_) | | | | | | (_) |",
    r"| .__/ \___/|_| |_| |_|\___/ ",
    r"|_|                          ",
)
BANNER_COLORS = ("#d86556", "#d88a45", "#dab036", "#9cc45a", "#4fd896")

DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
TIME_FORMAT = "%H:%M:%S"


def countdown_line(interval: Interval, remaining: float) -> str:
    """The in-place countdown text, e.g. ``    block 1: 00:24:59``."""
    return indent(2, f"{interval.label}: {format_duration(remaining)}")


def config_summary(config: SessionConfig) -> str:
    unit = config.time_unit.display_name
    summary = (
        f"config: {config.block_count} {block_noun(config)} of "
        f"{config.focus_duration} {unit} focus"
    )
    if config.block_count > 1:
        return f"{summary} and {config.break_duration} {unit} break."
    return f"{summary}."


class TimerDisplay:
    """Prints the session banner, status lines and per-interval countdowns."""

    def __init__(self, console: Console | None = None):
        self.console = console or get_console()

    def show_banner(self) -> None:
        for line, color in zip(BANNER, BANNER_COLORS):
            self.console.print(Text(line, style=f"bold {color}"))
        self.console.print()

    def show_summary(
        self,
        config: SessionConfig,
        state: SessionState,
        started_at: datetime,
        debug: bool = False,
    ) -> None:
        """Print the start time, configuration and projected end times."""
        if debug:
            print_at_level(1, f"DEBUG: {debug}", self.console)
        print_at_level(
            2, f"started pomo at: {started_at.strftime(DATETIME_FORMAT)}", self.console
        )
        print_at_level(2, config_summary(config), self.console)
        self.console.print()

        if state.remaining_blocks > 1:
            done_at = first_block_done_at(config, started_at)
            print_at_level(
                2, f"first block is done at: {done_at.strftime(TIME_FORMAT)}", self.console
            )
        if state.remaining_blocks > 0 or state.remaining_breaks > 0:
            print_at_level(
                2,
                f"remaining: {state.remaining_blocks} blocks, "
                f"{state.remaining_breaks} breaks.",
                self.console,
            )
        session_end = projected_end(config, started_at)
        print_at_level(
            2,
            f"pomo session is done at: {session_end.strftime(TIME_FORMAT)}.",
            self.console,
        )
        self.console.print()

    @contextmanager
    def countdown(self, interval: Interval, total_seconds: float) -> Iterator[TickCallback]:
        """
        Show a single, continuously overwritten countdown line.

        Yields the tick callback to hand to the runner.
        """
        with Progress(
            TextColumn("{task.description}", markup=False),
            console=self.console,
            auto_refresh=False,
        ) as progress:
            task = progress.add_task(countdown_line(interval, total_seconds), total=None)

            def on_tick(remaining: float) -> None:
                progress.update(
                    task, description=countdown_line(interval, remaining), refresh=True
                )

            yield on_tick

    def interval_finished(self) -> None:
        self.console.print()

    def show_finished(self) -> None:
        print_at_level(1, "pomo finished.", self.console)

    def show_interrupted(self) -> None:
        self.console.print()
        print_at_level(1, "pomo interrupted.", self.console)
