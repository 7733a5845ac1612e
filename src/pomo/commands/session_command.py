"""Command 'pomo': run a focus/break session."""

import asyncio
from datetime import datetime

import typer

from pomo import __version__
from pomo.models.runner import IntervalRunner
from pomo.models.session import SessionConfig, TimeUnit
from pomo.models.ui import TimerDisplay
from pomo.services.notification_service import NotificationService
from pomo.services.session_service import SessionService
from pomo.utils.exit_codes import ERROR_INTERRUPTED
from pomo.utils.logger import get_logger, set_debug
from pomo.utils.ui.console import get_console

from .decorators import command_wrapper

console = get_console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"pomo {__version__}", markup=False)
        raise typer.Exit()


@command_wrapper
def start(
    blocks: int = typer.Option(
        3, "-x", "--blocks", envvar="POMO_BLOCKS", help="The amount of focus blocks."
    ),
    focus: int = typer.Option(
        25, "-f", "--focus", envvar="POMO_FOCUS", help="The focus duration per block."
    ),
    break_: int = typer.Option(
        5, "-b", "--break", envvar="POMO_BREAK", help="The break duration per block."
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        envvar="POMO_DEBUG",
        help="Turns time inputs into seconds instead of minutes.",
    ),
    notify: bool = typer.Option(
        True,
        "--notify/--no-notify",
        envvar="POMO_NOTIFY",
        help="Send a desktop notification when an interval is done.",
    ),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Prints the current version of pomo.",
    ),
) -> None:
    """Alternate focus blocks and breaks with a live countdown."""
    config = SessionConfig.create(
        block_count=blocks,
        focus_duration=focus,
        break_duration=break_,
        time_unit=TimeUnit.SECOND if debug else TimeUnit.MINUTE,
    )
    set_debug(debug)
    get_logger().info("config: %s", config.model_dump(mode="json"))

    display = TimerDisplay(console)
    service = SessionService(
        config,
        IntervalRunner(config.time_unit),
        display,
        NotificationService(enabled=notify),
    )

    display.show_banner()
    display.show_summary(config, service.state, datetime.now(), debug=debug)

    try:
        asyncio.run(service.run())
    except KeyboardInterrupt:
        display.show_interrupted()
        raise typer.Exit(code=ERROR_INTERRUPTED) from None

    display.show_finished()
