"""Decorators for command functions."""

import functools
import time
import traceback
from collections.abc import Callable

import typer

from pomo.models.exceptions import InvalidConfigError, PomoError
from pomo.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    get_exit_code_description,
    get_exit_code_name,
)
from pomo.utils.logger import get_logger
from pomo.utils.ui.formatters import format_error


def exit_code_for(error: PomoError) -> int:
    """Map a pomo error to the exit code the CLI reports for it."""
    if isinstance(error, InvalidConfigError):
        return ERROR_INVALID_ARGS
    return ERROR_GENERAL


def command_wrapper(func: Callable):
    """Wrap a command with logging and error-to-exit-code translation."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except PomoError as e:
            elapsed = time.monotonic() - start
            code = exit_code_for(e)
            logger.error(
                "command failed: %s (%.3fs) - %s [%s: %s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(code),
                get_exit_code_description(code),
            )
            format_error(str(e))
            raise typer.Exit(code=code) from e

        except typer.Exit as e:
            # Re-raise Typer's own exits (like --version or an interrupted session)
            logger.info(
                "command exited: %s (code %s: %s)",
                cmd,
                e.exit_code,
                get_exit_code_description(e.exit_code),
            )
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [%s: %s]\n%s",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(ERROR_GENERAL),
                get_exit_code_description(ERROR_GENERAL),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
