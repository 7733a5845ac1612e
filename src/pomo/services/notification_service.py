"""Desktop notifications for finished intervals."""

from __future__ import annotations

import asyncio
import contextlib

from pomo.models.exceptions import NotificationError
from pomo.models.session import Interval
from pomo.utils.logger import get_logger

NOTIFY_COMMAND = "notify-send"
NOTIFY_TIMEOUT_SECONDS = 5
# How long a finished session waits for notifications still in flight.
NOTIFY_GRACE_SECONDS = 1.0


def notification_message(interval: Interval) -> str:
    """Message body for a finished interval, e.g. ``pomo: block 1 done.``"""
    return f"pomo: {interval.label} done."


class NotificationService:
    """
    Best-effort desktop notifier backed by ``notify-send``.

    Notifications are critical and never expire on their own. Delivery runs
    in background tasks on the session's event loop, so a slow or hung
    ``notify-send`` never holds up the countdown. ``notify`` never raises;
    ``drain`` collects whatever is still running when the session ends.
    """

    def __init__(self, command: str = NOTIFY_COMMAND, enabled: bool = True):
        self.command = command
        self.enabled = enabled
        self.logger = get_logger()
        self._tasks: set[asyncio.Task] = set()

    def build_args(self, message: str) -> list[str]:
        return [self.command, "-u", "critical", "-t", "0", message]

    async def send(self, message: str) -> None:
        """Run the notify command, raising NotificationError on any failure."""
        try:
            process = await asyncio.create_subprocess_exec(
                *self.build_args(message),
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise NotificationError(f"'{self.command}' command not found") from e
        except OSError as e:
            raise NotificationError(f"'{self.command}' failed to run: {e}") from e

        try:
            _, stderr = await asyncio.wait_for(
                process.communicate(), timeout=NOTIFY_TIMEOUT_SECONDS
            )
        except asyncio.TimeoutError as e:
            await self._stop(process)
            raise NotificationError(
                f"'{self.command}' timed out after {NOTIFY_TIMEOUT_SECONDS}s"
            ) from e
        except asyncio.CancelledError:
            await self._stop(process)
            raise

        if process.returncode != 0:
            detail = (stderr or b"").decode(errors="replace").strip()
            raise NotificationError(
                f"'{self.command}' exited with status {process.returncode}: {detail}"
            )

    @staticmethod
    async def _stop(process) -> None:
        with contextlib.suppress(ProcessLookupError):
            process.kill()
        await process.wait()

    async def _deliver(self, interval: Interval) -> bool:
        message = notification_message(interval)
        try:
            await self.send(message)
        except NotificationError as e:
            self.logger.warning("notification failed for %s: %s", interval.label, e)
            return False

        self.logger.debug("notification sent: %s", message)
        return True

    def notify(self, interval: Interval) -> asyncio.Task | None:
        """
        Announce that ``interval`` is done without waiting for delivery.

        Must be called from inside the running event loop. Returns the
        delivery task, whose result tells whether the notification went out,
        or None when notifications are disabled.
        """
        if not self.enabled:
            return None

        task = asyncio.get_running_loop().create_task(self._deliver(interval))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self, timeout: float = NOTIFY_GRACE_SECONDS) -> None:
        """Give in-flight notifications ``timeout`` seconds, then cancel them."""
        if not self._tasks:
            return

        _, pending = await asyncio.wait(set(self._tasks), timeout=timeout)
        for task in pending:
            task.cancel()
        await asyncio.gather(*pending, return_exceptions=True)
        if pending:
            self.logger.warning(
                "dropped %d notification(s) still running after %.1fs",
                len(pending),
                timeout,
            )
