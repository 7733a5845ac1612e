"""Shared test fixtures and configuration.

Keeps log files out of the real user log directory and provides a virtual
clock so interval runs finish instantly.
"""

from __future__ import annotations

import asyncio
import heapq
import io
import itertools
import logging
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest
from rich.console import Console

# ---------------------------------------------------------------------------
# Logger isolation
# ---------------------------------------------------------------------------


def _reset_pomo_logger() -> None:
    """Detach the pomo log files; handlers owned by pytest stay in place."""
    import pomo.utils.logger as logger_mod

    pomo_logger = logging.getLogger("pomo")
    for handler in list(pomo_logger.handlers):
        if isinstance(handler, RotatingFileHandler):
            pomo_logger.removeHandler(handler)
            handler.close()
    pomo_logger.setLevel(logging.NOTSET)
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Point the application logger at a temporary directory."""
    log_dir = tmp_path / "logs"
    _reset_pomo_logger()
    with patch("pomo.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _reset_pomo_logger()


# ---------------------------------------------------------------------------
# Virtual time
# ---------------------------------------------------------------------------


class VirtualClock:
    """A clock plus sleep function that only advance when driven.

    ``drive`` runs a coroutine, lets every task settle, then jumps straight to
    the earliest pending wake-up time. Sleepers that were cancelled meanwhile
    are skipped.
    """

    def __init__(self, start: float = 0.0):
        self.now = start
        self._sleepers: list[tuple[float, int, asyncio.Future]] = []
        self._seq = itertools.count()

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        future = asyncio.get_running_loop().create_future()
        heapq.heappush(
            self._sleepers, (self.now + max(0.0, seconds), next(self._seq), future)
        )
        await future

    async def _settle(self) -> None:
        for _ in range(50):
            await asyncio.sleep(0)

    async def drive(self, coro):
        task = asyncio.ensure_future(coro)
        while True:
            await self._settle()
            if task.done():
                return task.result()

            while self._sleepers and self._sleepers[0][2].done():
                heapq.heappop(self._sleepers)
            if not self._sleepers:
                task.cancel()
                raise RuntimeError("task is waiting on something other than the clock")

            wake_at, _, future = heapq.heappop(self._sleepers)
            self.now = max(self.now, wake_at)
            future.set_result(None)


@pytest.fixture()
def clock() -> VirtualClock:
    return VirtualClock()


# ---------------------------------------------------------------------------
# Console capture
# ---------------------------------------------------------------------------


@pytest.fixture()
def console() -> Console:
    """A plain, wide console writing to memory. Read it with console.file.getvalue()."""
    return Console(
        file=io.StringIO(),
        width=120,
        force_terminal=False,
        color_system=None,
        highlight=False,
    )
