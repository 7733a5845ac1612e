"""Interval runner: a countdown ticker racing a deadline wait.

Two asyncio activities run side by side for every interval:

- the deadline wait, which alone decides when the interval is over, and
- the ticker, which reports the remaining time once per ``tick_seconds``.

They are joined through a one-shot ``CompletionSignal``. The ticker checks the
signal before every tick and is cancelled as soon as the deadline is reached,
so the completion callback is always the last thing an interval emits.

The clock and sleep functions are injectable, which lets tests run intervals
on virtual time.
"""

from __future__ import annotations

import asyncio
import contextlib
import time
from collections.abc import Awaitable, Callable

from pomo.utils.logger import get_logger

from .session import Interval, TimeUnit

TickCallback = Callable[[float], None]
CompleteCallback = Callable[[Interval], None]
SleepFunc = Callable[[float], Awaitable[None]]


class CompletionSignal:
    """One-shot flag raised when an interval ends."""

    def __init__(self) -> None:
        self._fired = False

    def fire(self) -> bool:
        """Raise the signal. Returns False if it was already raised."""
        if self._fired:
            return False
        self._fired = True
        return True

    @property
    def fired(self) -> bool:
        return self._fired


class CancelToken:
    """Stops a running interval before its deadline."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()


class IntervalRunner:
    """Runs one interval at a time, blocking until its deadline."""

    def __init__(
        self,
        time_unit: TimeUnit,
        clock: Callable[[], float] = time.monotonic,
        sleep: SleepFunc = asyncio.sleep,
        tick_seconds: float = 1.0,
    ):
        self.time_unit = time_unit
        self.tick_seconds = tick_seconds
        self._clock = clock
        self._sleep = sleep
        self._logger = get_logger()

    async def run(
        self,
        interval: Interval,
        on_tick: TickCallback,
        on_complete: CompleteCallback,
        cancel: CancelToken | None = None,
    ) -> bool:
        """
        Run ``interval`` to completion.

        Returns True when the deadline was reached and ``on_complete`` was
        called, False when ``cancel`` stopped the interval first.
        """
        if cancel is not None and cancel.cancelled:
            return False

        start = self._clock()
        deadline = start + interval.total_seconds(self.time_unit)
        done = CompletionSignal()
        self._logger.debug(
            "interval started: %s (%ss)",
            interval.label,
            interval.total_seconds(self.time_unit),
        )

        ticker = asyncio.create_task(self._tick(start, deadline, done, on_tick))
        try:
            reached = await self._wait_for_deadline(deadline, cancel)
        finally:
            done.fire()
            ticker.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await ticker

        if not reached:
            self._logger.info("interval cancelled: %s", interval.label)
            return False

        self._logger.debug("interval finished: %s", interval.label)
        on_complete(interval)
        return True

    async def _tick(
        self,
        start: float,
        deadline: float,
        done: CompletionSignal,
        on_tick: TickCallback,
    ) -> None:
        beat = 1
        while not done.fired:
            # Ticks are scheduled from the start time so they do not drift.
            next_tick = start + beat * self.tick_seconds
            if next_tick >= deadline:
                return
            await self._sleep(max(0.0, next_tick - self._clock()))

            if done.fired:
                return
            now = self._clock()
            if now >= deadline:
                return
            on_tick(deadline - now)
            beat = max(beat + 1, int((now - start) // self.tick_seconds) + 1)

    async def _sleep_until(self, deadline: float) -> None:
        remaining = deadline - self._clock()
        while remaining > 0:
            await self._sleep(remaining)
            remaining = deadline - self._clock()

    async def _wait_for_deadline(
        self, deadline: float, cancel: CancelToken | None
    ) -> bool:
        if cancel is None:
            await self._sleep_until(deadline)
            return True

        sleeper = asyncio.ensure_future(self._sleep_until(deadline))
        stopper = asyncio.ensure_future(cancel.wait())
        try:
            finished, _ = await asyncio.wait(
                {sleeper, stopper}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            sleeper.cancel()
            stopper.cancel()
            await asyncio.gather(sleeper, stopper, return_exceptions=True)
        return sleeper in finished
