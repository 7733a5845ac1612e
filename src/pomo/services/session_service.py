"""Service driving a full pomo session."""

from pomo.models.runner import CancelToken, IntervalRunner
from pomo.models.session import (
    Interval,
    SessionConfig,
    SessionState,
    advance,
    current_interval,
    init_state,
    is_complete,
)
from pomo.models.ui import TimerDisplay
from pomo.utils.logger import get_logger

from .notification_service import NotificationService


class SessionService:
    """
    Runs intervals one after another until the session is complete.

    The service owns the session state: it asks the sequencer for the current
    interval, hands it to the runner, and replaces the state with the
    advanced one once the interval is done.
    """

    def __init__(
        self,
        config: SessionConfig,
        runner: IntervalRunner,
        display: TimerDisplay,
        notifier: NotificationService,
    ):
        self.config = config
        self.runner = runner
        self.display = display
        self.notifier = notifier
        self.logger = get_logger()
        self.state = init_state(config)

    def _on_complete(self, interval: Interval) -> None:
        # Delivery runs in the background; the next interval starts right away.
        self.notifier.notify(interval)

    async def run_interval(
        self, interval: Interval, cancel: CancelToken | None = None
    ) -> bool:
        total_seconds = interval.total_seconds(self.config.time_unit)
        with self.display.countdown(interval, total_seconds) as on_tick:
            completed = await self.runner.run(
                interval, on_tick, self._on_complete, cancel=cancel
            )
        self.display.interval_finished()
        return completed

    async def run(self, cancel: CancelToken | None = None) -> SessionState:
        """Run every remaining interval. Returns the final session state."""
        self.logger.info(
            "session started: %d blocks, %d/%d %s",
            self.config.block_count,
            self.config.focus_duration,
            self.config.break_duration,
            self.config.time_unit.display_name,
        )

        while not is_complete(self.config, self.state):
            interval = current_interval(self.config, self.state)
            if not await self.run_interval(interval, cancel):
                self.logger.info("session cancelled during %s", interval.label)
                await self.notifier.drain()
                return self.state
            self.state = advance(self.state)

        await self.notifier.drain()
        self.logger.info("session finished")
        return self.state
