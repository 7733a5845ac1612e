"""Session model - sequencing, timing and display for pomo."""

from .exceptions import InvalidConfigError, NotificationError, PomoError
from .runner import CancelToken, CompletionSignal, IntervalRunner
from .session import (
    Interval,
    IntervalKind,
    SessionConfig,
    SessionState,
    TimeUnit,
    advance,
    current_interval,
    init_state,
    is_complete,
    iter_intervals,
)

__all__ = [
    "PomoError",
    "InvalidConfigError",
    "NotificationError",
    "CancelToken",
    "CompletionSignal",
    "IntervalRunner",
    "Interval",
    "IntervalKind",
    "SessionConfig",
    "SessionState",
    "TimeUnit",
    "advance",
    "current_interval",
    "init_state",
    "is_complete",
    "iter_intervals",
]
