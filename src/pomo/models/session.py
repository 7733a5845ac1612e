"""Session sequencing for pomo.

A session is an alternating run of focus blocks and breaks::

    block 1 -> break 1 -> block 2 -> ... -> break N-1 -> block N

It always starts and ends on a focus block. Breaks only ever sit between two
blocks, so a single-block session has no break at all.

``SessionState`` is an immutable value: every transition returns a new state
and never touches the old one.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import InvalidConfigError

# Upper bounds keep projected end times inside the datetime range.
MAX_BLOCKS = 100
MAX_DURATION = 24 * 60


class TimeUnit(Enum):
    """Scale applied to configured durations."""

    MINUTE = 60
    SECOND = 1

    @property
    def seconds(self) -> int:
        return self.value

    @property
    def display_name(self) -> str:
        return "minutes" if self is TimeUnit.MINUTE else "seconds"


class IntervalKind(Enum):
    FOCUS = "focus"
    BREAK = "break"


class SessionConfig(BaseModel):
    """Immutable session configuration built once from user input."""

    model_config = ConfigDict(frozen=True)

    block_count: int = Field(default=3, ge=1, le=MAX_BLOCKS)
    focus_duration: int = Field(default=25, gt=0, le=MAX_DURATION)
    break_duration: int = Field(default=5, gt=0, le=MAX_DURATION)
    time_unit: TimeUnit = Field(default=TimeUnit.MINUTE)

    @classmethod
    def create(cls, **values) -> SessionConfig:
        """Build a config, raising InvalidConfigError instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
            details = "; ".join(
                f"{field}: {err['msg']}" for field, err in zip(fields, e.errors())
            )
            raise InvalidConfigError(f"Invalid session config ({details})", fields) from e


@dataclass(frozen=True)
class SessionState:
    """Position within a session."""

    is_break: bool = False
    current_block: int = 1
    current_break: int = 0
    remaining_blocks: int = 0
    remaining_breaks: int = 0
    finished: bool = False


@dataclass(frozen=True)
class Interval:
    """A single focus block or break, derived from config and state."""

    kind: IntervalKind
    ordinal: int
    duration: int

    @property
    def is_break(self) -> bool:
        return self.kind is IntervalKind.BREAK

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``block 2`` or ``break 1``."""
        noun = "break" if self.is_break else "block"
        return f"{noun} {self.ordinal}"

    def total_seconds(self, time_unit: TimeUnit) -> int:
        return self.duration * time_unit.seconds


def init_state(config: SessionConfig) -> SessionState:
    """Create the state for the first focus block of a session."""
    invalid = [
        name
        for name, minimum in (
            ("block_count", 1),
            ("focus_duration", 1),
            ("break_duration", 1),
        )
        if getattr(config, name) < minimum
    ]
    if invalid:
        raise InvalidConfigError(
            f"Invalid session config ({', '.join(invalid)} must be positive)", invalid
        )

    return SessionState(
        is_break=False,
        current_block=1,
        current_break=0,
        remaining_blocks=config.block_count - 1,
        remaining_breaks=config.block_count - 1,
    )


def is_complete(config: SessionConfig, state: SessionState) -> bool:
    """Return True once the final focus block has finished."""
    return state.finished or state.current_block > config.block_count


def advance(state: SessionState) -> SessionState:
    """Return the state that follows the interval described by ``state``."""
    if state.finished:
        raise ValueError("Cannot advance a finished session")

    if state.is_break:
        return replace(
            state,
            is_break=False,
            current_block=state.current_block + 1,
            remaining_blocks=state.remaining_blocks - 1,
        )

    # Last block: no trailing break.
    if state.remaining_breaks == 0:
        return replace(state, finished=True)

    return replace(
        state,
        is_break=True,
        current_break=state.current_break + 1,
        remaining_breaks=state.remaining_breaks - 1,
    )


def current_interval(config: SessionConfig, state: SessionState) -> Interval:
    """Describe the interval that ``state`` is about to run."""
    if state.is_break:
        return Interval(IntervalKind.BREAK, state.current_break, config.break_duration)
    return Interval(IntervalKind.FOCUS, state.current_block, config.focus_duration)


def iter_intervals(config: SessionConfig) -> Iterator[Interval]:
    """Yield every interval of a session in order."""
    state = init_state(config)
    while not is_complete(config, state):
        yield current_interval(config, state)
        state = advance(state)


def projected_total_duration(config: SessionConfig) -> int:
    """Total session length in the config's time unit."""
    return (config.block_count * config.focus_duration) + (
        (config.block_count - 1) * config.break_duration
    )


def projected_end(config: SessionConfig, start: datetime) -> datetime:
    total = projected_total_duration(config) * config.time_unit.seconds
    return start + timedelta(seconds=total)


def first_block_done_at(config: SessionConfig, start: datetime) -> datetime:
    """When the first block (and the break after it, if any) is over."""
    units = config.focus_duration
    if config.block_count > 1:
        units += config.break_duration
    return start + timedelta(seconds=units * config.time_unit.seconds)


def block_noun(config: SessionConfig) -> str:
    """Plural only when more than one block remains after the first one."""
    return "blocks" if config.block_count - 1 > 1 else "block"
