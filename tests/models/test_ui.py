"""Tests for the terminal UI: status lines, banner and countdown."""

from __future__ import annotations

from datetime import datetime

from pomo.models.session import (
    Interval,
    IntervalKind,
    SessionConfig,
    TimeUnit,
    init_state,
)
from pomo.models.ui import BANNER, TimerDisplay, config_summary, countdown_line

START = datetime(2026, 1, 5, 9, 0, 0)


def output_lines(console) -> list[str]:
    return console.file.getvalue().splitlines()


class TestCountdownLine:
    def test_focus_line_is_indented_two_levels(self) -> None:
        interval = Interval(IntervalKind.FOCUS, 1, 25)

        assert countdown_line(interval, 1499.6) == "    block 1: 00:24:59"

    def test_break_line(self) -> None:
        interval = Interval(IntervalKind.BREAK, 2, 5)

        assert countdown_line(interval, 65) == "    break 2: 00:01:05"


class TestConfigSummary:
    def test_multiple_blocks_mention_break(self) -> None:
        config = SessionConfig(block_count=3, focus_duration=25, break_duration=5)

        assert (
            config_summary(config)
            == "config: 3 blocks of 25 minutes focus and 5 minutes break."
        )

    def test_single_block_omits_break(self) -> None:
        config = SessionConfig(block_count=1, focus_duration=25)

        assert config_summary(config) == "config: 1 block of 25 minutes focus."

    def test_debug_unit_is_seconds(self) -> None:
        config = SessionConfig(
            block_count=2, focus_duration=10, break_duration=3, time_unit=TimeUnit.SECOND
        )

        assert (
            config_summary(config)
            == "config: 2 block of 10 seconds focus and 3 seconds break."
        )


class TestTimerDisplay:
    def test_banner_is_printed(self, console) -> None:
        TimerDisplay(console).show_banner()

        printed = [line.rstrip() for line in output_lines(console)]
        assert printed[: len(BANNER)] == [line.rstrip() for line in BANNER]
        assert printed[len(BANNER)] == ""

    def test_summary_for_default_session(self, console) -> None:
        config = SessionConfig()
        display = TimerDisplay(console)

        display.show_summary(config, init_state(config), START)

        assert output_lines(console) == [
            "    started pomo at: 2026-01-05 09:00:00",
            "    config: 3 blocks of 25 minutes focus and 5 minutes break.",
            "",
            "    first block is done at: 09:30:00",
            "    remaining: 2 blocks, 2 breaks.",
            "    pomo session is done at: 10:25:00.",
            "",
        ]

    def test_summary_for_single_block(self, console) -> None:
        config = SessionConfig(block_count=1)

        TimerDisplay(console).show_summary(config, init_state(config), START)

        lines = output_lines(console)
        assert "    config: 1 block of 25 minutes focus." in lines
        assert not any("first block is done at" in line for line in lines)
        assert not any("remaining:" in line for line in lines)
        assert "    pomo session is done at: 09:25:00." in lines

    def test_summary_for_two_blocks_skips_first_block_line(self, console) -> None:
        config = SessionConfig(block_count=2)

        TimerDisplay(console).show_summary(config, init_state(config), START)

        lines = output_lines(console)
        assert not any("first block is done at" in line for line in lines)
        assert "    remaining: 1 blocks, 1 breaks." in lines

    def test_debug_line(self, console) -> None:
        config = SessionConfig(time_unit=TimeUnit.SECOND)

        TimerDisplay(console).show_summary(config, init_state(config), START, debug=True)

        lines = output_lines(console)
        assert lines[0] == "  DEBUG: True"
        assert "    pomo session is done at: 09:01:25." in lines

    def test_countdown_renders_last_tick(self, console) -> None:
        display = TimerDisplay(console)
        interval = Interval(IntervalKind.FOCUS, 2, 5)

        with display.countdown(interval, 5) as on_tick:
            on_tick(4.2)
            on_tick(3.1)

        assert "block 2: 00:00:03" in console.file.getvalue()

    def test_countdown_without_ticks_shows_full_duration(self, console) -> None:
        display = TimerDisplay(console)
        interval = Interval(IntervalKind.BREAK, 1, 5)

        with display.countdown(interval, 300):
            pass

        assert "break 1: 00:05:00" in console.file.getvalue()

    def test_finish_messages(self, console) -> None:
        display = TimerDisplay(console)

        display.interval_finished()
        display.show_finished()

        assert output_lines(console) == ["", "  pomo finished."]

    def test_interrupted_message(self, console) -> None:
        TimerDisplay(console).show_interrupted()

        assert "  pomo interrupted." in output_lines(console)
