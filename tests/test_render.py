"""Tests for the terminal rendering helpers."""

from dialtimer.cli.render import EMPTY, FULL, PARTIAL, format_remaining, render_dial, render_frame
from dialtimer.core.timer import TimerSnapshot

# ---------------------------------------------------------------------------
# Time formatting
# ---------------------------------------------------------------------------


class TestTimeFormatting:
    """Remaining time is shown as M:SS."""

    def test_format_full_minute(self) -> None:
        assert format_remaining(60) == "1:00"

    def test_format_five_seconds(self) -> None:
        assert format_remaining(5) == "0:05"

    def test_format_zero(self) -> None:
        assert format_remaining(0) == "0:00"

    def test_format_truncates_fractions(self) -> None:
        assert format_remaining(59.9) == "0:59"

    def test_format_seven_minutes_thirty_four_seconds(self) -> None:
        assert format_remaining(454) == "7:34"


# ---------------------------------------------------------------------------
# render_dial()
# ---------------------------------------------------------------------------


class TestRenderDial:
    """One glyph per tick: full, partial or empty."""

    def test_full_dial(self) -> None:
        assert render_dial(1.0) == FULL * 60

    def test_empty_dial(self) -> None:
        assert render_dial(0.0) == EMPTY * 60

    def test_partial_tick(self) -> None:
        assert render_dial(0.5 / 4, time_limit=4) == PARTIAL + EMPTY * 3

    def test_quarter_dial(self) -> None:
        assert render_dial(0.25, time_limit=8) == FULL * 2 + EMPTY * 6


# ---------------------------------------------------------------------------
# render_frame()
# ---------------------------------------------------------------------------


class TestRenderFrame:
    """A frame shows the dial, the time and the available controls."""

    def test_idle_full_dial(self) -> None:
        frame = render_frame(TimerSnapshot(time_remaining=60, running=False, time_limit=60))
        assert frame == f"[{FULL * 60}] 1:00  (start)"

    def test_running_shows_stop_and_reset(self) -> None:
        frame = render_frame(TimerSnapshot(time_remaining=3, running=True, time_limit=4))
        assert frame == f"[{FULL * 3}{EMPTY}] 0:03  (stop | reset)"
