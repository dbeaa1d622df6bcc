"""Text rendering of the dial for the terminal."""

from __future__ import annotations

from dialtimer.config import TIME_LIMIT
from dialtimer.core.dial import DialTick, dial_ticks
from dialtimer.core.timer import TimerSnapshot

FULL = "█"
PARTIAL = "▌"
EMPTY = "░"


def format_remaining(seconds: float) -> str:
    """Format *seconds* as ``M:SS``."""
    total = int(seconds)
    return f"{total // 60}:{total % 60:02d}"


def _glyph(tick: DialTick) -> str:
    if tick.filled:
        return FULL
    if tick.empty:
        return EMPTY
    return PARTIAL


def render_dial(progress: float, time_limit: int = TIME_LIMIT) -> str:
    """Draw the dial unrolled into one line, one glyph per tick."""
    return "".join(_glyph(tick) for tick in dial_ticks(progress, time_limit))


def render_frame(snapshot: TimerSnapshot) -> str:
    """Draw the dial, the remaining time and the controls for *snapshot*."""
    controls = "stop" if snapshot.running else "start"
    if snapshot.reset_visible:
        controls += " | reset"
    return (
        f"[{render_dial(snapshot.progress, snapshot.time_limit)}] "
        f"{format_remaining(snapshot.time_remaining)}  ({controls})"
    )
