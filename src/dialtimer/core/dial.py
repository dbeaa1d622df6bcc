"""Dial geometry — mapping touch points to seconds and laying out ticks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple, Tuple, Union

from dialtimer.config import TIME_LIMIT


class Point(NamedTuple):
    """A point in screen coordinates (y grows downwards)."""

    x: float
    y: float


PointLike = Union[Point, Tuple[float, float]]


@dataclass(frozen=True)
class DialTick:
    """One tick of the dial and how much of it is highlighted."""

    index: int
    angle: float
    fill: float

    @property
    def filled(self) -> bool:
        return self.fill >= 1.0

    @property
    def empty(self) -> bool:
        return self.fill <= 0.0

    @property
    def partial(self) -> bool:
        return not (self.filled or self.empty)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def position_to_time(
    center: PointLike,
    position: PointLike,
    time_limit: int = TIME_LIMIT,
    previous: int = 0,
) -> int:
    """Return the whole second a touch at *position* selects on the dial.

    The top of the dial is 0 and values grow clockwise on screen.  The angle
    is rounded to the nearest second and wrapped into ``[0, time_limit)``.
    A touch exactly on *center* has no direction, and a coordinate that is
    not finite has no position; both return *previous*.
    """
    cx, cy = center
    px, py = position
    if not all(math.isfinite(v) for v in (cx, cy, px, py)):
        return previous
    if cx == px and cy == py:
        return previous

    degrees = math.degrees(math.atan2(cy - py, cx - px))
    clean_degrees = (degrees - 90 + 360) % 360
    return round(clean_degrees / (360 / time_limit)) % time_limit


def time_to_angle(seconds: float, time_limit: int = TIME_LIMIT) -> float:
    """Return the dial angle of *seconds*, in degrees clockwise from the top."""
    return (seconds * 360 / time_limit) % 360


def dial_ticks(progress: float, time_limit: int = TIME_LIMIT) -> list[DialTick]:
    """Lay out the ``time_limit`` ticks of the dial for *progress*.

    Each tick's angle is in screen degrees (0 points right, -90 is the top).
    ``fill`` is 1 for ticks before the progress point, 0 after it, and the
    fractional remainder for the tick the progress point falls on.
    """
    shown = _clamp(progress, 0.0, 1.0) * time_limit
    step = 360 / time_limit
    return [
        DialTick(index=i, angle=i * step - 90, fill=_clamp(shown - i, 0.0, 1.0))
        for i in range(time_limit)
    ]


def tick_segment(
    tick: DialTick,
    radius: float,
    inner_radius: float,
    center: PointLike = (0.0, 0.0),
) -> tuple[Point, Point]:
    """Return the start and end points of the highlighted part of *tick*.

    The stroke starts at *inner_radius* and grows outwards with ``tick.fill``
    until it reaches *radius*.  An empty tick gives a zero-length segment.
    """
    cx, cy = center
    rad = math.radians(tick.angle)
    cos = math.cos(rad)
    sin = math.sin(rad)
    target_radius = inner_radius + (radius - inner_radius) * tick.fill
    start = Point(cx + cos * inner_radius, cy + sin * inner_radius)
    end = Point(cx + cos * target_radius, cy + sin * target_radius)
    return start, end
