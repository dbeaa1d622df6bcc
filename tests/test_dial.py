"""Tests for the dial geometry helpers."""

import math

import pytest

from dialtimer.core.dial import (
    DialTick,
    Point,
    dial_ticks,
    position_to_time,
    tick_segment,
    time_to_angle,
)

# ---------------------------------------------------------------------------
# position_to_time()
# ---------------------------------------------------------------------------


class TestPositionToTime:
    """Touch points map clockwise from the top of the dial."""

    @pytest.mark.parametrize(
        ("position", "expected"),
        [
            ((0, -10), 0),
            ((10, 0), 15),
            ((0, 10), 30),
            ((-10, 0), 45),
        ],
    )
    def test_cardinal_points(self, position: tuple, expected: int) -> None:
        assert position_to_time((0, 0), position) == expected

    def test_offset_center(self) -> None:
        assert position_to_time(Point(100, 100), Point(100, 40)) == 0
        assert position_to_time(Point(100, 100), Point(160, 100)) == 15

    def test_distance_does_not_matter(self) -> None:
        assert position_to_time((0, 0), (1, 0)) == position_to_time((0, 0), (500, 0))

    def test_rounds_to_nearest_second(self) -> None:
        # 8 degrees clockwise from the top is 1.33 seconds
        angle = math.radians(8)
        position = (math.sin(angle) * 50, -math.cos(angle) * 50)
        assert position_to_time((0, 0), position) == 1

    def test_just_left_of_top_wraps_to_zero(self) -> None:
        angle = math.radians(-1)
        position = (math.sin(angle) * 50, -math.cos(angle) * 50)
        assert position_to_time((0, 0), position) == 0

    def test_result_stays_below_time_limit(self) -> None:
        for step in range(360):
            angle = math.radians(step + 0.5)
            position = (math.sin(angle) * 20, -math.cos(angle) * 20)
            assert 0 <= position_to_time((0, 0), position) < 60

    def test_custom_time_limit(self) -> None:
        assert position_to_time((0, 0), (0, 10), time_limit=120) == 60

    def test_center_returns_previous(self) -> None:
        assert position_to_time((3, 4), (3, 4), previous=27) == 27

    def test_center_default_previous_is_zero(self) -> None:
        assert position_to_time((0, 0), (0, 0)) == 0

    @pytest.mark.parametrize(
        ("center", "position"),
        [
            ((0, 0), (math.nan, 0)),
            ((0, 0), (10, math.inf)),
            ((math.nan, 0), (0, -10)),
            ((0, -math.inf), (0, 10)),
        ],
    )
    def test_non_finite_returns_previous(self, center: tuple, position: tuple) -> None:
        assert position_to_time(center, position, previous=12) == 12


# ---------------------------------------------------------------------------
# time_to_angle()
# ---------------------------------------------------------------------------


class TestTimeToAngle:
    """time_to_angle() places seconds on the dial."""

    def test_quarter(self) -> None:
        assert time_to_angle(15) == pytest.approx(90.0)

    def test_full_dial_wraps(self) -> None:
        assert time_to_angle(60) == pytest.approx(0.0)

    def test_inverse_of_position_to_time(self) -> None:
        for seconds in range(60):
            rad = math.radians(time_to_angle(seconds))
            position = (math.sin(rad) * 30, -math.cos(rad) * 30)
            assert position_to_time((0, 0), position) == seconds


# ---------------------------------------------------------------------------
# dial_ticks()
# ---------------------------------------------------------------------------


class TestDialTicks:
    """dial_ticks() lays out one tick per second."""

    def test_tick_count_matches_time_limit(self) -> None:
        assert len(dial_ticks(1.0)) == 60
        assert len(dial_ticks(1.0, time_limit=12)) == 12

    def test_angles_start_at_top(self) -> None:
        ticks = dial_ticks(0.5)
        assert ticks[0].angle == pytest.approx(-90.0)
        assert ticks[15].angle == pytest.approx(0.0)
        assert ticks[59].angle == pytest.approx(264.0)

    def test_full_progress_fills_everything(self) -> None:
        assert all(tick.filled for tick in dial_ticks(1.0))

    def test_zero_progress_fills_nothing(self) -> None:
        assert all(tick.empty for tick in dial_ticks(0.0))

    def test_boundary_tick_is_partial(self) -> None:
        ticks = dial_ticks(10.5 / 60)
        assert all(tick.filled for tick in ticks[:10])
        assert ticks[10].fill == pytest.approx(0.5)
        assert ticks[10].partial
        assert all(tick.empty for tick in ticks[11:])

    def test_progress_is_clamped(self) -> None:
        assert dial_ticks(1.5) == dial_ticks(1.0)
        assert dial_ticks(-0.5) == dial_ticks(0.0)


# ---------------------------------------------------------------------------
# tick_segment()
# ---------------------------------------------------------------------------


class TestTickSegment:
    """tick_segment() grows outwards with the fill amount."""

    def test_full_top_tick(self) -> None:
        start, end = tick_segment(DialTick(index=0, angle=-90.0, fill=1.0), 100, 60)
        assert start.x == pytest.approx(0.0, abs=1e-9)
        assert start.y == pytest.approx(-60.0)
        assert end.y == pytest.approx(-100.0)

    def test_half_filled_tick(self) -> None:
        start, end = tick_segment(DialTick(index=15, angle=0.0, fill=0.5), 100, 60)
        assert start == pytest.approx(Point(60.0, 0.0))
        assert end == pytest.approx(Point(80.0, 0.0))

    def test_empty_tick_has_no_length(self) -> None:
        start, end = tick_segment(DialTick(index=30, angle=90.0, fill=0.0), 100, 60)
        assert start == pytest.approx(end)

    def test_center_offset(self) -> None:
        start, end = tick_segment(
            DialTick(index=0, angle=-90.0, fill=1.0), 10, 5, center=(50, 50)
        )
        assert start.y == pytest.approx(45.0)
        assert end.y == pytest.approx(40.0)
