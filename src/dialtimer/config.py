"""Timer configuration — default limits and the validated config object."""

from dataclasses import dataclass

TIME_LIMIT = 60
TICK_INTERVAL = 1.0


@dataclass(frozen=True)
class TimerConfig:
    """Settings fixed for the lifetime of a timer.

    ``time_limit`` bounds the countdown range and is also the number of ticks
    drawn on the dial.  ``tick_interval`` is the delay in seconds between two
    countdown ticks.
    """

    time_limit: int = TIME_LIMIT
    tick_interval: float = TICK_INTERVAL

    def __post_init__(self) -> None:
        if isinstance(self.time_limit, bool) or not isinstance(self.time_limit, int):
            raise TypeError(
                f"time_limit must be an integer, got {type(self.time_limit).__name__}"
            )
        if self.time_limit < 1:
            raise ValueError(f"time_limit must be at least 1, got {self.time_limit}")
        if not self.tick_interval > 0:
            raise ValueError(f"tick_interval must be positive, got {self.tick_interval}")
