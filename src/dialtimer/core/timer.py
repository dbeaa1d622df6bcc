"""Timer core — the countdown state machine behind the dial."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from dialtimer.config import TimerConfig
from dialtimer.core.dial import PointLike, position_to_time

logger = logging.getLogger(__name__)


class TimerPhase(Enum):
    """Possible phases of the timer."""

    IDLE = "idle"
    RUNNING = "running"


@dataclass(frozen=True)
class TimerSnapshot:
    """Read-only view of the timer handed to the presentation layer."""

    time_remaining: int
    running: bool
    time_limit: int

    @property
    def progress(self) -> float:
        """Fraction of the dial still remaining, in ``[0, 1]``."""
        return self.time_remaining / self.time_limit

    @property
    def reset_visible(self) -> bool:
        return self.time_remaining != self.time_limit


Subscriber = Callable[[TimerSnapshot], None]


class TimerState:
    """Countdown state machine with a single scheduled tick.

    The countdown is driven by ``scheduler.call_later``: by default the
    running asyncio event loop, or any object with the same method such as
    :class:`~dialtimer.core.scheduler.ManualScheduler`.  At most one tick is
    pending at a time, and none while the timer is idle.

    Operations never raise for misuse.  Toggling with no time left, or
    setting the time while running, is ignored.
    """

    def __init__(self, config: Optional[TimerConfig] = None, scheduler: Any = None) -> None:
        self._config: TimerConfig = config if config is not None else TimerConfig()
        self._scheduler = scheduler if scheduler is not None else asyncio.get_running_loop()
        self._time_remaining: int = self._config.time_limit
        self._running: bool = False
        self._handle: Any = None
        # Bumped on every cancel so a callback that slipped through is ignored.
        self._generation: int = 0
        self._closed: bool = False
        self._subscribers: list[Subscriber] = []

    # -- read-only state -----------------------------------------------------

    @property
    def time_limit(self) -> int:
        return self._config.time_limit

    @property
    def time_remaining(self) -> int:
        return self._time_remaining

    @property
    def running(self) -> bool:
        return self._running

    @property
    def phase(self) -> TimerPhase:
        return TimerPhase.RUNNING if self._running else TimerPhase.IDLE

    @property
    def progress(self) -> float:
        return self._time_remaining / self._config.time_limit

    @property
    def reset_visible(self) -> bool:
        return self._time_remaining != self._config.time_limit

    def snapshot(self) -> TimerSnapshot:
        """Return the current state as an immutable snapshot."""
        return TimerSnapshot(
            time_remaining=self._time_remaining,
            running=self._running,
            time_limit=self._config.time_limit,
        )

    # -- public interface ----------------------------------------------------

    def toggle(self) -> None:
        """Start the countdown when idle, stop it when running.

        Starting needs at least one second left; otherwise nothing happens.
        """
        if self._running:
            self._stop()
            logger.debug("Countdown stopped at %d", self._time_remaining)
            self._notify()
            return

        if self._closed:
            logger.debug("toggle() ignored: timer is closed")
            return
        if self._time_remaining <= 0:
            logger.debug("toggle() ignored: no time remaining")
            return

        self._begin_running()
        logger.debug("Countdown started from %d", self._time_remaining)
        self._notify()

    def reset(self) -> None:
        """Stop any countdown and refill the dial."""
        self._stop()
        self._time_remaining = self._config.time_limit
        logger.debug("Timer reset to %d", self._time_remaining)
        self._notify()

    def set_time_by_position(self, center: PointLike, position: PointLike) -> None:
        """Set the remaining time from a touch at *position* on the dial.

        Ignored while running.  A touch exactly on *center* keeps the
        current time.
        """
        if self._running:
            logger.debug("set_time_by_position() ignored: timer is running")
            return
        self._assign(
            position_to_time(
                center,
                position,
                time_limit=self._config.time_limit,
                previous=self._time_remaining,
            )
        )

    def set_time(self, seconds: int) -> None:
        """Set the remaining time directly, clamped into ``[0, time_limit]``.

        Ignored while running.
        """
        if self._running:
            logger.debug("set_time() ignored: timer is running")
            return
        self._assign(min(max(int(seconds), 0), self._config.time_limit))

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Call *callback* with a snapshot after every change.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def close(self) -> None:
        """Cancel any countdown and drop all subscribers.

        Subscribers hear about a countdown stopped here before they are
        dropped, so anyone waiting for the timer to go idle is released.
        """
        was_running = self._running
        self._stop()
        if was_running:
            logger.debug("Countdown stopped by close() at %d", self._time_remaining)
            self._notify()
        self._subscribers.clear()
        self._closed = True

    # -- private helpers -----------------------------------------------------

    def _assign(self, seconds: int) -> None:
        if seconds == self._time_remaining:
            return
        self._time_remaining = seconds
        self._notify()

    def _begin_running(self) -> None:
        """Replace any pending tick and enter the running phase."""
        self._cancel()
        self._running = True
        self._schedule()

    def _stop(self) -> None:
        self._running = False
        self._cancel()

    def _cancel(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _schedule(self) -> None:
        self._handle = self._scheduler.call_later(
            self._config.tick_interval, self._tick, self._generation
        )

    def _tick(self, generation: int) -> None:
        if generation != self._generation or not self._running:
            return
        self._handle = None
        self._time_remaining = max(self._time_remaining - 1, 0)

        if self._time_remaining <= 0:
            self._stop()
            logger.debug("Countdown finished")
        else:
            self._schedule()
        self._notify()

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for callback in list(self._subscribers):
            callback(snapshot)


async def wait_until_idle(state: TimerState) -> TimerSnapshot:
    """Wait until *state* stops running and return the final snapshot."""
    if not state.running:
        return state.snapshot()

    finished: asyncio.Future[TimerSnapshot] = asyncio.get_running_loop().create_future()

    def on_change(snapshot: TimerSnapshot) -> None:
        if not snapshot.running and not finished.done():
            finished.set_result(snapshot)

    unsubscribe = state.subscribe(on_change)
    try:
        return await finished
    finally:
        unsubscribe()
