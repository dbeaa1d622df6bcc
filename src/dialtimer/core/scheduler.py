"""Manual scheduler — drives countdown ticks by hand instead of by the clock.

``ManualScheduler`` offers the ``call_later`` half of the asyncio event loop
interface, so a :class:`~dialtimer.core.timer.TimerState` can run against it
unchanged.  Callbacks only fire inside :meth:`ManualScheduler.advance`.
"""

from __future__ import annotations

import itertools
from typing import Any, Callable


class ManualHandle:
    """A pending callback, shaped like :class:`asyncio.TimerHandle`."""

    def __init__(self, when: float, seq: int, callback: Callable[..., Any], args: tuple) -> None:
        self._when = when
        self._seq = seq
        self._callback = callback
        self._args = args
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled

    def when(self) -> float:
        return self._when

    def _sort_key(self) -> tuple[float, int]:
        return self._when, self._seq

    def _run(self) -> None:
        self._callback(*self._args)


class ManualScheduler:
    """A fake clock with a queue of delayed callbacks."""

    def __init__(self) -> None:
        self._now: float = 0.0
        self._pending: list[ManualHandle] = []
        self._counter = itertools.count()

    def time(self) -> float:
        """Return the current fake time in seconds."""
        return self._now

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> ManualHandle:
        """Queue *callback* to run *delay* seconds from now."""
        handle = ManualHandle(self._now + max(delay, 0.0), next(self._counter), callback, args)
        self._pending.append(handle)
        return handle

    def pending(self) -> int:
        """Return the number of callbacks still waiting to fire."""
        return sum(1 for handle in self._pending if not handle.cancelled())

    def advance(self, seconds: float) -> int:
        """Move the clock forward by *seconds*, firing every due callback.

        Callbacks scheduled by a firing callback run in the same call when
        they fall inside the window.  Returns the number of callbacks run.
        """
        if seconds < 0:
            raise ValueError(f"cannot move the clock backwards, got {seconds}")
        target = self._now + seconds
        fired = 0
        while True:
            due = [h for h in self._pending if not h.cancelled() and h.when() <= target]
            if not due:
                break
            handle = min(due, key=ManualHandle._sort_key)
            self._pending.remove(handle)
            self._now = handle.when()
            handle._run()
            fired += 1
        self._now = target
        self._pending = [h for h in self._pending if not h.cancelled()]
        return fired
