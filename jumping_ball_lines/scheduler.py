"""Timing sources that invoke a callback repeatedly at a fixed interval."""

import asyncio
from abc import ABC, abstractmethod
from typing import Callable, List, Optional


class TimerHandle(ABC):
    """Handle to a repeating timer created by a Scheduler."""

    @property
    @abstractmethod
    def cancelled(self) -> bool:
        """True once cancel() has been called."""
        pass

    @abstractmethod
    def cancel(self):
        """Stop the timer. Safe to call more than once and from its own callback."""
        pass


class Scheduler(ABC):
    """Creates repeating timers."""

    @abstractmethod
    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Invoke callback every interval seconds until the handle is cancelled.

        The first invocation happens one interval after the call.
        """
        pass


class _AsyncioTimerHandle(TimerHandle):
    """Re-arms loop.call_later after each callback (fixed delay between ticks)."""

    def __init__(self, loop: asyncio.AbstractEventLoop, interval: float, callback: Callable[[], None]):
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._cancelled = False
        self._handle = loop.call_later(interval, self._fire)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def _fire(self):
        if self._cancelled:
            return
        self._callback()
        # The callback may have cancelled us
        if not self._cancelled:
            self._handle = self._loop.call_later(self._interval, self._fire)

    def cancel(self):
        self._cancelled = True
        self._handle.cancel()


class AsyncioScheduler(Scheduler):
    """
    Scheduler backed by an asyncio event loop.

    Callbacks run on the loop thread, one at a time. If no loop is given, the
    running loop is looked up when a timer is created, so call_every() must
    then be called from inside a coroutine or loop callback.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return _AsyncioTimerHandle(loop, interval, callback)


class _ManualTimerHandle(TimerHandle):
    def __init__(self, scheduler: 'ManualScheduler', interval: float, callback: Callable[[], None]):
        self._scheduler = scheduler
        self.interval = interval
        self.callback = callback
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        if not self._cancelled:
            self._cancelled = True
            self._scheduler._timers.remove(self)


class ManualScheduler(Scheduler):
    """
    Scheduler stepped explicitly with tick().

    Used for headless recording and tests, where frames must advance
    deterministically instead of on wall-clock time.
    """

    def __init__(self):
        self._timers: List[_ManualTimerHandle] = []
        self.ticks = 0

    @property
    def active_timers(self) -> int:
        """Number of timers that have not been cancelled."""
        return len(self._timers)

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        handle = _ManualTimerHandle(self, interval, callback)
        self._timers.append(handle)
        return handle

    def tick(self, count: int = 1) -> int:
        """
        Fire every active timer count times.

        A timer cancelled during a tick (including by its own callback) is not
        fired again.

        Returns:
            Number of callbacks invoked
        """
        fired = 0
        for _ in range(count):
            self.ticks += 1
            for handle in list(self._timers):
                if not handle.cancelled:
                    handle.callback()
                    fired += 1
        return fired

    def run_until_idle(self, max_ticks: int = 10_000) -> int:
        """
        Tick until no timer is active.

        Returns:
            Number of ticks performed

        Raises:
            RuntimeError: If timers are still active after max_ticks
        """
        performed = 0
        while self._timers:
            if performed >= max_ticks:
                raise RuntimeError(f"Timers still active after {max_ticks} ticks")
            self.tick()
            performed += 1
        return performed
