"""FrameLoop - start/stop gated repeating frame timer."""

import logging
from typing import Callable, Optional

from .scheduler import AsyncioScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

# Seconds between ticks (20 ms)
FRAME_DELAY = 0.02


class FrameLoop:
    """
    Invokes a callback at a fixed cadence between start() and stop().

    At most one timer is active per FrameLoop: start() while running and
    stop() while stopped are no-ops.
    """

    def __init__(self, scheduler: Optional[Scheduler] = None, delay: float = FRAME_DELAY):
        """
        Initialize frame loop.

        Args:
            scheduler: Timing source (default: AsyncioScheduler on the running loop)
            delay: Seconds between ticks
        """
        if delay <= 0:
            raise ValueError(f"delay must be positive, got {delay}")
        self.scheduler = scheduler or AsyncioScheduler()
        self.delay = delay
        self._running = False
        self._timer: Optional[TimerHandle] = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self, callback: Callable[[], None]) -> bool:
        """
        Start ticking.

        If the scheduler cannot create a timer its error propagates and the
        loop stays stopped. If callback raises, the loop stops before the
        error propagates.

        Returns:
            True if a timer was started, False if already running
        """
        if self._running:
            return False

        def tick():
            try:
                callback()
            except Exception:
                # A failing tick must not leave a dead timer marked as running
                self.stop()
                raise

        self._timer = self.scheduler.call_every(self.delay, tick)
        self._running = True
        logger.debug(f"Frame loop started (delay={self.delay:.3f}s)")
        return True

    def stop(self) -> bool:
        """
        Stop ticking. Takes effect before the next tick.

        Returns:
            True if a running timer was cancelled, False if not running
        """
        if not self._running:
            return False

        self._running = False
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        logger.debug("Frame loop stopped")
        return True
