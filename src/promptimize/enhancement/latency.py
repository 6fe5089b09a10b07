"""Cancellable simulated latency for the improvement step."""

import asyncio
import logging
from typing import Callable, Generic, Optional, TypeVar

from ..core.exceptions import ImprovementCancelledError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ImprovementTask(Generic[T]):
    """
    Waits a fixed delay, then produces a result from ``work``.

    Nothing in the improve flow cancels it today; ``cancel()`` exists so a
    real asynchronous backend can be dropped in behind the same interface.
    A task runs at most once.
    """

    def __init__(self, work: Callable[[], T], delay: float = 1.5):
        self.work = work
        self.delay = max(0.0, delay)
        self._sleeper: Optional[asyncio.Future] = None
        self._cancelled = False
        self._started = False
        self._done = False

    @property
    def running(self) -> bool:
        return self._started and not self._done

    @property
    def done(self) -> bool:
        return self._done

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    async def run(self) -> T:
        """
        Wait out the delay and return ``work()``.

        Raises:
            ImprovementCancelledError: If ``cancel()`` was called first
            RuntimeError: If the task was already started
        """
        if self._started:
            raise RuntimeError("ImprovementTask can only be run once")
        self._started = True

        try:
            if self._cancelled:
                raise ImprovementCancelledError("Improvement cancelled before start")

            self._sleeper = asyncio.ensure_future(asyncio.sleep(self.delay))
            try:
                await self._sleeper
            except asyncio.CancelledError:
                if self._cancelled:
                    raise ImprovementCancelledError("Improvement cancelled") from None
                raise

            return self.work()
        finally:
            self._done = True

    def cancel(self) -> bool:
        """
        Cancel the pending delay.

        Returns:
            True if the task had not finished and is now cancelled
        """
        if self._done:
            return False
        self._cancelled = True
        if self._sleeper is not None:
            self._sleeper.cancel()
        logger.debug("Improvement task cancelled")
        return True
