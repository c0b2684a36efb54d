"""Request throttling for the Codeforces web interface."""

import asyncio
import time
from typing import Awaitable, Callable

from loguru import logger


class AsyncRateLimiter:
    """
    Spaces out permits so that at most ``rate`` requests are issued per second.

    The first permit is granted immediately. Every following permit is
    scheduled ``1 / rate`` seconds after the previous one; time spent idle is
    not saved up, so there is never more than one immediate permit.
    """

    def __init__(
        self,
        rate: float = 5.0,
        *,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize rate limiter.

        Args:
            rate: Maximum permits per second
            clock: Monotonic clock in seconds
            sleep: Coroutine used to wait
        """
        if rate <= 0:
            raise ValueError(f"Rate must be positive, got {rate}")

        self.rate = rate
        self.interval = 1.0 / rate
        self._clock = clock
        self._sleep = sleep
        self._next_free: float | None = None
        self._lock = asyncio.Lock()

    async def acquire(self) -> float:
        """
        Wait until the next request may be issued.

        Returns:
            Seconds spent waiting
        """
        async with self._lock:
            now = self._clock()
            if self._next_free is None or self._next_free <= now:
                self._next_free = now + self.interval
                return 0.0

            delay = self._next_free - now
            self._next_free += self.interval

        logger.debug(f"Rate limit applied, sleeping for {delay:.3f}s")
        await self._sleep(delay)
        return delay
