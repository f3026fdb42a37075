"""Rate limiter that delays the return of semaphore permits."""

import functools

from async_permits.logging import get_logger
from async_permits.rate_limit.base import RateLimiterBase
from async_permits.rate_limit.config import SimpleRateLimiterConfig
from async_permits.semaphore import Semaphore, void_resource
from async_permits.timer import LoopTimer, Timer


logger = get_logger(__name__)


class SimpleRateLimiter(RateLimiterBase):
    """Rate limiter built on a resource-less Semaphore.

    Every admitted operation takes a permit, and the permit is handed back on
    a timer instead of when the operation finishes. That turns the
    semaphore's concurrency bound into a bound on throughput.

    In burst mode up to ``requests`` operations are admitted at once, and each
    permit comes back ``interval`` ms after its own acquisition (a sliding
    window per permit). In uniform mode only one permit exists and it comes
    back ``interval / requests`` ms after each acquisition, spacing
    operations evenly.

    Args:
        requests: Number of requests allowed per interval (must be >= 1)
        interval: Interval length in milliseconds (must be > 0)
        uniform_distribution: Spread requests evenly instead of bursting
        timer: Schedules the delayed releases. Defaults to the running
            event loop.

    Example:
        # At most 10 calls per second, evenly spaced
        limiter = SimpleRateLimiter(requests=10, interval=1000, uniform_distribution=True)

        async with limiter:
            await api_call()

        @limiter
        async def fetch():
            await api_call()
    """

    # The permit comes back on a timer, not when the caller is done
    releases_on_exit = False

    def __init__(
        self,
        requests: int,
        interval: float,
        uniform_distribution: bool = False,
        *,
        timer: Timer | None = None,
    ):
        self._config = SimpleRateLimiterConfig(
            requests=requests,
            interval=interval,
            uniform_distribution=uniform_distribution,
        )
        self._semaphore: Semaphore[None] = Semaphore(
            permits=self._config.permits, resource_factory=void_resource
        )
        self._timer: Timer = timer if timer is not None else LoopTimer()
        self._release_permit = functools.partial(self._semaphore.release, None)

    async def acquire(self) -> None:
        """Wait for a permit and schedule its return.

        Returns as soon as a permit is granted. The release is scheduled
        ``delay_ms`` later and always fires; nothing cancels or shortens it.

        Raises:
            SemaphoreClosedError: If the limiter has been closed
            AcquireCancelledError: If close() cancelled the wait
        """
        await self._semaphore.acquire()
        self._timer.schedule_after(self._config.delay_ms, self._release_permit)

    async def close(self) -> None:
        """Shut the limiter down.

        Pending acquires are cancelled and later ones raise
        SemaphoreClosedError. Waits for already scheduled releases to fire.
        If the wait is cancelled, close() may be called again to finish it.

        Raises:
            SemaphoreClosedError: If the limiter is already closed or closing
        """
        logger.debug("Closing rate limiter (%d pending)", self._semaphore.pending)
        await self._semaphore.drop()

    @property
    def config(self) -> SimpleRateLimiterConfig:
        """Get the limiter's configuration, derived values included."""
        return self._config

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._semaphore.closed
