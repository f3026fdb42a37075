"""Resource pool semaphore with FIFO waiters and drain-on-drop shutdown."""

import asyncio
from collections import deque
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager, suppress
from typing import Any, Generic, TypeVar

from async_permits.exceptions import AcquireCancelledError, SemaphoreClosedError
from async_permits.logging import get_logger


T = TypeVar("T")

logger = get_logger(__name__)


def void_resource() -> None:
    """Resource factory for semaphores where only the permit count matters."""
    return None


class Semaphore(Generic[T]):
    """Counting semaphore that hands out pooled resources.

    Each permit is backed by one resource created by ``resource_factory`` at
    construction time. acquire() hands out the oldest available resource, or
    queues the caller when none is available. release() returns a resource
    and immediately passes it to the oldest queued caller, so waiters are
    served in strict arrival order.

    The semaphore relies on asyncio's cooperative scheduling: every check and
    mutation of the pool and waiter queue happens without an await in between.
    It is not thread-safe.

    Args:
        permits: Number of resources in the pool (must be >= 1)
        resource_factory: Called exactly ``permits`` times to build the pool.
            Defaults to void_resource for plain concurrency bounding.

    Example:
        # Share three clients between any number of tasks
        clients = Semaphore(permits=3, resource_factory=HttpClient)

        async with clients.hold() as client:
            await client.get("/status")

        # Or manage ownership manually
        client = await clients.acquire()
        try:
            await client.get("/status")
        finally:
            clients.release(client)

        # Shut down once every client is back, closing each one
        await clients.drop(lambda client: client.close(), is_async=True)
    """

    def __init__(
        self,
        permits: int,
        resource_factory: Callable[[], T] = void_resource,  # type: ignore[assignment]
    ):
        if permits < 1:
            raise ValueError(f"permits must be >= 1, got {permits}")
        if not callable(resource_factory):
            raise TypeError(
                f"Expected callable, got {type(resource_factory).__name__}"
            )

        self._permits = permits
        self._closed = False
        # Set while drop() is draining, and once it has drained everything
        self._draining = False
        self._drained = False

        # Available resources, oldest release first
        self._resources: deque[T] = deque(resource_factory() for _ in range(permits))
        # Pending acquisitions, oldest first
        self._waiters: deque[asyncio.Future[T]] = deque()

    def _fulfill(self) -> None:
        """Pair queued waiters with available resources, oldest first.

        Waiters whose future is already done (the awaiting task was
        cancelled) are discarded without consuming a resource.
        """
        while self._waiters and self._resources:
            waiter = self._waiters.popleft()
            if waiter.done():
                continue
            waiter.set_result(self._resources.popleft())

    def _reserve(self) -> "asyncio.Future[T]":
        """Return a future for the next resource, ignoring the closed state.

        The future is already resolved when the pool has a resource;
        otherwise it is queued behind existing waiters.
        """
        waiter: asyncio.Future[T] = asyncio.get_running_loop().create_future()
        if self._resources:
            waiter.set_result(self._resources.popleft())
        else:
            self._waiters.append(waiter)
        return waiter

    def _cancel_waiters(self) -> int:
        """Reject every queued waiter in FIFO order.

        Returns:
            Number of waiters that were cancelled
        """
        cancelled = 0
        while self._waiters:
            waiter = self._waiters.popleft()
            if waiter.done():
                continue
            waiter.set_exception(AcquireCancelledError("Pending acquire was cancelled"))
            cancelled += 1
        return cancelled

    def _return_reservations(self, reservations: "list[asyncio.Future[T]]") -> None:
        """Give back resources held by an abandoned drain.

        Reservations still queued were cancelled along with the drain and
        are dropped from the waiter queue.
        """
        returned = 0
        for reservation in reservations:
            if reservation.done() and not reservation.cancelled():
                self._resources.append(reservation.result())
                returned += 1
        self._waiters = deque(waiter for waiter in self._waiters if not waiter.done())
        logger.debug("Drain cancelled, %d resource(s) returned to the pool", returned)

    async def acquire(self) -> T:
        """Acquire a resource.

        Returns the oldest pooled resource without suspending when one is
        available. Otherwise waits, with no timeout, until a release hands
        this caller a resource.

        Returns:
            The acquired resource. It must be passed back to release()
            exactly once.

        Raises:
            SemaphoreClosedError: If the semaphore has been dropped
            AcquireCancelledError: If flush() or drop() cancelled the wait
        """
        if self._closed:
            raise SemaphoreClosedError("Semaphore is closed")

        if self._resources:
            return self._resources.popleft()

        waiter = self._reserve()
        logger.debug("Pool empty, queued acquire (%d waiting)", len(self._waiters))
        try:
            return await waiter
        except asyncio.CancelledError:
            if waiter.cancelled():
                with suppress(ValueError):
                    self._waiters.remove(waiter)
            elif waiter.done() and waiter.exception() is None:
                # Paired with a resource just before the task was cancelled
                self.release(waiter.result())
            raise

    def release(self, resource: T) -> None:
        """Return a previously acquired resource to the pool.

        If any caller is waiting, the oldest one receives a resource
        immediately. Accepted after drop() so draining can complete. The
        resource is not checked against what this semaphore handed out.

        Args:
            resource: The resource obtained from acquire()
        """
        self._resources.append(resource)
        self._fulfill()

    def flush(self) -> None:
        """Cancel every pending acquire.

        Each queued caller, in arrival order, gets AcquireCancelledError.
        Pooled resources and the open/closed state are untouched. Once the
        semaphore is closed only drop()'s own drain remains queued, so this
        does nothing.
        """
        if self._closed:
            return

        cancelled = self._cancel_waiters()
        if cancelled:
            logger.debug("Flushed %d pending acquire(s)", cancelled)

    async def drop(
        self,
        handler: Callable[[T], Any] | None = None,
        *,
        is_async: bool = False,
    ) -> None:
        """Close the semaphore and reclaim every resource.

        New acquires fail immediately and queued ones are cancelled. The call
        then waits, with no timeout, until every outstanding resource has been
        released by its holder. Reclaimed resources never return to the pool.

        If the call is cancelled while draining, e.g. by ``asyncio.wait_for``,
        resources reclaimed so far go back to the pool and the semaphore stays
        closed. drop() may then be called again to finish the drain.

        Whatever ``handler`` returns is discarded; drop() itself returns None.

        Args:
            handler: Optional function applied once to each reclaimed
                resource, e.g. to close connections
            is_async: Set when ``handler`` returns an awaitable. All handler
                calls are started before any is awaited, and the first failure
                fails the drop.

        Raises:
            SemaphoreClosedError: If drop() is already draining or has
                completed
            Exception: Whatever ``handler`` raises
        """
        if self._draining or self._drained:
            raise SemaphoreClosedError("Semaphore has already been dropped")
        if handler is not None and not callable(handler):
            raise TypeError(f"Expected callable, got {type(handler).__name__}")

        self._closed = True
        cancelled = self._cancel_waiters()
        logger.debug(
            "Dropping semaphore: cancelled %d pending acquire(s), draining %d permit(s)",
            cancelled,
            self._permits,
        )

        self._draining = True
        reservations = [self._reserve() for _ in range(self._permits)]
        try:
            resources: list[T] = await asyncio.gather(*reservations)
        except asyncio.CancelledError:
            self._return_reservations(reservations)
            raise
        finally:
            self._draining = False
        self._drained = True

        if handler is not None:
            if is_async:
                await asyncio.gather(*(handler(resource) for resource in resources))
            else:
                for resource in resources:
                    handler(resource)

        logger.debug("Semaphore dropped, %d resource(s) reclaimed", len(resources))

    @asynccontextmanager
    async def hold(self) -> AsyncIterator[T]:
        """Acquire a resource for the duration of an ``async with`` block.

        Example:
            async with semaphore.hold() as connection:
                await connection.execute(query)
        """
        resource = await self.acquire()
        try:
            yield resource
        finally:
            self.release(resource)

    @property
    def permits(self) -> int:
        """Get the number of permits the semaphore was created with."""
        return self._permits

    @property
    def closed(self) -> bool:
        """Whether drop() has been called."""
        return self._closed

    @property
    def available(self) -> int:
        """Get the number of pooled resources.

        Note: This is a snapshot and may change immediately after reading.
        """
        return len(self._resources)

    @property
    def pending(self) -> int:
        """Get the number of queued acquires, drop()'s drain included.

        Note: This is a snapshot and may change immediately after reading.
        """
        return sum(1 for waiter in self._waiters if not waiter.done())
