"""Exceptions raised by async_permits primitives."""


class PermitError(Exception):
    """Base class for all async_permits errors."""

    pass


class SemaphoreClosedError(PermitError):
    """Exception raised when a dropped semaphore is used.

    Raised by acquire() once drop() has closed the semaphore, and by a
    second call to drop(). Closing is terminal, so retrying will never
    succeed.
    """

    pass


class AcquireCancelledError(PermitError):
    """Exception raised to a queued acquirer cancelled by flush() or drop().

    Unlike asyncio.CancelledError this does not mean the awaiting task was
    cancelled; only its pending request for a resource was.
    """

    pass
