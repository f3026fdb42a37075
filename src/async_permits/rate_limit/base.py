"""Base class for permit-based rate limiters."""

import functools
import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, TypeVar, cast


F = TypeVar("F", bound=Callable[..., Any])


class RateLimiterBase(ABC):
    """Abstract base class for rate limiters built on a Semaphore.

    A limiter either gets its permit back from the caller once the admitted
    operation finishes, or returns it by itself on a schedule. Subclasses of
    the first kind override release(). Subclasses of the second kind set
    ``releases_on_exit = False``; release() is then never awaited when a
    context block or decorated call ends.

    The context manager pattern is the canonical usage:
        async with limiter:
            await send_request()

    The decorator pattern admits every call of a coroutine function:
        @limiter
        async def send_request():
            ...
    """

    releases_on_exit: ClassVar[bool] = True

    @abstractmethod
    async def acquire(self) -> None:
        """Wait until the limiter admits one more operation."""
        raise NotImplementedError

    async def release(self) -> None:
        """Give back the permit taken by acquire().

        Only called when ``releases_on_exit`` is set.
        """
        raise NotImplementedError(
            f"{type(self).__name__} must implement release() "
            "or set releases_on_exit = False"
        )

    async def __aenter__(self) -> "RateLimiterBase":
        """Wait for admission and return the limiter."""
        await self.acquire()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Give the permit back, even on error, unless it returns on its own."""
        if self.releases_on_exit:
            await self.release()

    def __call__(self, func: F) -> F:
        """Decorate a coroutine function so each call waits for admission.

        Args:
            func: The coroutine function to decorate

        Returns:
            The decorated function

        Raises:
            TypeError: If ``func`` is not a coroutine function
        """
        if not callable(func):
            raise TypeError(f"Expected callable, got {type(func).__name__}")
        if not inspect.iscoroutinefunction(func):
            raise TypeError(
                f"Expected coroutine function, got {getattr(func, '__name__', func)!r}"
            )

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            await self.acquire()
            if not self.releases_on_exit:
                return await func(*args, **kwargs)
            try:
                return await func(*args, **kwargs)
            finally:
                await self.release()

        return cast(F, wrapper)
