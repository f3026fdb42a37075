"""Timer collaborator used to schedule delayed callbacks."""

import asyncio
from collections.abc import Callable
from typing import Protocol


class Timer(Protocol):
    """Protocol for scheduling a callback after a delay.

    Delays are expressed in milliseconds. Implementations must invoke the
    callback on the event loop that owns the primitives it touches.
    """

    def schedule_after(self, delay_ms: float, callback: Callable[[], object]) -> object:
        """Schedule ``callback`` to run once after ``delay_ms`` milliseconds."""
        ...


class LoopTimer:
    """Timer backed by the running asyncio event loop.

    Example:
        timer = LoopTimer()
        timer.schedule_after(250, lambda: print("fired"))
    """

    def schedule_after(
        self, delay_ms: float, callback: Callable[[], object]
    ) -> asyncio.TimerHandle:
        """Schedule ``callback`` via ``loop.call_later``.

        Must be called from a coroutine or callback running on the loop.

        Returns:
            The loop's TimerHandle for the scheduled call
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        loop = asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)
