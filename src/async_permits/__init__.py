"""Async resource pool semaphore and rate limiter for Python."""

from async_permits.exceptions import (
    AcquireCancelledError,
    PermitError,
    SemaphoreClosedError,
)
from async_permits.logging import configure_logging, get_logger
from async_permits.rate_limit import (
    RateLimiterBase,
    SimpleRateLimiter,
    SimpleRateLimiterConfig,
)
from async_permits.semaphore import Semaphore, void_resource
from async_permits.timer import LoopTimer, Timer


__all__ = [
    "AcquireCancelledError",
    "LoopTimer",
    "PermitError",
    "RateLimiterBase",
    "Semaphore",
    "SemaphoreClosedError",
    "SimpleRateLimiter",
    "SimpleRateLimiterConfig",
    "Timer",
    "configure_logging",
    "get_logger",
    "void_resource",
]
