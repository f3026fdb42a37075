"""Rate limiting built on the resource pool semaphore.

- SimpleRateLimiter: Throughput limiting by delaying permit release
- RateLimiterBase: Context manager and decorator support for limiters
"""

from async_permits.rate_limit.base import RateLimiterBase
from async_permits.rate_limit.config import SimpleRateLimiterConfig
from async_permits.rate_limit.simple import SimpleRateLimiter


__all__ = [
    "RateLimiterBase",
    "SimpleRateLimiter",
    "SimpleRateLimiterConfig",
]
