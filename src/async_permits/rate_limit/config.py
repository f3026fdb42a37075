"""Configuration for SimpleRateLimiter."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SimpleRateLimiterConfig:
    """Validated rate limiter settings and the semaphore values derived from them.

    Burst mode hands out ``requests`` permits, each returned ``interval`` ms
    after it was taken. Uniform mode hands out a single permit returned
    ``interval / requests`` ms after each acquisition.

    Args:
        requests: Number of requests allowed per interval (must be >= 1)
        interval: Length of the interval in milliseconds (must be > 0)
        uniform_distribution: Spread requests evenly across the interval
            instead of admitting them in a burst

    Example:
        config = SimpleRateLimiterConfig(requests=4, interval=1000, uniform_distribution=True)
        config.permits   # 1
        config.delay_ms  # 250.0
    """

    requests: int
    interval: float
    uniform_distribution: bool = False
    permits: int = field(init=False)
    delay_ms: float = field(init=False)

    def __post_init__(self) -> None:
        if self.requests < 1:
            raise ValueError(f"requests must be >= 1, got {self.requests}")
        if self.interval <= 0:
            raise ValueError(f"interval must be > 0, got {self.interval}")

        # Frozen dataclass, so derived fields go through object.__setattr__
        if self.uniform_distribution:
            object.__setattr__(self, "permits", 1)
            object.__setattr__(self, "delay_ms", self.interval / self.requests)
        else:
            object.__setattr__(self, "permits", self.requests)
            object.__setattr__(self, "delay_ms", self.interval)
