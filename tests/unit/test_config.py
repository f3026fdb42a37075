"""Tests for rate limiter configuration."""

import dataclasses

import pytest

from async_permits.rate_limit import SimpleRateLimiterConfig


@pytest.mark.unit
class TestSimpleRateLimiterConfig:
    """Test derived rate limiter settings."""

    def test_burst_derivation(self):
        """Test permits and delay in burst mode."""
        config = SimpleRateLimiterConfig(requests=10, interval=2000)

        assert config.permits == 10
        assert config.delay_ms == 2000
        assert not config.uniform_distribution

    def test_uniform_derivation(self):
        """Test permits and delay in uniform mode."""
        config = SimpleRateLimiterConfig(
            requests=3, interval=1000, uniform_distribution=True
        )

        assert config.permits == 1
        assert config.delay_ms == pytest.approx(333.333, rel=1e-3)

    def test_single_request_modes_match(self):
        """Test that one request per interval behaves the same in both modes."""
        burst = SimpleRateLimiterConfig(requests=1, interval=500)
        uniform = SimpleRateLimiterConfig(
            requests=1, interval=500, uniform_distribution=True
        )

        assert (burst.permits, burst.delay_ms) == (uniform.permits, uniform.delay_ms)

    def test_config_is_frozen(self):
        """Test that the configuration cannot change after construction."""
        config = SimpleRateLimiterConfig(requests=2, interval=100)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.requests = 5  # type: ignore[misc]

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.delay_ms = 1  # type: ignore[misc]

    def test_derived_fields_not_accepted(self):
        """Test that derived values cannot be passed in."""
        with pytest.raises(TypeError):
            SimpleRateLimiterConfig(requests=2, interval=100, permits=7)  # type: ignore[call-arg]

    @pytest.mark.parametrize("requests", [0, -1])
    def test_invalid_requests(self, requests: int):
        """Test that non-positive requests raises ValueError."""
        with pytest.raises(ValueError, match="requests must be >= 1"):
            SimpleRateLimiterConfig(requests=requests, interval=1000)

    @pytest.mark.parametrize("interval", [0, -10.0])
    def test_invalid_interval(self, interval: float):
        """Test that non-positive interval raises ValueError."""
        with pytest.raises(ValueError, match="interval must be > 0"):
            SimpleRateLimiterConfig(requests=1, interval=interval)
