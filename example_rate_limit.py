"""Example usage of the permit-based rate limiter."""
# mypy: ignore-errors

import asyncio
import logging
import time

from async_permits import SimpleRateLimiter, configure_logging


async def example_burst() -> None:
    """Example: Burst of requests, then a sliding window per permit."""
    print("\n=== Burst Example ===")
    print("5 requests per second, admitted in a burst")

    limiter = SimpleRateLimiter(requests=5, interval=1000)

    @limiter
    async def api_call(request_id: int) -> None:
        print(f"  API call {request_id} at {time.time() - start:.2f}s")

    start = time.time()

    # First 5 go through at once, the next 5 one second later
    await asyncio.gather(*[api_call(i) for i in range(10)])

    elapsed = time.time() - start
    print(f"Completed 10 calls in {elapsed:.2f} seconds")


async def example_uniform() -> None:
    """Example: Evenly spaced requests."""
    print("\n=== Uniform Example ===")
    print("4 requests per second, spaced 250ms apart")

    limiter = SimpleRateLimiter(requests=4, interval=1000, uniform_distribution=True)
    start = time.time()

    async def api_call(request_id: int) -> None:
        async with limiter:
            print(f"  API call {request_id} at {time.time() - start:.2f}s")

    await asyncio.gather(*[api_call(i) for i in range(8)])


async def example_close() -> None:
    """Example: Shutting a limiter down with callers still queued."""
    print("\n=== Close Example ===")

    limiter = SimpleRateLimiter(requests=1, interval=500)
    await limiter.acquire()

    queued = [asyncio.create_task(limiter.acquire()) for _ in range(3)]
    await asyncio.sleep(0)

    await limiter.close()
    results = await asyncio.gather(*queued, return_exceptions=True)
    for result in results:
        print(f"  Queued caller got: {type(result).__name__}")


async def main() -> None:
    """Run all examples."""
    configure_logging(logging.DEBUG)

    print("Rate Limiter Examples")
    print("=" * 50)

    await example_burst()
    await example_uniform()
    await example_close()

    print("\n" + "=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
