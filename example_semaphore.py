"""Example usage of the resource pool semaphore."""
# mypy: ignore-errors

import asyncio
import itertools

from async_permits import AcquireCancelledError, Semaphore, SemaphoreClosedError


class DatabaseConnection:
    """Pretend database connection."""

    _ids = itertools.count()

    def __init__(self) -> None:
        self.conn_id = next(self._ids)
        print(f"  Opened connection {self.conn_id}")

    async def execute(self, query: str) -> None:
        await asyncio.sleep(0.05)
        print(f"  [conn {self.conn_id}] {query}")

    async def close(self) -> None:
        await asyncio.sleep(0.01)
        print(f"  Closed connection {self.conn_id}")


async def example_pool() -> None:
    """Example: Sharing three connections between many tasks."""
    print("\n=== Connection Pool Example ===")

    pool = Semaphore(permits=3, resource_factory=DatabaseConnection)

    async def run(query_id: int) -> None:
        async with pool.hold() as connection:
            await connection.execute(f"SELECT {query_id}")

    await asyncio.gather(*[run(i) for i in range(9)])

    print("Dropping the pool")
    await pool.drop(lambda connection: connection.close(), is_async=True)

    try:
        await pool.acquire()
    except SemaphoreClosedError as e:
        print(f"  Caught: {e}")


async def example_flush() -> None:
    """Example: Cancelling everyone waiting for a connection."""
    print("\n=== Flush Example ===")

    pool = Semaphore(permits=1, resource_factory=DatabaseConnection)
    connection = await pool.acquire()

    async def waiter(i: int) -> None:
        try:
            await pool.acquire()
        except AcquireCancelledError:
            print(f"  Waiter {i} cancelled")

    tasks = [asyncio.create_task(waiter(i)) for i in range(3)]
    await asyncio.sleep(0)

    pool.flush()
    await asyncio.gather(*tasks)
    pool.release(connection)


async def main() -> None:
    """Run all examples."""
    print("Semaphore Examples")
    print("=" * 50)

    await example_pool()
    await example_flush()

    print("\n" + "=" * 50)
    print("All examples completed!")


if __name__ == "__main__":
    asyncio.run(main())
