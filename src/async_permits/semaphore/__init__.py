"""Resource pool semaphore with FIFO fairness and drain-on-drop shutdown."""

from async_permits.semaphore.semaphore import Semaphore, void_resource


__all__ = ["Semaphore", "void_resource"]
