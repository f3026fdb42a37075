"""Logging utilities for async_permits.

All loggers live under the ``async_permits`` namespace. The library never
attaches handlers on import; call ``configure_logging()`` to see its output.
"""

import logging
import sys


DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
NAMESPACE = "async_permits"


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the async_permits namespace.

    Args:
        name: Logger name. Prefixed with 'async_permits.' if it isn't already.

    Returns:
        The namespaced Logger instance.
    """
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)


def configure_logging(
    level: int = logging.INFO, handler: logging.Handler | None = None
) -> None:
    """Configure logging for the whole library.

    Args:
        level: Logging level (default: INFO)
        handler: Custom handler. If None, a StreamHandler on stderr is used.
            Ignored when the namespace logger already has a handler.
    """
    root_logger = logging.getLogger(NAMESPACE)
    root_logger.setLevel(level)

    if not root_logger.handlers:
        if handler is None:
            handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(handler)
