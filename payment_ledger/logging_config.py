"""Logging setup for the payment ledger.

Log output always goes to stderr; stdout is reserved for the
account snapshot written by the CLI.
"""

__all__ = ["get_logger", "configure_logging", "reset_logging"]

import logging
import sys
import threading
from typing import Any

_LOGGER_PREFIX = "payment_ledger"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_configured = False
_lock = threading.Lock()


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the payment_ledger namespace."""
    return logging.getLogger(f"{_LOGGER_PREFIX}.{name}")


def configure_logging(
    *,
    level: int | str = logging.INFO,
    stream: Any = None,
) -> None:
    """Configure the payment_ledger logger hierarchy (idempotent)."""
    global _configured
    with _lock:
        if _configured:
            return
        _configured = True

    root_logger = logging.getLogger(_LOGGER_PREFIX)
    root_logger.setLevel(level)
    root_logger.propagate = False

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(handler)


def reset_logging() -> None:
    """Reset logging configuration. FOR TESTING ONLY."""
    global _configured
    with _lock:
        _configured = False
    logger = logging.getLogger(_LOGGER_PREFIX)
    logger.handlers.clear()
    logger.setLevel(logging.WARNING)
    logger.propagate = True
