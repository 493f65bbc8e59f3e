"""
Observability helpers.

Adds timing and structured logging context to repository calls.
"""

import time
import asyncio
import logging
from functools import wraps
from typing import Callable, Optional

from tracker.app.core.config import settings
from tracker.app.core.exceptions import TrackerError

# Configure structured logger
logger = logging.getLogger("tracker")


def configure_logging(level: Optional[str] = None) -> None:
    """Attach a stream handler to the tracker logger."""
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel((level or settings.log_level).upper())


def _target(args: tuple, kwargs: dict) -> Optional[int]:
    # Leading argument is a parcel number, a client id, or a ParcelCreate
    if args:
        first = args[0]
    else:
        first = next(
            (kwargs[name] for name in ("number", "client", "parcel") if name in kwargs),
            None,
        )
    if first is None or isinstance(first, int):
        return first
    return getattr(first, "client", None)


def observed(operation: str) -> Callable:
    """Log one structured record per repository call."""

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            start_time = time.time()
            log_data = {"operation": operation, "target": _target(args, kwargs)}
            try:
                result = await func(self, *args, **kwargs)
            except TrackerError as exc:
                log_data["outcome"] = exc.error_code
                log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
                logger.warning("Repository call matched no rows", extra=log_data)
                raise
            except asyncio.CancelledError:
                log_data["outcome"] = "cancelled"
                log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
                logger.warning("Repository call cancelled", extra=log_data)
                raise
            except Exception as exc:
                log_data["outcome"] = type(exc).__name__
                log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
                logger.error("Repository call failed", extra=log_data)
                raise

            log_data["outcome"] = "ok"
            log_data["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            logger.info("Repository call", extra=log_data)
            return result

        return wrapper

    return decorator
