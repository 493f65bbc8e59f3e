"""
Reliability utilities.

Includes the per-call deadline applied to every repository operation.
"""

import asyncio
from functools import wraps
from typing import Callable

# Marks "no timeout given"; an explicit None means no deadline at all
DEFAULT_TIMEOUT = object()


def with_deadline(func: Callable) -> Callable:
    """
    Run a bound coroutine method under a deadline.

    The wrapped method gains a keyword-only ``timeout`` argument. When it is
    omitted the instance's ``timeout`` attribute applies; ``None`` means no
    deadline. On expiry the in-flight call is cancelled and
    ``asyncio.TimeoutError`` propagates.
    """
    @wraps(func)
    async def wrapper(self, *args, timeout=DEFAULT_TIMEOUT, **kwargs):
        limit = self.timeout if timeout is DEFAULT_TIMEOUT else timeout
        if limit is None:
            return await func(self, *args, **kwargs)
        return await asyncio.wait_for(func(self, *args, **kwargs), limit)

    return wrapper
