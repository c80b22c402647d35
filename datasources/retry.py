"""
Retry decorator for connector methods.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, Type, TypeVar, Tuple, cast

log = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def retry(
    *,
    attempts: int = 3,
    delay: float = 1.0,
    backoff: float = 2.0,
    exceptions: Tuple[Type[Exception], ...] = (Exception,),
) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        name = getattr(func, "__qualname__", repr(func))

        def _give_up(attempt: int, exc: Exception, wait: float) -> bool:
            if attempt >= attempts:
                log.warning("%s failed after %d attempt(s): %s", name, attempt, exc)
                return True
            log.info("%s attempt %d failed (%s); retrying in %.2fs", name, attempt, exc, wait)
            return False

        if inspect.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                attempt, wait = 0, delay
                while True:
                    try:
                        return await func(*args, **kwargs)
                    except exceptions as exc:
                        attempt += 1
                        if _give_up(attempt, exc, wait):
                            raise
                        await asyncio.sleep(wait)
                        wait *= backoff

            return cast(F, async_wrapper)

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            attempt, wait = 0, delay
            while True:
                try:
                    return func(*args, **kwargs)
                except exceptions as exc:
                    attempt += 1
                    if _give_up(attempt, exc, wait):
                        raise
                    time.sleep(wait)
                    wait *= backoff

        return cast(F, sync_wrapper)

    return decorator
