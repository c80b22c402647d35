"""
Per-day map helper. Each day-of-year is computed independently, so the work can be spread over a thread pool and gathered back in day order without any locking.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, TypeVar

from config import DAYS_IN_YEAR, settings

_T = TypeVar("_T")

DAYS = range(1, DAYS_IN_YEAR + 1)


def map_days(func: Callable[[int], _T], max_workers: int | None = None) -> List[_T]:
    if max_workers is None:
        max_workers = settings.max_parallel_day_tasks
    workers = max(1, int(max_workers))
    if workers == 1:
        return [func(day) for day in DAYS]
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="dailynorm-day") as pool:
        return list(pool.map(func, DAYS))
