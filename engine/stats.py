"""
Missing-value aware reductions shared by every statistic in the pipeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np


def present(values: Iterable[Optional[float]]) -> np.ndarray:
    """Drop missing entries, keeping the input order."""
    return np.array([v for v in values if v is not None], dtype=float)


def mean_std(values: Iterable[Optional[float]]) -> Tuple[Optional[float], Optional[float], int]:
    """Mean and sample (N-1) standard deviation of the non-missing values.

    Returns ``(mean, std, count)``; mean is None when nothing is present and
    std is None when fewer than two values are present.
    """
    arr = present(values)
    n = int(arr.size)
    if n == 0:
        return None, None, 0
    if np.ptp(arr) == 0:
        # identical values: exact mean and zero spread, not rounding noise
        return float(arr[0]), (0.0 if n > 1 else None), n
    m = float(np.mean(arr))
    return m, float(np.std(arr, ddof=1)), n


def rounded(value: Optional[float], digits: int) -> Optional[float]:
    if value is None:
        return None
    return round(float(value), digits)
