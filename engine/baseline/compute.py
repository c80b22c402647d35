"""
Compute logic for per day-of-year baseline statistics (mean and sample standard deviation) over a fixed window of reference years, ignoring missing values, recording days with too few reference values instead of fabricating a spread, and providing the reference point that sigma and anomaly values are measured against.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Union

from config import settings
from engine.exceptions import BaselineWindowError, InsufficientBaselineDataError
from engine.matrix.builder import SeriesMatrix
from engine.parallel import map_days
from engine.stats import mean_std

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class BaselineWindow:
    start_year: int
    end_year: int

    def __post_init__(self) -> None:
        if self.start_year > self.end_year:
            raise BaselineWindowError(
                f"baseline window start {self.start_year} is after end {self.end_year}"
            )

    @classmethod
    def from_settings(cls) -> BaselineWindow:
        return cls(settings.baseline_start_year, settings.baseline_end_year)

    @property
    def labels(self) -> List[str]:
        return [str(y) for y in range(self.start_year, self.end_year + 1)]

    def validate(self, matrix: SeriesMatrix) -> None:
        available = set(matrix.year_labels)
        missing = [label for label in self.labels if label not in available]
        if missing:
            raise BaselineWindowError(
                f"baseline window {self.start_year}-{self.end_year} is missing year(s): {', '.join(missing)}"
            )


@dataclass(frozen=True)
class DayBaseline:
    day: int
    mean: float
    std: float
    sample_count: int


@dataclass(frozen=True)
class BaselineStatistics:
    window: BaselineWindow
    days: Mapping[int, DayBaseline] = field(default_factory=dict)
    errors: Mapping[int, InsufficientBaselineDataError] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", MappingProxyType(dict(self.days)))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    def for_day(self, day: int) -> DayBaseline:
        if day in self.errors:
            raise self.errors[day]
        return self.days[day]


def compute_day(matrix: SeriesMatrix, labels: List[str], day: int) -> DayBaseline:
    m, s, n = mean_std(matrix.row(day, labels))
    if s is None:
        raise InsufficientBaselineDataError(day, n)
    return DayBaseline(day=day, mean=m, std=s, sample_count=n)


def _safe_day(
    matrix: SeriesMatrix, labels: List[str], day: int
) -> Union[DayBaseline, InsufficientBaselineDataError]:
    try:
        return compute_day(matrix, labels, day)
    except InsufficientBaselineDataError as exc:
        return exc


def compute(
    matrix: SeriesMatrix,
    window: Optional[BaselineWindow] = None,
    max_workers: int | None = None,
) -> BaselineStatistics:
    if window is None:
        window = BaselineWindow.from_settings()
    window.validate(matrix)
    labels = window.labels

    results = map_days(lambda d: _safe_day(matrix, labels, d), max_workers=max_workers)

    days: Dict[int, DayBaseline] = {}
    errors: Dict[int, InsufficientBaselineDataError] = {}
    for result in results:
        if isinstance(result, InsufficientBaselineDataError):
            errors[result.day] = result
        else:
            days[result.day] = result

    if errors:
        log.warning(
            "baseline %d-%d: %d day(s) with insufficient data",
            window.start_year, window.end_year, len(errors),
        )
    return BaselineStatistics(window=window, days=days, errors=errors)
