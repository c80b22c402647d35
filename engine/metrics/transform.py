"""
Derived metric logic that turns every ordinary year's raw daily values into signed anomalies or standardized sigma values against the per-day baseline, propagating missing values, rounding at the point of production, and confining baseline problems to the day they occur.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from config import DAYS_IN_YEAR, settings
from engine.baseline.compute import BaselineStatistics, DayBaseline
from engine.enums import MetricKind
from engine.exceptions import DayError, DegenerateBaselineError, InsufficientBaselineDataError
from engine.matrix.builder import SeriesMatrix, Value, _row_index
from engine.parallel import map_days
from engine.stats import rounded

log = logging.getLogger(__name__)

DayRow = Tuple[int, Union[List[Value], DayError]]


@dataclass(frozen=True)
class DerivedMatrix:
    kind: MetricKind
    columns: Mapping[str, Tuple[Value, ...]] = field(default_factory=dict)
    errors: Mapping[int, DayError] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @property
    def labels(self) -> List[str]:
        return list(self.columns)

    def value(self, label: str, day: int) -> Value:
        return self.columns[label][_row_index(day)]


def _anomaly(v: float, b: DayBaseline) -> float:
    return v - b.mean


def _sigma(v: float, b: DayBaseline) -> float:
    return (v - b.mean) / b.std


_TRANSFORMS = {
    MetricKind.anomaly: _anomaly,
    MetricKind.sigma: _sigma,
}


def transform_day(
    matrix: SeriesMatrix,
    baseline: BaselineStatistics,
    kind: MetricKind,
    day: int,
    labels: List[str],
    digits: int,
) -> List[Value]:
    """Derived values for one day across ``labels``.

    Raises the day's InsufficientBaselineDataError, or DegenerateBaselineError
    when a sigma is requested and the day's spread is zero.
    """
    b = baseline.for_day(day)
    if kind is MetricKind.sigma and not b.std:
        raise DegenerateBaselineError(day, b.std)
    fn = _TRANSFORMS[kind]
    return [None if v is None else rounded(fn(v, b), digits) for v in matrix.row(day, labels)]


def derive(
    matrix: SeriesMatrix,
    baseline: BaselineStatistics,
    kind: Union[MetricKind, str],
    digits: int | None = None,
    max_workers: int | None = None,
) -> DerivedMatrix:
    kind = MetricKind(kind)
    if digits is None:
        digits = settings.round_digits
    labels = matrix.year_labels

    def _day(day: int) -> DayRow:
        try:
            return day, transform_day(matrix, baseline, kind, day, labels, digits)
        except (InsufficientBaselineDataError, DegenerateBaselineError) as exc:
            return day, exc

    cells: Dict[str, List[Optional[float]]] = {label: [None] * DAYS_IN_YEAR for label in labels}
    errors: Dict[int, DayError] = {}
    for day, row in map_days(_day, max_workers=max_workers):
        if isinstance(row, DayError):
            errors[day] = row
            continue
        for label, value in zip(labels, row):
            cells[label][day - 1] = value

    if errors:
        log.warning("%s: %d day(s) left undefined by baseline errors", kind.value, len(errors))
    return DerivedMatrix(
        kind=kind,
        columns={label: tuple(values) for label, values in cells.items()},
        errors=errors,
    )


def anomalies(matrix: SeriesMatrix, baseline: BaselineStatistics, **kwargs) -> DerivedMatrix:
    return derive(matrix, baseline, MetricKind.anomaly, **kwargs)


def sigmas(matrix: SeriesMatrix, baseline: BaselineStatistics, **kwargs) -> DerivedMatrix:
    return derive(matrix, baseline, MetricKind.sigma, **kwargs)
