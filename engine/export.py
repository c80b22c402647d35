"""
Long-format export of the raw, sigma and anomaly matrices as (day, series, value) records for the chart renderer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Sequence, Union

from config import DAYS_IN_YEAR
from engine.matrix.builder import SeriesMatrix
from engine.metrics.transform import DerivedMatrix


@dataclass(frozen=True)
class LongRecord:
    day: int
    series: str
    value: Optional[float]


def _columns(source: Union[SeriesMatrix, DerivedMatrix]) -> Mapping[str, Sequence[Optional[float]]]:
    if isinstance(source, SeriesMatrix):
        return {label: col.values for label, col in source.columns.items()}
    return source.columns


def iter_long(
    source: Union[SeriesMatrix, DerivedMatrix],
    drop_missing: bool = False,
) -> Iterator[LongRecord]:
    columns = _columns(source)
    for day in range(1, DAYS_IN_YEAR + 1):
        for label, values in columns.items():
            value = values[day - 1]
            if value is None and drop_missing:
                continue
            yield LongRecord(day=day, series=label, value=value)


def to_long(
    source: Union[SeriesMatrix, DerivedMatrix],
    drop_missing: bool = False,
) -> List[LongRecord]:
    return list(iter_long(source, drop_missing=drop_missing))
