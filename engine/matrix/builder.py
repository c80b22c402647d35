"""
Series matrix assembly from per-year raw series, aligning every series onto a fixed 366-row day-of-year index, padding short (non-leap or partial) years with explicit missing markers, and tagging the supplementary reference bands so downstream stages can select columns by role and label rather than by position.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import calendar
import logging
import math
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from config import DAYS_IN_YEAR, MISSING_TOKENS, settings
from engine.enums import SeriesRole
from engine.exceptions import MalformedSeriesError

log = logging.getLogger(__name__)

_YEAR_RE = re.compile(r"^\d{4}$")

Value = Optional[float]
RawValues = Union[str, Sequence[Union[float, int, str, None]]]


@dataclass(frozen=True)
class RawRecord:
    label: str
    values: RawValues


@dataclass(frozen=True)
class SeriesColumn:
    label: str
    role: SeriesRole
    year: Optional[int]
    values: Tuple[Value, ...]

    def at(self, day: int) -> Value:
        return self.values[_row_index(day)]


@dataclass(frozen=True)
class SeriesMatrix:
    columns: Mapping[str, SeriesColumn] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", MappingProxyType(dict(self.columns)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeriesMatrix):
            return NotImplemented
        return list(self.columns.items()) == list(other.columns.items())

    def __hash__(self) -> int:
        return hash(tuple(self.columns.values()))

    @property
    def labels(self) -> List[str]:
        return list(self.columns)

    @property
    def year_labels(self) -> List[str]:
        return [c.label for c in self.columns.values() if c.role is SeriesRole.year]

    @property
    def years(self) -> List[int]:
        return [c.year for c in self.columns.values() if c.role is SeriesRole.year]

    def band(self, role: SeriesRole) -> Optional[SeriesColumn]:
        for column in self.columns.values():
            if column.role is role:
                return column
        return None

    def column(self, label: str) -> SeriesColumn:
        try:
            return self.columns[label]
        except KeyError:
            raise KeyError(f"no series labelled {label!r}") from None

    def year_column(self, year: int) -> SeriesColumn:
        return self.column(str(year))

    def row(self, day: int, labels: Iterable[str]) -> List[Value]:
        idx = _row_index(day)
        return [self.column(label).values[idx] for label in labels]


def _row_index(day: int) -> int:
    if not 1 <= day <= DAYS_IN_YEAR:
        raise IndexError(f"day {day} outside 1..{DAYS_IN_YEAR}")
    return day - 1


def _parse_token(label: str, position: int, token: Union[float, int, str, None]) -> Value:
    if token is None:
        return None
    if isinstance(token, str):
        text = token.strip()
        if text.lower() in MISSING_TOKENS:
            return None
        try:
            value = float(text)
        except ValueError:
            raise MalformedSeriesError(
                f"series {label!r}: value {token!r} at day {position} is not numeric"
            ) from None
    else:
        value = float(token)
    if not math.isfinite(value):
        raise MalformedSeriesError(f"series {label!r}: non-finite value at day {position}")
    return value


def parse_values(label: str, raw: RawValues) -> List[Value]:
    tokens = raw.split(",") if isinstance(raw, str) else list(raw)
    if isinstance(raw, str) and not raw.strip():
        tokens = []
    if len(tokens) > DAYS_IN_YEAR:
        raise MalformedSeriesError(
            f"series {label!r} has {len(tokens)} values, at most {DAYS_IN_YEAR} allowed"
        )
    return [_parse_token(label, i, t) for i, t in enumerate(tokens, start=1)]


def classify(label: str, upper_label: str, lower_label: str) -> Tuple[SeriesRole, Optional[int]]:
    if _YEAR_RE.match(label):
        return SeriesRole.year, int(label)
    if label == upper_label:
        return SeriesRole.upper_band, None
    if label == lower_label:
        return SeriesRole.lower_band, None
    raise MalformedSeriesError(f"series {label!r} is neither a calendar year nor a known band")


def _pad(label: str, role: SeriesRole, year: Optional[int], values: List[Value]) -> Tuple[Value, ...]:
    if role is SeriesRole.year and len(values) == DAYS_IN_YEAR and not calendar.isleap(year):
        if values[-1] is not None:
            raise MalformedSeriesError(f"series {label!r}: non-leap year has a value on day 366")
    return tuple(values) + (None,) * (DAYS_IN_YEAR - len(values))


def build(
    records: Iterable[Union[RawRecord, Tuple[str, RawValues]]],
    upper_label: str | None = None,
    lower_label: str | None = None,
) -> SeriesMatrix:
    """Assemble a SeriesMatrix from raw records.

    Record order does not matter: years are sorted chronologically and the
    bands follow them (upper, then lower). Every column has exactly 366 rows.
    """
    if upper_label is None:
        upper_label = settings.upper_band_label
    if lower_label is None:
        lower_label = settings.lower_band_label

    years: Dict[int, SeriesColumn] = {}
    bands: Dict[SeriesRole, SeriesColumn] = {}
    seen: set[str] = set()

    for record in records:
        label, raw = (record.label, record.values) if isinstance(record, RawRecord) else record
        label = str(label).strip()
        if label in seen:
            raise MalformedSeriesError(f"series {label!r} appears more than once")
        seen.add(label)

        role, year = classify(label, upper_label, lower_label)
        values = _pad(label, role, year, parse_values(label, raw))
        column = SeriesColumn(label=label, role=role, year=year, values=values)
        if role is SeriesRole.year:
            years[year] = column
        else:
            bands[role] = column

    ordered: Dict[str, SeriesColumn] = {}
    for year in sorted(years):
        ordered[years[year].label] = years[year]
    for role in (SeriesRole.upper_band, SeriesRole.lower_band):
        if role in bands:
            ordered[bands[role].label] = bands[role]

    log.debug("built series matrix: %d year(s), %d band(s)", len(years), len(bands))
    return SeriesMatrix(columns=ordered)
