import calendar
import os
import sys
from typing import Callable, Dict, List, Optional

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from engine.matrix import RawRecord


def joined(values: List[Optional[float]]) -> str:
    return ",".join("" if v is None else str(v) for v in values)


def year_values(year: int, fn: Callable[[int], Optional[float]], days: Optional[int] = None) -> List[Optional[float]]:
    if days is None:
        days = 366 if calendar.isleap(year) else 365
    return [fn(d) for d in range(1, days + 1)]


@pytest.fixture
def make_records() -> Callable[..., List[RawRecord]]:
    """Year records whose value on day d is ``base + d / 100 + offset(year)``."""

    def _make(
        years: List[int],
        offsets: Optional[Dict[int, float]] = None,
        overrides: Optional[Dict[int, Dict[int, Optional[float]]]] = None,
        base: float = 20.0,
    ) -> List[RawRecord]:
        offsets = offsets or {}
        overrides = overrides or {}
        records = []
        for year in years:
            off = offsets.get(year, float(year % 7) / 10)

            def fn(day: int, year=year, off=off) -> Optional[float]:
                if day in overrides.get(year, {}):
                    return overrides[year][day]
                return round(base + day / 100 + off, 2)

            records.append(RawRecord(label=str(year), values=joined(year_values(year, fn))))
        return records

    return _make
