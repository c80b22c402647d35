"""
Test cases for the long-format record stream handed to the chart renderer.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.baseline import BaselineWindow, compute
from engine.export import LongRecord, iter_long, to_long
from engine.matrix import RawRecord, build
from engine.metrics import anomalies


def _matrix():
    return build([
        RawRecord("2001", "2,3"),
        RawRecord("2000", "1,2"),
        RawRecord("plus 2σ", "9,9"),
    ])


def test_raw_stream_covers_every_cell_in_day_then_series_order():
    rows = to_long(_matrix())
    assert len(rows) == 366 * 3
    assert rows[:3] == [
        LongRecord(day=1, series="2000", value=1.0),
        LongRecord(day=1, series="2001", value=2.0),
        LongRecord(day=1, series="plus 2σ", value=9.0),
    ]
    assert rows[-1] == LongRecord(day=366, series="plus 2σ", value=None)


def test_drop_missing_skips_empty_cells():
    rows = to_long(_matrix(), drop_missing=True)
    assert len(rows) == 6
    assert all(r.value is not None for r in rows)


def test_derived_stream_has_years_only():
    matrix = _matrix()
    derived = anomalies(matrix, compute(matrix, BaselineWindow(2000, 2001)))
    rows = list(iter_long(derived, drop_missing=True))
    assert {r.series for r in rows} == {"2000", "2001"}
    assert rows[0] == LongRecord(day=1, series="2000", value=-0.5)
