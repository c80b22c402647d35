"""
Test cases for sigma and anomaly derivation against the day-of-year baseline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.baseline import BaselineWindow, compute
from engine.enums import MetricKind
from engine.exceptions import DegenerateBaselineError, InsufficientBaselineDataError
from engine.matrix import RawRecord, build
from engine.metrics import anomalies, derive, sigmas

WINDOW = BaselineWindow(2000, 2004)


@pytest.fixture
def snapshot(make_records):
    overrides = {
        2000: {45: 20.0},
        2001: {45: 20.0},
        2002: {45: 20.0},
        2003: {45: 21.0, 200: None},
        2004: {45: 19.0},
        2005: {45: 21.0, 100: None},
    }
    records = make_records(list(range(2000, 2006)), overrides=overrides)
    records.append(RawRecord("plus 2σ", ",".join(["30"] * 366)))
    matrix = build(records)
    return matrix, compute(matrix, WINDOW)


def test_day45_scenario(snapshot):
    matrix, baseline = snapshot
    anomaly = anomalies(matrix, baseline)
    sigma = sigmas(matrix, baseline)
    assert anomaly.value("2005", 45) == 1.0
    assert sigma.value("2005", 45) == 1.41


def test_only_year_columns_are_derived(snapshot):
    matrix, baseline = snapshot
    for kind in MetricKind:
        derived = derive(matrix, baseline, kind)
        assert derived.labels == matrix.year_labels
        assert "plus 2σ" not in derived.columns
        assert all(len(v) == 366 for v in derived.columns.values())


def test_kind_accepts_string(snapshot):
    matrix, baseline = snapshot
    assert derive(matrix, baseline, "anomaly").kind is MetricKind.anomaly


def test_missing_raw_value_stays_missing(snapshot):
    matrix, baseline = snapshot
    assert anomalies(matrix, baseline).value("2005", 100) is None
    assert sigmas(matrix, baseline).value("2005", 100) is None
    assert anomalies(matrix, baseline).value("2003", 200) is None


def test_results_are_rounded_to_two_places(snapshot):
    matrix, baseline = snapshot
    for derived in (anomalies(matrix, baseline), sigmas(matrix, baseline)):
        for values in derived.columns.values():
            for v in values:
                if v is not None:
                    assert v == round(v, 2)


def test_custom_rounding_digits(snapshot):
    matrix, baseline = snapshot
    assert sigmas(matrix, baseline, digits=4).value("2005", 45) == 1.4142


def test_anomaly_plus_mean_reconstructs_raw(snapshot):
    matrix, baseline = snapshot
    anomaly = anomalies(matrix, baseline)
    for label in matrix.year_labels:
        column = matrix.column(label)
        for day, raw in enumerate(column.values, start=1):
            if raw is None or day in baseline.errors:
                continue
            assert anomaly.value(label, day) + baseline.for_day(day).mean == pytest.approx(raw, abs=0.01)


def test_sigma_is_anomaly_over_std(snapshot):
    matrix, baseline = snapshot
    anomaly = anomalies(matrix, baseline, digits=10)
    sigma = sigmas(matrix, baseline)
    for label in matrix.year_labels:
        for day in range(1, 367):
            a = anomaly.value(label, day)
            s = sigma.value(label, day)
            assert (s is None) == (a is None or day in sigma.errors)
            if s is not None:
                assert s == pytest.approx(a / baseline.for_day(day).std, abs=0.01)


def test_insufficient_baseline_day_is_missing_for_every_year(snapshot):
    matrix, baseline = snapshot
    # day 366: only 2000 and 2004 are leap years in the window, so it is defined;
    # force an insufficient day instead
    assert 366 not in baseline.errors
    records = [RawRecord("2000", "1,2"), RawRecord("2001", "2"), RawRecord("2002", "5,6")]
    small = build(records)
    stats = compute(small, BaselineWindow(2000, 2001))
    for kind in MetricKind:
        derived = derive(small, stats, kind)
        assert isinstance(derived.errors[2], InsufficientBaselineDataError)
        assert all(derived.value(label, 2) is None for label in small.year_labels)
        assert derived.value("2002", 1) is not None


def test_zero_std_day_fails_sigma_but_not_anomaly():
    matrix = build([
        RawRecord("2000", "5.0,1.0"),
        RawRecord("2001", "5.0,3.0"),
        RawRecord("2002", "6.5,2.5"),
    ])
    stats = compute(matrix, BaselineWindow(2000, 2001))
    sigma = sigmas(matrix, stats)
    anomaly = anomalies(matrix, stats)

    assert isinstance(sigma.errors[1], DegenerateBaselineError)
    assert sigma.value("2002", 1) is None
    assert 1 not in anomaly.errors
    assert anomaly.value("2002", 1) == 1.5
    assert anomaly.value("2000", 1) == 0.0
    # day 2 has a spread and is unaffected
    assert sigma.value("2002", 2) == pytest.approx(0.35, abs=0.01)


def test_parallel_derivation_matches_sequential(snapshot):
    matrix, baseline = snapshot
    seq = sigmas(matrix, baseline, max_workers=1)
    par = sigmas(matrix, baseline, max_workers=3)
    assert seq.columns == par.columns
    assert set(seq.errors) == set(par.errors)


def test_identical_inexact_baseline_values_are_degenerate():
    records = [RawRecord(str(year), "21.1,0.1") for year in range(2000, 2007)]
    records.append(RawRecord("2007", "21.2,0.3"))
    matrix = build(records)
    stats = compute(matrix, BaselineWindow(2000, 2006))

    assert stats.errors == {}
    assert stats.days[1].std == 0.0
    assert stats.days[1].mean == 21.1
    assert stats.days[2].std == 0.0

    sigma = sigmas(matrix, stats)
    anomaly = anomalies(matrix, stats)
    for day in (1, 2):
        assert isinstance(sigma.errors[day], DegenerateBaselineError)
        assert sigma.value("2007", day) is None
        assert sigma.value("2000", day) is None
    assert anomaly.value("2000", 1) == 0.0
    assert anomaly.value("2007", 1) == 0.1
    assert anomaly.value("2007", 2) == 0.2


def test_value_rejects_days_outside_the_year(snapshot):
    matrix, baseline = snapshot
    derived = anomalies(matrix, baseline)
    label = matrix.year_labels[0]
    for day in (0, -1, 367):
        with pytest.raises(IndexError):
            derived.value(label, day)
