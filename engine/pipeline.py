"""
Snapshot pipeline: one set of raw records becomes one series matrix, from which the baseline and both derived views are computed, so raw, sigma and anomaly always describe the same data.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from engine import matrix as series_matrix
from engine.baseline import BaselineStatistics, BaselineWindow, compute as baseline_compute
from engine.enums import MetricKind
from engine.matrix import RawRecord, SeriesMatrix
from engine.metrics import DerivedMatrix, derive

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapshotResult:
    matrix: SeriesMatrix
    baseline: BaselineStatistics
    sigma: DerivedMatrix
    anomaly: DerivedMatrix


def from_matrix(
    matrix: SeriesMatrix,
    window: Optional[BaselineWindow] = None,
    digits: int | None = None,
    max_workers: int | None = None,
) -> SnapshotResult:
    baseline = baseline_compute(matrix, window, max_workers=max_workers)
    sigma = derive(matrix, baseline, MetricKind.sigma, digits=digits, max_workers=max_workers)
    anomaly = derive(matrix, baseline, MetricKind.anomaly, digits=digits, max_workers=max_workers)
    log.info(
        "snapshot: %d year(s), baseline %d-%d, %d sigma day error(s), %d anomaly day error(s)",
        len(matrix.year_labels),
        baseline.window.start_year,
        baseline.window.end_year,
        len(sigma.errors),
        len(anomaly.errors),
    )
    return SnapshotResult(matrix=matrix, baseline=baseline, sigma=sigma, anomaly=anomaly)


def run(
    records: Iterable[RawRecord],
    window: Optional[BaselineWindow] = None,
    digits: int | None = None,
    max_workers: int | None = None,
) -> SnapshotResult:
    return from_matrix(series_matrix.build(records), window, digits=digits, max_workers=max_workers)
