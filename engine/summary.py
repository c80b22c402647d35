"""
Latest-reading summary for a snapshot: the most recent observed day of the most recent year, with its anomaly, sigma and the rarity of that sigma.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from engine.pipeline import SnapshotResult
from engine.probability import Rarity, estimate


@dataclass(frozen=True)
class LatestReading:
    year: int
    day: int
    value: float
    anomaly: Optional[float]
    sigma: Optional[float]
    rarity: Optional[Rarity]
    note: Optional[str] = None


def latest(result: SnapshotResult) -> Optional[LatestReading]:
    labels = result.matrix.year_labels
    if not labels:
        return None
    column = result.matrix.column(labels[-1])
    day = next((d for d in range(len(column.values), 0, -1) if column.values[d - 1] is not None), None)
    if day is None:
        return None

    anomaly = result.anomaly.value(column.label, day)
    sigma = result.sigma.value(column.label, day)
    error = result.sigma.errors.get(day)
    return LatestReading(
        year=column.year,
        day=day,
        value=column.values[day - 1],
        anomaly=anomaly,
        sigma=sigma,
        rarity=estimate(abs(sigma)) if sigma is not None else None,
        note=str(error) if error else None,
    )
