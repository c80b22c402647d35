"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.enums import MetricKind


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class DayErrorModel(NpModel):

    day: int
    error: str
    detail: str


class DayBaselineModel(NpModel):

    day: int
    mean: float
    std: float
    sample_count: int


class BaselineResponse(NpModel):

    start_year: int
    end_year: int
    days: List[DayBaselineModel] = Field(default_factory=list)
    errors: List[DayErrorModel] = Field(default_factory=list)


class LongRecordModel(NpModel):

    day: int
    series: str
    value: Optional[float] = None


class MetricResponse(NpModel):

    kind: MetricKind
    records: List[LongRecordModel] = Field(default_factory=list)
    errors: List[DayErrorModel] = Field(default_factory=list)


class RarityModel(NpModel):

    sigmas: float
    p_within: float
    tail: float
    # None when the tail probability underflows and the rarity is unbounded
    one_in: Optional[float] = None
    statement: str
    text: List[str] = Field(default_factory=list)


class LatestReadingModel(NpModel):

    year: int
    day: int
    value: float
    anomaly: Optional[float] = None
    sigma: Optional[float] = None
    rarity: Optional[RarityModel] = None
    note: Optional[str] = None


class SnapshotResponse(NpModel):

    start_year: int
    end_year: int
    raw: List[LongRecordModel] = Field(default_factory=list)
    sigma: MetricResponse
    anomaly: MetricResponse
    baseline_errors: List[DayErrorModel] = Field(default_factory=list)
    latest: Optional[LatestReadingModel] = None
