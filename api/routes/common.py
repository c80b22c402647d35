"""
Shared utilities and dependencies for API route modules.

Provides a centralized place for creating the data source provider, turning
engine results into response models, and other helpers used across multiple
routers. This keeps individual route files thin and avoids repeating
boilerplate logic.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Mapping, Optional

from datasources.data_config import DataSourceSettings
from datasources.provider import DataSourceProvider
from engine.exceptions import DayError
from engine.export import LongRecord
from engine.metrics import DerivedMatrix
from engine.probability import Rarity, render
from engine.summary import LatestReading
from api.responses import (
    DayErrorModel,
    LatestReadingModel,
    LongRecordModel,
    MetricResponse,
    RarityModel,
)

_providers: dict[str, DataSourceProvider] = {}


def get_provider() -> DataSourceProvider:
    provider = _providers.get("default")
    if provider is None:
        provider = DataSourceProvider(settings=DataSourceSettings())
        _providers["default"] = provider
    return provider


async def close_providers() -> None:

    providers = list(_providers.values())
    _providers.clear()
    for provider in providers:
        await provider.aclose()


def day_errors(errors: Mapping[int, DayError]) -> List[DayErrorModel]:
    return [
        DayErrorModel(day=day, error=type(exc).__name__, detail=str(exc))
        for day, exc in sorted(errors.items())
    ]


def long_records(rows: List[LongRecord]) -> List[LongRecordModel]:
    return [LongRecordModel(day=r.day, series=r.series, value=r.value) for r in rows]


def metric_response(derived: DerivedMatrix, rows: List[LongRecord]) -> MetricResponse:
    return MetricResponse(kind=derived.kind, records=long_records(rows), errors=day_errors(derived.errors))


def rarity_model(rarity: Rarity) -> RarityModel:
    return RarityModel(
        sigmas=rarity.sigmas,
        p_within=rarity.p_within,
        tail=rarity.tail,
        one_in=None if math.isinf(rarity.one_in) else rarity.one_in,
        statement=rarity.statement,
        text=render(rarity),
    )


def latest_model(reading: Optional[LatestReading]) -> Optional[LatestReadingModel]:
    if reading is None:
        return None
    return LatestReadingModel(
        year=reading.year,
        day=reading.day,
        value=reading.value,
        anomaly=reading.anomaly,
        sigma=reading.sigma,
        rarity=rarity_model(reading.rarity) if reading.rarity else None,
        note=reading.note,
    )
