"""
Series routes: per-day baseline statistics and the raw, sigma and anomaly views of one retrieved snapshot.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter

from api.requests import SeriesRequest
from api.responses import BaselineResponse, DayBaselineModel, MetricResponse, SnapshotResponse
from api.routes.common import day_errors, get_provider, latest_model, long_records, metric_response
from api.routes.exception import handle_exceptions
from engine.enums import MetricKind
from engine.export import to_long
from engine.summary import latest
from services.snapshot_service import compute_snapshot

router = APIRouter(tags=["Series"])


@router.post("/series/baseline", response_model=BaselineResponse, summary="Per-day baseline mean and spread")
@handle_exceptions
async def series_baseline(req: SeriesRequest) -> BaselineResponse:
    result = await compute_snapshot(get_provider(), req.window())
    baseline = result.baseline
    return BaselineResponse(
        start_year=baseline.window.start_year,
        end_year=baseline.window.end_year,
        days=[
            DayBaselineModel(day=b.day, mean=b.mean, std=b.std, sample_count=b.sample_count)
            for _, b in sorted(baseline.days.items())
        ],
        errors=day_errors(baseline.errors),
    )


async def _metric(req: SeriesRequest, kind: MetricKind) -> MetricResponse:
    result = await compute_snapshot(get_provider(), req.window())
    derived = result.sigma if kind is MetricKind.sigma else result.anomaly
    return metric_response(derived, to_long(derived, drop_missing=req.drop_missing))


@router.post("/series/sigma", response_model=MetricResponse, summary="Per-year sigma against the baseline")
@handle_exceptions
async def series_sigma(req: SeriesRequest) -> MetricResponse:
    return await _metric(req, MetricKind.sigma)


@router.post("/series/anomaly", response_model=MetricResponse, summary="Per-year anomaly against the baseline")
@handle_exceptions
async def series_anomaly(req: SeriesRequest) -> MetricResponse:
    return await _metric(req, MetricKind.anomaly)


@router.post("/series/snapshot", response_model=SnapshotResponse, summary="Raw, sigma and anomaly views of one snapshot")
@handle_exceptions
async def series_snapshot(req: SeriesRequest) -> SnapshotResponse:
    result = await compute_snapshot(get_provider(), req.window())
    return SnapshotResponse(
        start_year=result.baseline.window.start_year,
        end_year=result.baseline.window.end_year,
        raw=long_records(to_long(result.matrix, drop_missing=req.drop_missing)),
        sigma=metric_response(result.sigma, to_long(result.sigma, drop_missing=req.drop_missing)),
        anomaly=metric_response(result.anomaly, to_long(result.anomaly, drop_missing=req.drop_missing)),
        baseline_errors=day_errors(result.baseline.errors),
        latest=latest_model(latest(result)),
    )
