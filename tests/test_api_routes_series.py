"""
Test Suite for API Routes - Series

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from api.requests import SeriesRequest
from api.routes import series as series_route
from datasources.exceptions import DataSourceUnavailable
from engine.matrix import RawRecord


class DummyProvider:
    def __init__(self, records=None, exc=None):
        self.records = records or []
        self.exc = exc
        self.calls = 0

    async def fetch_records(self):
        self.calls += 1
        if self.exc:
            raise self.exc
        return self.records


@pytest.fixture
def provider(monkeypatch, make_records):
    records = make_records(list(range(2000, 2006)), overrides={
        2000: {45: 20.0}, 2001: {45: 20.0}, 2002: {45: 20.0}, 2003: {45: 21.0}, 2004: {45: 19.0},
        2005: {45: 21.0},
    })
    records.append(RawRecord("plus 2σ", ",".join(["25"] * 366)))
    dummy = DummyProvider(records)
    monkeypatch.setattr(series_route, "get_provider", lambda: dummy)
    return dummy


def _req(**kwargs):
    return SeriesRequest(baseline_start_year=2000, baseline_end_year=2004, **kwargs)


@pytest.mark.asyncio
async def test_baseline_route(provider):
    resp = await series_route.series_baseline(_req())
    assert resp.start_year == 2000 and resp.end_year == 2004
    day45 = next(d for d in resp.days if d.day == 45)
    assert day45.mean == pytest.approx(20.0)
    assert day45.std == pytest.approx(0.7071, abs=1e-4)
    assert len(resp.days) + len(resp.errors) == 366


@pytest.mark.asyncio
async def test_sigma_route_returns_year_records(provider):
    resp = await series_route.series_sigma(_req(drop_missing=True))
    assert resp.kind.value == "sigma"
    assert {r.series for r in resp.records} == {str(y) for y in range(2000, 2006)}
    hit = next(r for r in resp.records if r.day == 45 and r.series == "2005")
    assert hit.value == 1.41


@pytest.mark.asyncio
async def test_anomaly_route_keeps_missing_cells_by_default(provider):
    resp = await series_route.series_anomaly(_req())
    assert len(resp.records) == 366 * 6
    assert any(r.value is None for r in resp.records)
    hit = next(r for r in resp.records if r.day == 45 and r.series == "2005")
    assert hit.value == 1.0


@pytest.mark.asyncio
async def test_snapshot_route_fetches_once(provider):
    resp = await series_route.series_snapshot(_req(drop_missing=True))
    assert provider.calls == 1
    assert "plus 2σ" in {r.series for r in resp.raw}
    assert "plus 2σ" not in {r.series for r in resp.sigma.records}
    assert resp.latest is not None
    assert resp.latest.year == 2005
    assert resp.latest.rarity is not None
    assert resp.latest.rarity.statement.startswith("1 in ")


@pytest.mark.asyncio
async def test_missing_window_year_is_422(provider):
    with pytest.raises(HTTPException) as exc:
        await series_route.series_sigma(SeriesRequest(baseline_start_year=1990, baseline_end_year=2004))
    assert exc.value.status_code == 422


@pytest.mark.asyncio
async def test_source_failure_is_502(monkeypatch):
    dummy = DummyProvider(exc=DataSourceUnavailable("down"))
    monkeypatch.setattr(series_route, "get_provider", lambda: dummy)
    with pytest.raises(HTTPException) as exc:
        await series_route.series_baseline(_req())
    assert exc.value.status_code == 502


@pytest.mark.asyncio
async def test_malformed_series_is_422(monkeypatch):
    dummy = DummyProvider([RawRecord("2000", "1"), RawRecord("2000", "2")])
    monkeypatch.setattr(series_route, "get_provider", lambda: dummy)
    with pytest.raises(HTTPException) as exc:
        await series_route.series_anomaly(_req())
    assert exc.value.status_code == 422


def test_request_rejects_reversed_window():
    with pytest.raises(ValidationError):
        SeriesRequest(baseline_start_year=2011, baseline_end_year=1982)


def test_request_defaults_to_configured_window():
    from config import settings

    window = SeriesRequest().window()
    assert (window.start_year, window.end_year) == (settings.baseline_start_year, settings.baseline_end_year)
