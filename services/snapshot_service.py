"""
Snapshot service that retrieves the raw series once and runs the baseline pipeline off the event loop.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
from typing import Optional

from datasources.provider import DataSourceProvider
from engine import pipeline
from engine.baseline import BaselineWindow
from engine.pipeline import SnapshotResult


async def compute_snapshot(
    provider: DataSourceProvider,
    window: Optional[BaselineWindow] = None,
) -> SnapshotResult:
    records = await provider.fetch_records()
    return await asyncio.to_thread(pipeline.run, records, window)
