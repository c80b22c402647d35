"""
Provider that retrieves one snapshot of raw series records from the configured source.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import List

from engine.matrix import RawRecord
from .data_config import DataSourceSettings
from .factory import DataSourceFactory
from .records import to_records

log = logging.getLogger(__name__)


class DataSourceProvider:
    def __init__(self, settings: DataSourceSettings):
        self.settings = settings
        self.series = DataSourceFactory.create_series(settings)

    async def fetch_records(self) -> List[RawRecord]:
        payload = await self.series.fetch()
        records = to_records(payload, self.settings.source_ignore_labels)
        log.info("fetched %d series from %s", len(records), self.series.location)
        return records

    async def aclose(self) -> None:
        await self.series.aclose()
