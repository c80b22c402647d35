"""
Daily series connector that reads a previously downloaded JSON snapshot from disk.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List

from datasources.base import SeriesConnector
from datasources.exceptions import DataSourceUnavailable, InvalidPayload


class SnapshotFileConnector(SeriesConnector):

    def __init__(self, path: str):
        super().__init__(path)

    def _read(self) -> List[Dict[str, Any]]:
        path = Path(self.location)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise DataSourceUnavailable(f"Cannot read series snapshot at {path}") from e
        try:
            return json.loads(text)
        except ValueError as e:
            raise InvalidPayload(f"series snapshot {path} is not JSON") from e

    async def fetch(self) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self._read)
