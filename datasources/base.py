"""
Base connector for raw daily series sources

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class SeriesConnector(ABC):
    """A source of ``[{"name": <label>, "data": [<number|null>, ...]}, ...]`` payloads."""

    def __init__(self, location: str, timeout: int = 30, headers: Optional[Dict[str, str]] = None):
        self.location = str(location).rstrip("/")
        self.timeout = timeout
        self.headers = headers or {}

    def _headers(self) -> Dict[str, str]:
        return {"Accept": "application/json", **self.headers}

    @abstractmethod
    async def fetch(self) -> List[Dict[str, Any]]: ...

    async def aclose(self) -> None:
        return None
