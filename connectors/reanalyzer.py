"""
Daily series connector for JSON endpoints that publish one record per year (and per reference band) with a 366-slot data array.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from typing import Any, Dict, List, Optional

from datasources.retry import retry

from datasources.base import SeriesConnector
from datasources.helpers import fetch_json
from datasources.exceptions import DataSourceUnavailable, QueryTimeout
from config import DAILYNORM_SOURCE_TIMEOUT


class ReanalyzerConnector(SeriesConnector):

    def __init__(
        self,
        url: str,
        timeout: int = DAILYNORM_SOURCE_TIMEOUT,
        headers: Optional[Dict[str, str]] = None,
    ):
        super().__init__(url, timeout, headers)

    @retry(attempts=3, delay=0.5, backoff=2.0, exceptions=(DataSourceUnavailable, QueryTimeout))
    async def fetch(self) -> List[Dict[str, Any]]:
        return await fetch_json(
            self.location,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="series request failed",
            timeout_msg="series request timed out",
            unavailable_msg="Cannot reach series source at",
        )
