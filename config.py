"""
Constants and configuration for Daily Norm.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Optional

from pydantic_settings import BaseSettings


SOURCE_BACKEND_HTTP = "http"
SOURCE_BACKEND_FILE = "file"

DAILYNORM_SOURCE_BACKEND = os.getenv("DAILYNORM_SOURCE_BACKEND", SOURCE_BACKEND_HTTP).lower()
DAILYNORM_SOURCE_URL = os.getenv(
    "DAILYNORM_SOURCE_URL",
    "https://climatereanalyzer.org/clim/sst_daily/json/oisst2.1_world2_sst_day.json",
).rstrip("/")
DAILYNORM_SOURCE_FILE = os.getenv("DAILYNORM_SOURCE_FILE", "")
DAILYNORM_SOURCE_TIMEOUT = int(os.getenv("DAILYNORM_SOURCE_TIMEOUT", "30"))

# baseline window defaults (inclusive calendar years)
DAILYNORM_BASELINE_START_YEAR = int(os.getenv("DAILYNORM_BASELINE_START_YEAR", "1982"))
DAILYNORM_BASELINE_END_YEAR = int(os.getenv("DAILYNORM_BASELINE_END_YEAR", "2011"))

# labels the source uses for its precomputed reference bands
UPPER_BAND_LABEL = "plus 2σ"
LOWER_BAND_LABEL = "minus 2σ"

DAYS_IN_YEAR = 366
MISSING_TOKENS = frozenset({"", "na", "nan", "null", "none"})

HEALTH_PATH = "/health"


class Settings(BaseSettings):
    source_backend: str = DAILYNORM_SOURCE_BACKEND
    source_url: str = DAILYNORM_SOURCE_URL
    source_file: str = DAILYNORM_SOURCE_FILE
    source_timeout: int = DAILYNORM_SOURCE_TIMEOUT

    # series the source ships that are neither years nor bands (e.g. its own mean line)
    source_ignore_labels: List[str] = ["1982-2011 mean", "1982-2010 mean", "1991-2020 mean"]

    baseline_start_year: int = DAILYNORM_BASELINE_START_YEAR
    baseline_end_year: int = DAILYNORM_BASELINE_END_YEAR

    upper_band_label: str = UPPER_BAND_LABEL
    lower_band_label: str = LOWER_BAND_LABEL

    # derived metrics are rounded at the point of production
    round_digits: int = 2

    # 1 keeps the per-day map sequential
    max_parallel_day_tasks: int = 1

    probability_digits: int = 20

    host: str = "0.0.0.0"
    port: int = 4330
    log_level: str = "info"
    ssl_enabled: bool = False
    ssl_certfile: Optional[str] = None
    ssl_keyfile: Optional[str] = None

    model_config = {
        "env_prefix": "DAILYNORM_",
        "extra": "ignore",
    }


settings = Settings()
