"""
Data source settings for retrieving raw daily series

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    SOURCE_BACKEND_FILE,
    SOURCE_BACKEND_HTTP,
    DAILYNORM_SOURCE_BACKEND,
    DAILYNORM_SOURCE_URL,
    DAILYNORM_SOURCE_FILE,
    DAILYNORM_SOURCE_TIMEOUT,
    settings as app_settings,
)


class DataSourceSettings(BaseSettings):
    source_backend: str = DAILYNORM_SOURCE_BACKEND
    source_url: str = DAILYNORM_SOURCE_URL
    source_file: Optional[str] = DAILYNORM_SOURCE_FILE or None
    source_timeout: int = DAILYNORM_SOURCE_TIMEOUT
    source_ignore_labels: List[str] = list(app_settings.source_ignore_labels)

    @field_validator("source_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        return str(v).rstrip("/") if v is not None else v

    @field_validator("source_backend", mode="before")
    @classmethod
    def validate_source_backend(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {SOURCE_BACKEND_HTTP, SOURCE_BACKEND_FILE}:
            raise ValueError(f"Unsupported source backend: {value!r}")
        return value

    model_config = {"env_prefix": "DAILYNORM_", "extra": "ignore"}
