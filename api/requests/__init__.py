from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, model_validator

from config import settings
from engine.baseline import BaselineWindow


class SeriesRequest(BaseModel):
    baseline_start_year: Optional[int] = Field(default=None, ge=1000, le=9999)
    baseline_end_year: Optional[int] = Field(default=None, ge=1000, le=9999)
    drop_missing: bool = False

    @model_validator(mode="after")
    def _ordered_window(self) -> SeriesRequest:
        start = self.baseline_start_year or settings.baseline_start_year
        end = self.baseline_end_year or settings.baseline_end_year
        if start > end:
            raise ValueError(f"baseline_start_year {start} is after baseline_end_year {end}")
        return self

    def window(self) -> BaselineWindow:
        return BaselineWindow(
            self.baseline_start_year or settings.baseline_start_year,
            self.baseline_end_year or settings.baseline_end_year,
        )
