"""
Enumerations for Series Roles and Metric Kinds

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class SeriesRole(str, Enum):
    year = "year"
    upper_band = "upper_band"
    lower_band = "lower_band"

    @property
    def is_band(self) -> bool:
        return self is not SeriesRole.year


class MetricKind(str, Enum):
    sigma = "sigma"
    anomaly = "anomaly"
