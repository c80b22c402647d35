"""
Derived metric logic: per-year sigma and anomaly matrices against the day-of-year baseline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.metrics.transform import DerivedMatrix, anomalies, derive, sigmas, transform_day

__all__ = ["DerivedMatrix", "anomalies", "derive", "sigmas", "transform_day"]
