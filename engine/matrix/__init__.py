"""
Series matrix assembly: raw per-year records aligned onto a 366-day index with labelled year and band columns.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.matrix.builder import RawRecord, SeriesColumn, SeriesMatrix, build, parse_values

__all__ = ["RawRecord", "SeriesColumn", "SeriesMatrix", "build", "parse_values"]
