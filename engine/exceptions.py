"""
Error taxonomy for the baseline and derived-metric pipeline.

Structural errors (malformed series, a baseline window that does not match the
matrix, bad estimator input) abort the operation. Per-day errors (too few
baseline values, zero spread) are recorded against the day that caused them
and leave every other day untouched.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations


class DailyNormError(Exception):
    pass


class MalformedSeriesError(DailyNormError):
    pass


class BaselineWindowError(DailyNormError):
    pass


class InvalidSigmaError(DailyNormError):
    pass


class DayError(DailyNormError):
    """Base for errors that are local to a single day-of-year."""

    def __init__(self, day: int, message: str):
        super().__init__(message)
        self.day = day


class InsufficientBaselineDataError(DayError):
    def __init__(self, day: int, count: int):
        super().__init__(day, f"day {day}: {count} baseline value(s), need at least 2")
        self.count = count


class DegenerateBaselineError(DayError):
    def __init__(self, day: int, std: float):
        super().__init__(day, f"day {day}: baseline standard deviation is {std}")
        self.std = std


STRUCTURAL_ERRORS = (MalformedSeriesError, BaselineWindowError, InvalidSigmaError)
