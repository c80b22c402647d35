"""
Rarity estimation for a sigma magnitude under a standard normal assumption: the two-sided probability mass within plus or minus sigma, and the one-sided "1 in N" exceedance statement used to put an observed sigma value into words.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

from scipy.stats import norm

from config import settings
from engine.exceptions import InvalidSigmaError


@dataclass(frozen=True)
class Rarity:
    sigmas: float
    p_within: float
    tail: float
    one_in: float

    @property
    def statement(self) -> str:
        if math.isinf(self.one_in):
            return "1 in infinity"
        return f"1 in {round(self.one_in):d}"


def _validate(sigmas: float) -> float:
    try:
        s = float(sigmas)
    except (TypeError, ValueError):
        raise InvalidSigmaError(f"sigmas must be a number, got {sigmas!r}") from None
    if not math.isfinite(s):
        raise InvalidSigmaError(f"sigmas must be finite, got {s}")
    if s < 0:
        raise InvalidSigmaError(f"sigmas must be non-negative, got {s}")
    return s


def estimate(sigmas: float) -> Rarity:
    s = _validate(sigmas)
    p_within = float(norm.cdf(s) - norm.cdf(-s))
    # sf keeps precision where 1 - p_within would cancel to zero
    tail = float(norm.sf(s))
    one_in = 1.0 / tail if tail > 0 else math.inf
    return Rarity(sigmas=s, p_within=p_within, tail=tail, one_in=one_in)


def render(rarity: Rarity, digits: int | None = None) -> List[str]:
    if digits is None:
        digits = settings.probability_digits
    return [
        f"p_within: {rarity.p_within:.{digits}f}",
        f"rarity: {rarity.statement}",
    ]
