#!/usr/bin/env python3

"""
Command line rarity estimate for a sigma magnitude.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from config import settings
from engine.exceptions import InvalidSigmaError
from engine.probability import estimate, render

log = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Probability mass within +/- sigmas of a normal distribution, and the one-sided rarity",
    )
    parser.add_argument("sigmas", type=float, help="Number of standard deviations (>= 0)")
    parser.add_argument(
        "--digits",
        type=int,
        default=settings.probability_digits,
        help="Decimal digits for p_within",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )
    args = _parse_args(argv)
    try:
        rarity = estimate(args.sigmas)
    except InvalidSigmaError as exc:
        log.error("%s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    for line in render(rarity, digits=args.digits):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
