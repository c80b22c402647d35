#!/usr/bin/env python3

"""
Regression and integration test runner for a running Daily Norm API.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import argparse
import asyncio
import json
import os
import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

BASE_URL = os.getenv("DAILYNORM_RUNNER_BASE_URL", "http://localhost:4330/api/v1")
HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class Case:
    section: str
    label: str
    method: str
    path: str
    body: Dict[str, Any] = field(default_factory=dict)
    params: Dict[str, Any] = field(default_factory=dict)
    expect: int = 200


CASES: List[Case] = [
    Case("Health", "service is up", "GET", "/health"),

    Case("Probability", "one sigma", "GET", "/probability", params={"sigmas": 1}),
    Case("Probability", "two sigma", "GET", "/probability", params={"sigmas": 2}),
    Case("Probability", "zero sigma", "GET", "/probability", params={"sigmas": 0}),
    Case("Probability", "far tail", "GET", "/probability", params={"sigmas": 40}),
    Case("Probability", "negative rejected", "GET", "/probability", params={"sigmas": -1}, expect=422),
    Case("Probability", "non numeric rejected", "GET", "/probability", params={"sigmas": "abc"}, expect=422),

    Case("Series", "default baseline", "POST", "/series/baseline"),
    Case("Series", "custom window", "POST", "/series/baseline",
         body={"baseline_start_year": 1991, "baseline_end_year": 2020}),
    Case("Series", "sigma view", "POST", "/series/sigma"),
    Case("Series", "anomaly view without gaps", "POST", "/series/anomaly", body={"drop_missing": True}),
    Case("Series", "full snapshot", "POST", "/series/snapshot"),

    Case("Validation", "reversed window", "POST", "/series/baseline",
         body={"baseline_start_year": 2011, "baseline_end_year": 1982}, expect=422),
    Case("Validation", "window outside data", "POST", "/series/baseline",
         body={"baseline_start_year": 1800, "baseline_end_year": 1810}, expect=422),
]


async def run_case(client: httpx.AsyncClient, case: Case) -> tuple[bool, str, Any]:
    attempt = 0
    last_exc: Optional[Exception] = None
    while attempt < 2:
        try:
            if case.method == "GET":
                r = await client.get(case.path, params=case.params)
            else:
                r = await client.request(case.method, case.path, json=case.body, params=case.params)
            try:
                body: Any = r.json()
            except ValueError:
                body = r.text
            if r.status_code == case.expect:
                return True, "", body
            return False, f"{r.status_code} {r.reason_phrase}: {body}", body
        except httpx.TransportError as exc:
            last_exc = exc
            attempt += 1
            if attempt < 2:
                await asyncio.sleep(0.1)
                continue
            return False, f"transport error: {exc}", None
    return False, str(last_exc), None


def _summarize(body: Any) -> str:
    if body is None:
        return "<no response>"
    if isinstance(body, dict):
        # series payloads carry 366 rows per column; show sizes only
        shown = {k: (f"<{len(v)} items>" if isinstance(v, list) and len(v) > 5 else v) for k, v in body.items()}
        return json.dumps(shown, indent=2, default=str)
    return str(body)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Run API test cases")
    parser.add_argument("--section", help="only run cases from this section name")
    parser.add_argument("--label", help="only run the case with this exact label")
    args = parser.parse_args()
    selected = [
        c for c in CASES
        if (not args.section or c.section == args.section) and (not args.label or c.label == args.label)
    ]
    if not selected:
        print("no matching cases (check --section or --label)")
        return 1

    passed = failed = 0
    current_section = ""

    async with httpx.AsyncClient(base_url=BASE_URL, headers=HEADERS, timeout=60) as client:
        for case in selected:
            if case.section != current_section:
                current_section = case.section
                print(f"\n-- {current_section} {'-' * max(0, 44 - len(current_section))}")

            ok, detail, body = await run_case(client, case)
            if ok:
                passed += 1
                print(f"  PASS  {case.method} {case.path} : {case.label}")
            else:
                failed += 1
                print(f"  FAIL  {case.method} {case.path} : {case.label} (expected {case.expect})")
                if detail:
                    print(f"        {detail}")
            print(f"        response:\n{_summarize(body)}")

    total = passed + failed
    print(f"\n{'=' * 43}")
    print(f"  Results: {passed} passed / {failed} failed / {total} total")
    print(f"{'=' * 43}\n")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
