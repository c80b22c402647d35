"""
Normalization of raw source payloads into labelled, comma-joined series records for the matrix builder.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Optional

from datasources.exceptions import InvalidPayload
from engine.matrix import RawRecord

log = logging.getLogger(__name__)


def _join(data: Any, label: str) -> str:
    if isinstance(data, str):
        return data
    if not isinstance(data, list):
        raise InvalidPayload(f"series {label!r}: 'data' must be a list or a delimited string")
    return ",".join("" if v is None else str(v) for v in data)


def iter_records(payload: Any, ignore_labels: Optional[Iterable[str]] = None) -> Iterator[RawRecord]:
    if not isinstance(payload, list):
        raise InvalidPayload(f"expected a list of series, got {type(payload).__name__}")
    ignored = {str(label).strip() for label in ignore_labels or ()}

    for item in payload:
        if not isinstance(item, dict) or "name" not in item or "data" not in item:
            raise InvalidPayload(f"series entry must carry 'name' and 'data': {item!r:.80}")
        label = str(item["name"]).strip()
        if label in ignored:
            log.debug("skipping series %r", label)
            continue
        yield RawRecord(label=label, values=_join(item["data"], label))


def to_records(payload: Any, ignore_labels: Optional[Iterable[str]] = None) -> List[RawRecord]:
    return list(iter_records(payload, ignore_labels))
