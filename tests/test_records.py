"""
Test cases for normalizing source payloads into raw series records.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from datasources.exceptions import InvalidPayload
from datasources.records import to_records
from engine.matrix import RawRecord, build


def test_data_arrays_are_comma_joined_with_empty_missing():
    payload = [{"name": "2020", "data": [1.5, None, 2]}]
    assert to_records(payload) == [RawRecord(label="2020", values="1.5,,2")]


def test_string_data_passes_through():
    payload = [{"name": " 2021 ", "data": "1,,3"}]
    assert to_records(payload) == [RawRecord(label="2021", values="1,,3")]


def test_ignored_labels_are_dropped():
    payload = [
        {"name": "1982-2011 mean", "data": [1]},
        {"name": "1982", "data": [1]},
    ]
    assert [r.label for r in to_records(payload, ignore_labels=["1982-2011 mean"])] == ["1982"]


def test_out_of_order_and_interleaved_bands_build_cleanly():
    payload = [
        {"name": "2003", "data": [3.0]},
        {"name": "plus 2σ", "data": [9.0]},
        {"name": "2001", "data": [1.0]},
        {"name": "minus 2σ", "data": [-9.0]},
        {"name": "2002", "data": [2.0]},
    ]
    matrix = build(to_records(payload))
    assert matrix.labels == ["2001", "2002", "2003", "plus 2σ", "minus 2σ"]


@pytest.mark.parametrize("payload", [
    {"name": "2020", "data": []},
    [{"name": "2020"}],
    ["2020"],
    [{"name": "2020", "data": 5}],
])
def test_malformed_payloads_rejected(payload):
    with pytest.raises(InvalidPayload):
        to_records(payload)
