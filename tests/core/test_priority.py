from __future__ import annotations

import pytest

from vici_normalizer.core.errors import MalformedRecordError
from vici_normalizer.core.models import PriorityBreakdown
from vici_normalizer.core.normalizers import convert_priority
from vici_normalizer.core.numbers import NAN, is_nan


def test_convert_priority_parses_each_field() -> None:
    out = convert_priority({"critical": "2", "high": "0", "medium": "1", "low": "0"})
    assert out == PriorityBreakdown(critical=2, high=0, medium=1, low=0)
    assert out.total == 3


def test_total_independent_of_key_order() -> None:
    a = convert_priority({"low": "4", "medium": "3", "high": "2", "critical": "1"})
    b = convert_priority({"critical": "1", "high": "2", "medium": "3", "low": "4"})
    assert a == b
    assert a.total == b.total == 10


def test_garbled_counter_propagates_nan_to_total() -> None:
    out = convert_priority({"critical": "1", "high": "?", "medium": "3", "low": "4"})
    assert out.critical == 1
    assert is_nan(out.high)
    assert is_nan(out.total)


def test_missing_priority_key_is_malformed() -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        convert_priority({"critical": "1", "high": "2", "medium": "3"}, field="queues")
    assert exc_info.value.record == "queues"
    assert any(p.startswith("low:") for p in exc_info.value.problems)


def test_non_string_leaf_is_malformed() -> None:
    with pytest.raises(MalformedRecordError):
        convert_priority({"critical": 1, "high": "2", "medium": "3", "low": "4"})


def test_nan_total_is_the_shared_sentinel() -> None:
    a = convert_priority({"critical": "1", "high": "x", "medium": "3", "low": "4"})
    b = convert_priority({"critical": "1", "high": "x", "medium": "3", "low": "4"})
    assert a.total is NAN
    assert a.total is b.total
