from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


@pytest.fixture
def stats_record() -> Callable[..., dict[str, Any]]:
    def _make(**overrides: Any) -> dict[str, Any]:
        record: dict[str, Any] = {
            "uptime": {"running": "2 days, 03:04:05", "since": "Oct 17 09:15:42 2026"},
            "workers": {
                "total": "10",
                "idle": "7",
                "active": {"critical": "2", "high": "0", "medium": "1", "low": "0"},
            },
            "queues": {"critical": "0", "high": "3", "medium": "5", "low": "1"},
            "scheduled": "4",
            "ikesas": {"total": "12", "half-open": "2"},
            "plugins": ["charon", "random", "nonce", "x509", "openssl", "vici"],
            "mallinfo": {"sbrk": "1024", "mmap": "2048", "used": "900", "free": "124"},
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def control_log_record() -> Callable[..., dict[str, str]]:
    def _make(**overrides: str) -> dict[str, str]:
        record = {
            "group": "IKE",
            "level": "2",
            "ikesa-name": "gw-office",
            "ikesa-uniqued": "17",
            "msg": "establishing CHILD_SA gw-office{3}",
        }
        record.update(overrides)
        return record

    return _make
