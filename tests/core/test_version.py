from __future__ import annotations

import logging

import pytest

from vici_normalizer.core.errors import MalformedRecordError
from vici_normalizer.core.models import VersionInfo
from vici_normalizer.core.normalizers import convert_version


def test_convert_version() -> None:
    raw = {
        "daemon": "charon-systemd",
        "version": "5.9.14",
        "sysname": "Linux",
        "release": "6.8.0-45-generic",
        "machine": "x86_64",
    }
    assert convert_version(raw) == VersionInfo(
        daemon="charon-systemd",
        version="5.9.14",
        sysname="Linux",
        release="6.8.0-45-generic",
        machine="x86_64",
    )


def test_missing_version_field_is_malformed() -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        convert_version({"daemon": "charon", "version": "5.9.14"})
    assert exc_info.value.record == "version"
    assert len(exc_info.value.problems) == 3


def test_non_mapping_is_malformed() -> None:
    with pytest.raises(MalformedRecordError):
        convert_version(None)  # type: ignore[arg-type]


def test_version_conversion_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="vici_normalizer.core.normalizers.version")
    convert_version(
        {"daemon": "charon", "version": "6.0.0", "sysname": "Linux", "release": "6.8", "machine": "aarch64"}
    )
    assert "Normalized version: charon 6.0.0" in caplog.text
