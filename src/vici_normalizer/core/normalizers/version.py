"""Version response normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import VersionInfo
from ..records import VersionRecord, validate_record

logger = logging.getLogger(__name__)


def convert_version(raw: Mapping[str, Any] | VersionRecord) -> VersionInfo:
    record = validate_record(VersionRecord, raw, kind="version")
    info = VersionInfo(
        daemon=record.daemon,
        version=record.version,
        sysname=record.sysname,
        release=record.release,
        machine=record.machine,
    )
    logger.debug("Normalized version: %s %s", info.daemon, info.version)
    return info
