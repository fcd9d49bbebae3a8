"""Priority aggregation."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import PriorityBreakdown
from ..numbers import parse_wire_int
from ..records import PriorityRecord, validate_record

logger = logging.getLogger(__name__)


def convert_priority(
    raw: Mapping[str, Any] | PriorityRecord,
    *,
    field: str = "priority",
) -> PriorityBreakdown:
    """Parse a critical/high/medium/low record into a PriorityBreakdown."""
    record = validate_record(PriorityRecord, raw, kind=field)
    breakdown = PriorityBreakdown(
        critical=parse_wire_int(record.critical, field=f"{field}.critical"),
        high=parse_wire_int(record.high, field=f"{field}.high"),
        medium=parse_wire_int(record.medium, field=f"{field}.medium"),
        low=parse_wire_int(record.low, field=f"{field}.low"),
    )
    logger.debug("Normalized %s priorities: total %s", field, breakdown.total)
    return breakdown
