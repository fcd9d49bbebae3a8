"""Streamed ``control-log`` and ``log`` event normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..errors import MalformedRecordError
from ..models import ControlLogEvent, LogEvent, SessionRef, Severity
from ..numbers import is_nan, parse_wire_int
from ..records import ControlLogRecord, LogRecord, validate_record

logger = logging.getLogger(__name__)


def parse_severity(value: str) -> Severity | float:
    """Parse a wire level; out-of-range levels pass through unchanged."""
    level = parse_wire_int(value, field="level")
    if is_nan(level):
        return level
    return Severity(level)


def _session_ref(record: ControlLogRecord) -> SessionRef | None:
    # The name alone decides whether an SA is attached.
    if not record.ikesa_name:
        return None
    if record.ikesa_uniqued is None:
        raise MalformedRecordError(
            "control-log",
            ["ikesa-uniqued: Field required when ikesa-name is set"],
        )
    return SessionRef(name=record.ikesa_name, id=record.ikesa_uniqued)


def convert_control_log(raw: Mapping[str, Any] | ControlLogRecord) -> ControlLogEvent:
    """Convert a control-log event record."""
    record = validate_record(ControlLogRecord, raw, kind="control-log")
    event = ControlLogEvent(
        group=record.group,
        level=parse_severity(record.level),
        message=record.msg,
        ike_sa=_session_ref(record),
    )
    logger.debug("Normalized control-log event: group=%s level=%s", event.group, event.level)
    return event


def convert_log(raw: Mapping[str, Any] | LogRecord) -> LogEvent:
    """Convert a log event record (control-log fields plus ``thread``)."""
    record = validate_record(LogRecord, raw, kind="log")
    base = convert_control_log(record)
    event = LogEvent.from_control(base, thread=parse_wire_int(record.thread, field="thread"))
    logger.debug("Normalized log event: thread=%s", event.thread)
    return event
