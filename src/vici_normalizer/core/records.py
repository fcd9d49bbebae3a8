"""Schemas for decoded daemon wire records.

Every leaf on the wire is a string, so the models validate strictly: a
number, boolean or null where a string is expected is a malformed record.
Unknown keys are ignored since newer daemons may add fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from .errors import MalformedRecordError


class WireRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class PriorityRecord(WireRecord):
    critical: StrictStr
    high: StrictStr
    medium: StrictStr
    low: StrictStr


class UptimeRecord(WireRecord):
    running: StrictStr | None = None
    since: StrictStr


class WorkersRecord(WireRecord):
    total: StrictStr
    idle: StrictStr
    active: PriorityRecord


class IkeSasRecord(WireRecord):
    total: StrictStr
    half_open: StrictStr = Field(alias="half-open")


class MallinfoRecord(WireRecord):
    sbrk: StrictStr
    mmap: StrictStr
    used: StrictStr
    free: StrictStr


class StatsRecord(WireRecord):
    uptime: UptimeRecord
    workers: WorkersRecord
    queues: PriorityRecord
    scheduled: StrictStr
    ikesas: IkeSasRecord
    plugins: list[StrictStr]
    mallinfo: MallinfoRecord


class ReloadSettingsRecord(WireRecord):
    success: StrictStr | None = None
    errmsg: StrictStr | None = None


class ControlLogRecord(WireRecord):
    group: StrictStr
    level: StrictStr
    ikesa_name: StrictStr | None = Field(default=None, alias="ikesa-name")
    ikesa_uniqued: StrictStr | None = Field(default=None, alias="ikesa-uniqued")
    msg: StrictStr


class LogRecord(ControlLogRecord):
    thread: StrictStr


class VersionRecord(WireRecord):
    daemon: StrictStr
    version: StrictStr
    sysname: StrictStr
    release: StrictStr
    machine: StrictStr


R = TypeVar("R", bound=WireRecord)


def _problems(exc: ValidationError) -> list[str]:
    out = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "<record>"
        out.append(f"{loc}: {err['msg']}")
    return out


def validate_record(model: type[R], raw: Mapping[str, Any] | R, *, kind: str) -> R:
    """Validate a decoded record, raising MalformedRecordError on bad shape."""
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(raw)
    except ValidationError as exc:
        raise MalformedRecordError(kind, _problems(exc)) from exc
