"""Typed normalization of daemon control-protocol records."""

from __future__ import annotations

from .core.config import NormalizerConfig, default_config
from .core.errors import MalformedRecordError, NormalizationError, UnparseableTimestampError
from .core.models import (
    ControlLogEvent,
    LogEvent,
    MemoryStats,
    PriorityBreakdown,
    ReloadOutcome,
    RuntimeStats,
    SessionRef,
    Severity,
    VersionInfo,
    WireInt,
    WorkerStats,
)
from .core.normalizers import (
    convert_control_log,
    convert_log,
    convert_priority,
    convert_reload_settings,
    convert_stats,
    convert_version,
)
from .core.numbers import NAN, is_nan, parse_wire_int

__all__ = [
    "NAN",
    "ControlLogEvent",
    "LogEvent",
    "MalformedRecordError",
    "MemoryStats",
    "NormalizationError",
    "NormalizerConfig",
    "PriorityBreakdown",
    "ReloadOutcome",
    "RuntimeStats",
    "SessionRef",
    "Severity",
    "UnparseableTimestampError",
    "VersionInfo",
    "WireInt",
    "WorkerStats",
    "convert_control_log",
    "convert_log",
    "convert_priority",
    "convert_reload_settings",
    "convert_stats",
    "convert_version",
    "default_config",
    "is_nan",
    "parse_wire_int",
]
