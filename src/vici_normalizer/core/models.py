"""Typed data model produced from daemon wire records."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum

# Counters are ints; a counter without leading digits is float("nan").
WireInt = int | float

NAN = float("nan")


def is_nan(value: WireInt) -> bool:
    """True if value is the not-a-number sentinel."""
    return isinstance(value, float) and math.isnan(value)


class Severity(IntEnum):
    """Daemon log verbosity levels.

    The scale is open: levels outside the named ones are kept as unnamed
    members with the same integer value instead of being rejected.
    """

    SILENT = -1
    AUDIT = 0
    CONTROL = 1
    CONTROL_MORE = 2
    RAW = 3
    PRIVATE = 4

    @classmethod
    def _missing_(cls, value: object) -> Severity | None:
        if not isinstance(value, int):
            return None
        pseudo = int.__new__(cls, value)
        pseudo._name_ = None
        pseudo._value_ = value
        return pseudo


@dataclass(frozen=True, slots=True)
class PriorityBreakdown:
    """Work units split across the four job priorities."""

    critical: WireInt
    high: WireInt
    medium: WireInt
    low: WireInt

    @property
    def total(self) -> WireInt:
        """Sum of all four priorities (NAN if any counter is NaN)."""
        total = self.critical + self.high + self.medium + self.low
        # A NaN sum is always the shared NAN object, never a fresh nan.
        return NAN if is_nan(total) else total


@dataclass(frozen=True, slots=True)
class WorkerStats:
    total: WireInt
    running: WireInt  # derived from active_by_priority, not reported by the daemon
    idle: WireInt
    active_by_priority: PriorityBreakdown


@dataclass(frozen=True, slots=True)
class MemoryStats:
    """Allocator introspection, all values in bytes."""

    non_mapped_space: WireInt
    mapped_space: WireInt
    used: WireInt
    free: WireInt


@dataclass(frozen=True, slots=True)
class RuntimeStats:
    """Normalized daemon runtime statistics."""

    running_since: datetime
    uptime: str | None  # human-readable duration as reported by the daemon
    workers: WorkerStats
    queues_by_priority: PriorityBreakdown
    queues: WireInt
    scheduled: WireInt
    ike_sas: WireInt
    ike_sas_half_open: WireInt
    plugins: tuple[str, ...]
    memory: MemoryStats


@dataclass(frozen=True, slots=True)
class ReloadOutcome:
    """Result of a settings reload; error is None when no message was sent."""

    success: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class SessionRef:
    """Reference to an IKE security association instance."""

    name: str
    id: str


@dataclass(frozen=True, slots=True)
class ControlLogEvent:
    group: str
    level: Severity | float
    message: str
    ike_sa: SessionRef | None = None


@dataclass(frozen=True, slots=True)
class LogEvent:
    """A control-log event plus the emitting worker thread."""

    group: str
    level: Severity | float
    message: str
    thread: WireInt
    ike_sa: SessionRef | None = None

    @classmethod
    def from_control(cls, event: ControlLogEvent, *, thread: WireInt) -> LogEvent:
        """Extend a control-log event with a thread identifier."""
        return cls(
            group=event.group,
            level=event.level,
            message=event.message,
            thread=thread,
            ike_sa=event.ike_sa,
        )

    def without_thread(self) -> ControlLogEvent:
        """Return the control-log view of this event."""
        return ControlLogEvent(
            group=self.group,
            level=self.level,
            message=self.message,
            ike_sa=self.ike_sa,
        )


@dataclass(frozen=True, slots=True)
class VersionInfo:
    """Daemon identity and the host it runs on."""

    daemon: str
    version: str
    sysname: str
    release: str
    machine: str
