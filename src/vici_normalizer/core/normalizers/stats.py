"""Runtime statistics normalization.

Builds RuntimeStats from the nested ``stats`` response. Totals that the
daemon does not report directly (running workers, queued jobs) are derived
from the per-priority breakdowns.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..config import NormalizerConfig, default_config
from ..models import MemoryStats, RuntimeStats, WorkerStats
from ..numbers import parse_wire_int
from ..records import MallinfoRecord, StatsRecord, validate_record
from ..timestamps import parse_since
from .priority import convert_priority

logger = logging.getLogger(__name__)


def _memory(record: MallinfoRecord) -> MemoryStats:
    return MemoryStats(
        non_mapped_space=parse_wire_int(record.sbrk, field="mallinfo.sbrk"),
        mapped_space=parse_wire_int(record.mmap, field="mallinfo.mmap"),
        used=parse_wire_int(record.used, field="mallinfo.used"),
        free=parse_wire_int(record.free, field="mallinfo.free"),
    )


def convert_stats(
    raw: Mapping[str, Any] | StatsRecord,
    *,
    config: NormalizerConfig | None = None,
) -> RuntimeStats:
    """Convert a decoded stats record into RuntimeStats.

    Raises:
        MalformedRecordError: a group or key is missing.
        UnparseableTimestampError: ``uptime.since`` matches no known format.
    """
    cfg = config or default_config()
    record = validate_record(StatsRecord, raw, kind="stats")

    active = convert_priority(record.workers.active, field="workers.active")
    queued = convert_priority(record.queues, field="queues")

    workers = WorkerStats(
        total=parse_wire_int(record.workers.total, field="workers.total"),
        running=active.total,
        idle=parse_wire_int(record.workers.idle, field="workers.idle"),
        active_by_priority=active,
    )

    stats = RuntimeStats(
        running_since=parse_since(record.uptime.since, formats=cfg.timestamp_formats),
        uptime=record.uptime.running,
        workers=workers,
        queues_by_priority=queued,
        queues=queued.total,
        scheduled=parse_wire_int(record.scheduled, field="scheduled"),
        ike_sas=parse_wire_int(record.ikesas.total, field="ikesas.total"),
        ike_sas_half_open=parse_wire_int(record.ikesas.half_open, field="ikesas.half-open"),
        plugins=tuple(record.plugins),
        memory=_memory(record.mallinfo),
    )
    logger.debug(
        "Normalized stats: %s workers, %s queued, %s IKE SAs",
        workers.total,
        stats.queues,
        stats.ike_sas,
    )
    return stats
