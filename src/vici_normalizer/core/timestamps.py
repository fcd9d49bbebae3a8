"""Timestamp parsing for daemon-reported points in time."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .config import NormalizerConfig
from .errors import UnparseableTimestampError


def parse_iso_dt(s: str) -> datetime:
    """Parse ISO8601 datetime, keeping whatever offset (if any) it carries."""
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def parse_since(
    value: str,
    *,
    formats: Sequence[str] = NormalizerConfig().timestamp_formats,
) -> datetime:
    """Parse a ``since`` value using the configured formats, then ISO8601.

    No timezone is assumed: formats without an offset produce naive datetimes.
    """
    text = value.strip()
    for fmt in formats:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    try:
        return parse_iso_dt(text)
    except ValueError as exc:
        raise UnparseableTimestampError(value) from exc
