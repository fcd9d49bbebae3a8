"""Normalizer configuration."""

from __future__ import annotations

from dataclasses import dataclass

# e.g. "Oct 19 12:34:56 2026"
DAEMON_TIMESTAMP_FORMAT = "%b %d %H:%M:%S %Y"


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    # Tried in order before falling back to ISO 8601.
    timestamp_formats: tuple[str, ...] = (
        DAEMON_TIMESTAMP_FORMAT,
        "%Y-%m-%d %H:%M:%S",
    )


def default_config() -> NormalizerConfig:
    """Default configuration matching the daemon's output."""
    return NormalizerConfig()
