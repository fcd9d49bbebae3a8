"""Wire record normalizers.

Each normalizer converts one decoded daemon response or event into its typed model.
"""

from __future__ import annotations

from .events import convert_control_log, convert_log, parse_severity
from .priority import convert_priority
from .reload import convert_reload_settings
from .stats import convert_stats
from .version import convert_version

__all__ = [
    "convert_control_log",
    "convert_log",
    "convert_priority",
    "convert_reload_settings",
    "convert_stats",
    "convert_version",
    "parse_severity",
]
