"""Settings-reload acknowledgement normalization."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..models import ReloadOutcome
from ..records import ReloadSettingsRecord, validate_record

logger = logging.getLogger(__name__)


def convert_reload_settings(raw: Mapping[str, Any] | ReloadSettingsRecord) -> ReloadOutcome:
    """Convert a reload-settings reply.

    ``success`` is true only for the exact token ``"yes"``. A non-empty
    ``errmsg`` is kept even on success, since the daemon may attach advisory
    messages to a successful reload.
    """
    record = validate_record(ReloadSettingsRecord, raw, kind="reload-settings")
    outcome = ReloadOutcome(
        success=record.success == "yes",
        error=record.errmsg or None,
    )
    logger.debug("Normalized reload-settings reply: success=%s", outcome.success)
    return outcome
