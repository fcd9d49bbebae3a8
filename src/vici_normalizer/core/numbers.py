"""Loose integer parsing for stringly-typed counters.

Counters are read with a leading-numeric-prefix rule: leading whitespace and
one sign are accepted, digits are consumed up to the first non-digit, and the
rest of the string is ignored. A value without leading digits becomes the
``NAN`` sentinel, which propagates through any sum it takes part in.
"""

from __future__ import annotations

import logging
import re

from .models import NAN, WireInt, is_nan

__all__ = ["NAN", "is_nan", "parse_wire_int"]

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")


def parse_wire_int(value: str, *, field: str | None = None) -> WireInt:
    """Parse the leading base-10 integer of ``value`` or return NAN."""
    m = _LEADING_INT_RE.match(value)
    if not m:
        if field is not None:
            logger.debug("Counter %s has no leading digits: %r", field, value)
        return NAN
    return int(m.group(1))
