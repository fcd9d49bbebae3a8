"""Exceptions raised when a wire record cannot be normalized."""

from __future__ import annotations

from collections.abc import Sequence


class NormalizationError(ValueError):
    """Base class for conversion failures."""


class MalformedRecordError(NormalizationError):
    """A required group or key is missing, or a leaf is not a string."""

    def __init__(self, record: str, problems: Sequence[str]) -> None:
        self.record = record
        self.problems = list(problems)
        super().__init__(f"Malformed {record} record: {'; '.join(self.problems)}")


class UnparseableTimestampError(NormalizationError):
    """A timestamp string matches none of the accepted formats."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unparseable timestamp: {value!r}")
