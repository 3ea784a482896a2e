"""Enumerations shared by the parsing engine and its matchers."""
from __future__ import annotations

from enum import Enum

__all__ = ["NumSignPosition", "NumSignValue", "NumValueType", "SearchTermination"]


class NumSignValue(str, Enum):
    """Sign attached to a parsed numeric value."""

    NONE = "none"
    NEGATIVE = "negative"
    ZERO = "zero"
    POSITIVE = "positive"

    def to_int(self) -> int:
        """Return -1, 0 or 1. ``NONE`` has no numeric sign and maps to 0."""

        if self is NumSignValue.NEGATIVE:
            return -1
        if self is NumSignValue.POSITIVE:
            return 1
        return 0


class NumValueType(str, Enum):
    """Kind of value held by an accumulator."""

    NONE = "none"
    INTEGER = "integer"
    FLOATING_POINT = "floating_point"


class NumSignPosition(str, Enum):
    """Where a negative sign literal sits relative to the digits."""

    NONE = "none"
    BEFORE = "before"
    AFTER = "after"
    BEFORE_AND_AFTER = "before_and_after"


class SearchTermination(str, Enum):
    """Reason a scan over a rune buffer stopped."""

    PROCESS_ERROR = "process_error"
    END_OF_TARGET = "end_of_target"
    SEARCH_LENGTH_LIMIT = "search_length_limit"
    TERMINATOR_FOUND = "terminator_found"
    TRAILING_NEGATIVE_SIGN = "trailing_negative_sign"
