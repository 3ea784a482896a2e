"""Parsing terminators: literals that end a scan once digits were seen."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ...exceptions import Context, InvalidInputError, extend_context
from ..runes import RuneBuffer, first_invalid_char_index

__all__ = ["TerminatorMatch", "TerminatorSet"]


@dataclass(frozen=True)
class TerminatorMatch:
    """Outcome of a terminator search at one position."""

    found: bool = False
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    pattern: str = ""
    pattern_index: Optional[int] = None


class TerminatorSet:
    """Ordered collection of terminator literals; empty means no-op."""

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Iterable[str] = ()) -> None:
        self._patterns: Tuple[str, ...] = tuple(patterns)
        self.validate()

    @classmethod
    def nop(cls) -> "TerminatorSet":
        return cls(())

    @property
    def patterns(self) -> Tuple[str, ...]:
        return self._patterns

    @property
    def is_nop(self) -> bool:
        return not self._patterns

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"TerminatorSet({list(self._patterns)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerminatorSet):
            return NotImplemented
        return self._patterns == other._patterns

    def __hash__(self) -> int:
        return hash(self._patterns)

    def validate(self, *, context: Context = None) -> None:
        for position, pattern in enumerate(self._patterns):
            if not isinstance(pattern, str) or not pattern:
                raise InvalidInputError(
                    f"terminator #{position} must be a non-empty string, got {pattern!r}",
                    context=extend_context(context, "TerminatorSet.validate"),
                )
            if first_invalid_char_index(pattern) is not None:
                raise InvalidInputError(
                    f"terminator #{position} {pattern!r} contains invalid characters",
                    context=extend_context(context, "TerminatorSet.validate"),
                )

    def search(
        self,
        buffer: RuneBuffer,
        index: int,
        *,
        limit: Optional[int] = None,
    ) -> TerminatorMatch:
        """Return the first pattern, in insertion order, matching at ``index``."""

        for position, pattern in enumerate(self._patterns):
            if buffer.matches_at(index, pattern, limit=limit):
                return TerminatorMatch(
                    found=True,
                    start_index=index,
                    end_index=index + len(pattern),
                    pattern=pattern,
                    pattern_index=position,
                )
        return TerminatorMatch()
