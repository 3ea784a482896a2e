"""Decimal separator literal and its matcher."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...exceptions import Context, InvalidInputError, extend_context
from ..runes import RuneBuffer, first_invalid_char_index

__all__ = ["DecimalSeparatorMatch", "DecimalSeparatorSpec"]

_FORBIDDEN_CHARS = frozenset("-()")


@dataclass(frozen=True)
class DecimalSeparatorMatch:
    """Outcome of a decimal separator search at one position."""

    found: bool = False
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    symbol: str = ""


@dataclass(frozen=True)
class DecimalSeparatorSpec:
    """Literal separating integer digits from fractional digits.

    An empty ``symbol`` is the no-op spec: decimal detection is disabled.
    """

    symbol: str = ""

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def nop(cls) -> "DecimalSeparatorSpec":
        return cls("")

    @classmethod
    def us(cls) -> "DecimalSeparatorSpec":
        return cls(".")

    @classmethod
    def european_union(cls) -> "DecimalSeparatorSpec":
        return cls(",")

    @classmethod
    def france(cls) -> "DecimalSeparatorSpec":
        return cls(",")

    @property
    def is_nop(self) -> bool:
        return not self.symbol

    def validate(self, *, context: Context = None) -> None:
        if not isinstance(self.symbol, str):
            raise InvalidInputError(
                f"decimal separator must be a string, got {type(self.symbol).__name__}",
                context=extend_context(context, "DecimalSeparatorSpec.validate"),
            )
        if first_invalid_char_index(self.symbol) is not None:
            raise InvalidInputError(
                f"decimal separator {self.symbol!r} contains invalid characters",
                context=extend_context(context, "DecimalSeparatorSpec.validate"),
            )
        bad = sorted(set(self.symbol) & _FORBIDDEN_CHARS)
        if bad:
            raise InvalidInputError(
                f"decimal separator {self.symbol!r} contains reserved sign characters {bad}",
                context=extend_context(context, "DecimalSeparatorSpec.validate"),
            )
        if any("0" <= char <= "9" for char in self.symbol):
            raise InvalidInputError(
                f"decimal separator {self.symbol!r} must not contain digits",
                context=extend_context(context, "DecimalSeparatorSpec.validate"),
            )

    def search(
        self,
        buffer: RuneBuffer,
        index: int,
        *,
        limit: Optional[int] = None,
    ) -> DecimalSeparatorMatch:
        """Test for the separator literal starting at ``index``."""

        if self.is_nop or not buffer.matches_at(index, self.symbol, limit=limit):
            return DecimalSeparatorMatch()
        return DecimalSeparatorMatch(
            found=True,
            start_index=index,
            end_index=index + len(self.symbol),
            symbol=self.symbol,
        )
