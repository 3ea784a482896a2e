"""Negative number sign conventions and the per-scan sign search.

Three sign conventions are supported:

* ``BEFORE``: a leading literal such as ``-123``; only recognised before the
  first digit.
* ``AFTER``: a trailing literal such as ``123-``; only recognised once a
  digit has been seen.
* ``BEFORE_AND_AFTER``: an enclosing pair such as ``(123)``. The opening
  literal is remembered when seen before the digits, and the value is only
  reported negative when the closing literal follows the digits.

Specs and collections are immutable configuration. Anything that changes
while a buffer is scanned lives in :class:`NegativeSignSearch`, which the
engine creates fresh for every scan.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ...exceptions import Context, InvalidInputError, extend_context
from ..enums import NumSignPosition
from ..runes import RuneBuffer, first_invalid_char_index

__all__ = [
    "NegativeSignCollection",
    "NegativeSignMatch",
    "NegativeSignSearch",
    "NegativeSignSpec",
]


@dataclass(frozen=True)
class NegativeSignSpec:
    """A negative sign literal together with its position class."""

    position: NumSignPosition
    leading: str = ""
    trailing: str = ""

    def __post_init__(self) -> None:
        try:
            object.__setattr__(self, "position", NumSignPosition(self.position))
        except ValueError as exc:
            raise InvalidInputError(
                f"unknown sign position {self.position!r}",
                context="NegativeSignSpec",
            ) from exc
        self.validate()

    @classmethod
    def leading_sign(cls, symbol: str) -> "NegativeSignSpec":
        return cls(NumSignPosition.BEFORE, leading=symbol)

    @classmethod
    def trailing_sign(cls, symbol: str) -> "NegativeSignSpec":
        return cls(NumSignPosition.AFTER, trailing=symbol)

    @classmethod
    def enclosing_sign(cls, opening: str, closing: str) -> "NegativeSignSpec":
        return cls(NumSignPosition.BEFORE_AND_AFTER, leading=opening, trailing=closing)

    def validate(self, *, context: Context = None) -> None:
        chain = extend_context(context, "NegativeSignSpec.validate")
        position = self.position
        required = {
            NumSignPosition.BEFORE: ("leading",),
            NumSignPosition.AFTER: ("trailing",),
            NumSignPosition.BEFORE_AND_AFTER: ("leading", "trailing"),
        }.get(position)
        if required is None:
            raise InvalidInputError("a negative sign spec needs a position other than 'none'", context=chain)

        for field_name in ("leading", "trailing"):
            value = getattr(self, field_name)
            if not isinstance(value, str):
                raise InvalidInputError(f"'{field_name}' must be a string", context=chain)
            if field_name in required and not value:
                raise InvalidInputError(
                    f"'{field_name}' sign literal is empty for position '{position.value}'",
                    context=chain,
                )
            if field_name not in required and value:
                raise InvalidInputError(
                    f"'{field_name}' sign literal {value!r} is not used by position '{position.value}'",
                    context=chain,
                )
            if first_invalid_char_index(value) is not None:
                raise InvalidInputError(f"'{field_name}' sign literal contains invalid characters", context=chain)
            if any("0" <= char <= "9" for char in value):
                raise InvalidInputError(f"'{field_name}' sign literal {value!r} contains digits", context=chain)


@dataclass(frozen=True)
class NegativeSignMatch:
    """Outcome of a negative sign search at one position."""

    found: bool = False
    start_index: Optional[int] = None
    end_index: Optional[int] = None
    position: NumSignPosition = NumSignPosition.NONE
    spec: Optional[NegativeSignSpec] = None
    spec_index: Optional[int] = None


class NegativeSignCollection:
    """Ordered negative sign specs; order is match priority."""

    __slots__ = ("_specs",)

    def __init__(self, specs: Iterable[NegativeSignSpec] = ()) -> None:
        self._specs: List[NegativeSignSpec] = list(specs)

    @classmethod
    def united_states(cls) -> "NegativeSignCollection":
        return cls(
            [
                NegativeSignSpec.leading_sign("-"),
                NegativeSignSpec.enclosing_sign("(", ")"),
            ]
        )

    def add_leading(self, symbol: str) -> "NegativeSignCollection":
        self._specs.append(NegativeSignSpec.leading_sign(symbol))
        return self

    def add_trailing(self, symbol: str) -> "NegativeSignCollection":
        self._specs.append(NegativeSignSpec.trailing_sign(symbol))
        return self

    def add_enclosing(self, opening: str, closing: str) -> "NegativeSignCollection":
        self._specs.append(NegativeSignSpec.enclosing_sign(opening, closing))
        return self

    @property
    def specs(self) -> Tuple[NegativeSignSpec, ...]:
        return tuple(self._specs)

    @property
    def is_nop(self) -> bool:
        return not self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[NegativeSignSpec]:
        return iter(tuple(self._specs))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NegativeSignCollection):
            return NotImplemented
        return self._specs == other._specs

    def __repr__(self) -> str:
        return f"NegativeSignCollection({self._specs!r})"

    def validate(self, *, context: Context = None) -> None:
        for position, spec in enumerate(self._specs):
            label = f"NegativeSignCollection[{position}]"
            if not isinstance(spec, NegativeSignSpec):
                raise InvalidInputError(
                    f"expected NegativeSignSpec, got {type(spec).__name__}",
                    context=extend_context(context, label),
                )
            spec.validate(context=extend_context(context, label))

    def new_search(self) -> "NegativeSignSearch":
        return NegativeSignSearch(self._specs)


class NegativeSignSearch:
    """Sign search state owned by a single scan."""

    def __init__(self, specs: Iterable[NegativeSignSpec]) -> None:
        self._specs: Tuple[NegativeSignSpec, ...] = tuple(specs)
        self._opening_found_at: List[Optional[int]] = [None] * len(self._specs)

    def opening_found(self, spec_index: int) -> bool:
        return self._opening_found_at[spec_index] is not None

    def search(
        self,
        buffer: RuneBuffer,
        index: int,
        *,
        found_first_digit: bool,
        limit: Optional[int] = None,
    ) -> NegativeSignMatch:
        """Try each spec at ``index`` and report the first completed sign."""

        for spec_index, spec in enumerate(self._specs):
            match = self._search_spec(spec_index, spec, buffer, index, found_first_digit, limit)
            if match.found:
                return match
        return NegativeSignMatch()

    def _search_spec(
        self,
        spec_index: int,
        spec: NegativeSignSpec,
        buffer: RuneBuffer,
        index: int,
        found_first_digit: bool,
        limit: Optional[int],
    ) -> NegativeSignMatch:
        if spec.position is NumSignPosition.BEFORE:
            if found_first_digit or not buffer.matches_at(index, spec.leading, limit=limit):
                return NegativeSignMatch()
            return self._match(spec_index, spec, index, spec.leading)

        if spec.position is NumSignPosition.AFTER:
            if not found_first_digit or not buffer.matches_at(index, spec.trailing, limit=limit):
                return NegativeSignMatch()
            return self._match(spec_index, spec, index, spec.trailing)

        if not found_first_digit:
            if not self.opening_found(spec_index) and buffer.matches_at(index, spec.leading, limit=limit):
                self._opening_found_at[spec_index] = index
            return NegativeSignMatch()

        if self.opening_found(spec_index) and buffer.matches_at(index, spec.trailing, limit=limit):
            return self._match(spec_index, spec, index, spec.trailing)
        return NegativeSignMatch()

    @staticmethod
    def _match(spec_index: int, spec: NegativeSignSpec, index: int, literal: str) -> NegativeSignMatch:
        return NegativeSignMatch(
            found=True,
            start_index=index,
            end_index=index + len(literal),
            position=spec.position,
            spec=spec,
            spec_index=spec_index,
        )
