"""Locale presets wrapping :func:`extract_numeric_rune_sequence`.

Each preset fixes the decimal separator and negative sign conventions of a
locale; the scan window, terminators and remainder request stay with the
caller.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Tuple, Union

from ..exceptions import Context, extend_context
from .engine import UNBOUNDED, ParseResult, extract_numeric_rune_sequence
from .kernel import NumberStrKernel
from .matchers.decimal import DecimalSeparatorSpec
from .matchers.negative import NegativeSignCollection
from .matchers.terminators import TerminatorSet
from .runes import RuneBuffer

if TYPE_CHECKING:
    from ..config import ParseProfile

__all__ = [
    "parse_custom_number_str",
    "parse_french_number_str",
    "parse_german_number_str",
    "parse_number_str",
    "parse_us_number_str",
]

Target = Union[RuneBuffer, str]
Terminators = Union[TerminatorSet, Iterable[str], None]


def _terminator_set(terminators: Terminators) -> Optional[TerminatorSet]:
    if terminators is None or isinstance(terminators, TerminatorSet):
        return terminators
    return TerminatorSet(terminators)


def parse_us_number_str(
    target: Target,
    *,
    start_index: int = 0,
    search_length: Optional[int] = UNBOUNDED,
    terminators: Terminators = None,
    request_remainder: bool = False,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """``'.'`` decimal point, leading ``'-'`` or enclosing parentheses."""

    return extract_numeric_rune_sequence(
        target,
        start_index=start_index,
        search_length=search_length,
        negative_signs=NegativeSignCollection.united_states(),
        decimal_separator=DecimalSeparatorSpec.us(),
        terminators=_terminator_set(terminators),
        request_remainder=request_remainder,
        context=extend_context(context, "parse_us_number_str"),
    )


def parse_french_number_str(
    target: Target,
    *,
    start_index: int = 0,
    search_length: Optional[int] = UNBOUNDED,
    terminators: Terminators = None,
    request_remainder: bool = False,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """``','`` decimal comma and leading ``'-'``; ``"1 234,5"`` parses as 1234.5."""

    return extract_numeric_rune_sequence(
        target,
        start_index=start_index,
        search_length=search_length,
        negative_signs=NegativeSignCollection().add_leading("-"),
        decimal_separator=DecimalSeparatorSpec.france(),
        terminators=_terminator_set(terminators),
        request_remainder=request_remainder,
        context=extend_context(context, "parse_french_number_str"),
    )


def parse_german_number_str(
    target: Target,
    *,
    start_index: int = 0,
    search_length: Optional[int] = UNBOUNDED,
    terminators: Terminators = None,
    request_remainder: bool = False,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """``','`` decimal comma and a trailing ``'-'`` as in ``"1.234,5-"``."""

    return extract_numeric_rune_sequence(
        target,
        start_index=start_index,
        search_length=search_length,
        negative_signs=NegativeSignCollection().add_trailing("-"),
        decimal_separator=DecimalSeparatorSpec.european_union(),
        terminators=_terminator_set(terminators),
        request_remainder=request_remainder,
        context=extend_context(context, "parse_german_number_str"),
    )


def parse_custom_number_str(
    target: Target,
    *,
    decimal_separator: str = ".",
    leading_negative_signs: Sequence[str] = ("-",),
    trailing_negative_signs: Sequence[str] = (),
    enclosing_negative_signs: Sequence[Tuple[str, str]] = (),
    start_index: int = 0,
    search_length: Optional[int] = UNBOUNDED,
    terminators: Terminators = None,
    request_remainder: bool = False,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """Parse with arbitrary separator and sign literals.

    Leading signs are tried first, then trailing, then enclosing pairs.
    """

    negative_signs = NegativeSignCollection()
    for symbol in leading_negative_signs:
        negative_signs.add_leading(symbol)
    for symbol in trailing_negative_signs:
        negative_signs.add_trailing(symbol)
    for opening, closing in enclosing_negative_signs:
        negative_signs.add_enclosing(opening, closing)

    return extract_numeric_rune_sequence(
        target,
        start_index=start_index,
        search_length=search_length,
        negative_signs=negative_signs,
        decimal_separator=DecimalSeparatorSpec(decimal_separator),
        terminators=_terminator_set(terminators),
        request_remainder=request_remainder,
        context=extend_context(context, "parse_custom_number_str"),
    )


def parse_number_str(
    target: Target,
    profile: Optional["ParseProfile"] = None,
    *,
    start_index: int = 0,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """Parse with ``profile``, or with the configured default profile."""

    if profile is None:
        from ..config import get_settings

        profile = get_settings()

    return extract_numeric_rune_sequence(
        target,
        start_index=start_index,
        search_length=profile.max_search_length,
        negative_signs=profile.negative_signs(),
        decimal_separator=profile.decimal_separator_spec(),
        terminators=profile.terminator_set(),
        request_remainder=profile.request_remainder,
        context=extend_context(context, "parse_number_str"),
    )
