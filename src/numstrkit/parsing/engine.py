"""Single-pass extraction of a numeric value from a rune buffer.

:func:`extract_numeric_rune_sequence` walks ``buffer[start:end]`` once. Each
position is classified, in priority order, as

1. an ASCII digit (appended to the integer or fractional run),
2. a parsing terminator (only once a digit was seen; ends the scan),
3. a negative sign (first match only; trailing and enclosing signs end the scan),
4. the decimal separator (first match only),

and anything else is skipped. Skipping unknown characters is what lets
``"$ 12,345.67"`` parse as ``12345.67`` with no grouping configuration.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union

from ..exceptions import Context, InvalidInputError, extend_context
from ..utils.logging import log_event
from .enums import NumSignPosition, NumSignValue, NumValueType, SearchTermination
from .kernel import NumberStrKernel
from .matchers.decimal import DecimalSeparatorMatch, DecimalSeparatorSpec
from .matchers.negative import NegativeSignCollection, NegativeSignMatch
from .matchers.terminators import TerminatorMatch, TerminatorSet
from .runes import RuneBuffer, is_ascii_digit

__all__ = ["ParseResult", "UNBOUNDED", "extract_numeric_rune_sequence"]

LOGGER = logging.getLogger(__name__)

UNBOUNDED: Optional[int] = None

_OPERATION = "extract_numeric_rune_sequence"
_SIGN_ENDS_SCAN = (NumSignPosition.AFTER, NumSignPosition.BEFORE_AND_AFTER)


@dataclass(frozen=True)
class ParseResult:
    """Everything learned while scanning a buffer for a number."""

    target: RuneBuffer
    start_index: int
    search_length: Optional[int]
    end_index: int
    termination: SearchTermination
    next_search_index: Optional[int] = None
    last_search_index: Optional[int] = None
    found_numeric_digits: bool = False
    found_non_zero_value: bool = False
    found_decimal_separator: bool = False
    found_integer_digits: bool = False
    found_fractional_digits: bool = False
    number_sign: NumSignValue = NumSignValue.NONE
    value_type: NumValueType = NumValueType.NONE
    integer_digits: str = ""
    fractional_digits: str = ""
    remainder: RuneBuffer = field(default_factory=RuneBuffer)
    negative_sign_match: NegativeSignMatch = field(default_factory=NegativeSignMatch)
    decimal_separator_match: DecimalSeparatorMatch = field(default_factory=DecimalSeparatorMatch)
    terminator_match: TerminatorMatch = field(default_factory=TerminatorMatch)
    context: Tuple[str, ...] = ()

    @property
    def succeeded(self) -> bool:
        return self.found_numeric_digits

    def as_dict(self) -> Dict[str, Any]:
        """JSON-serialisable view, used by the CLI."""

        return {
            "target": self.target.text,
            "start_index": self.start_index,
            "search_length": self.search_length,
            "end_index": self.end_index,
            "termination": self.termination.value,
            "next_search_index": self.next_search_index,
            "last_search_index": self.last_search_index,
            "found_numeric_digits": self.found_numeric_digits,
            "found_non_zero_value": self.found_non_zero_value,
            "found_decimal_separator": self.found_decimal_separator,
            "found_integer_digits": self.found_integer_digits,
            "found_fractional_digits": self.found_fractional_digits,
            "number_sign": self.number_sign.value,
            "value_type": self.value_type.value,
            "integer_digits": self.integer_digits,
            "fractional_digits": self.fractional_digits,
            "remainder": self.remainder.text,
            "negative_sign": {
                "found": self.negative_sign_match.found,
                "start_index": self.negative_sign_match.start_index,
                "end_index": self.negative_sign_match.end_index,
                "position": self.negative_sign_match.position.value,
            },
            "decimal_separator": {
                "found": self.decimal_separator_match.found,
                "start_index": self.decimal_separator_match.start_index,
                "end_index": self.decimal_separator_match.end_index,
            },
            "terminator": {
                "found": self.terminator_match.found,
                "start_index": self.terminator_match.start_index,
                "end_index": self.terminator_match.end_index,
                "pattern": self.terminator_match.pattern,
            },
        }


def _coerce_buffer(target: Union[RuneBuffer, str], chain: Tuple[str, ...]) -> RuneBuffer:
    if isinstance(target, RuneBuffer):
        return target
    if isinstance(target, str):
        return RuneBuffer(target)
    raise InvalidInputError(
        f"target must be a RuneBuffer or str, got {type(target).__name__}",
        context=chain,
    )


def _resolve_end_index(
    length: int,
    start_index: int,
    search_length: Optional[int],
    chain: Tuple[str, ...],
) -> int:
    if isinstance(start_index, bool) or not isinstance(start_index, int):
        raise InvalidInputError(f"start_index must be an int, got {start_index!r}", context=chain)
    if start_index < 0:
        raise InvalidInputError(f"start_index has a value less than zero: {start_index}", context=chain)
    if start_index >= length:
        raise InvalidInputError(
            f"start_index {start_index} exceeds the last index of target ({length - 1})",
            context=chain,
        )
    if search_length is None:
        return length
    if isinstance(search_length, bool) or not isinstance(search_length, int):
        raise InvalidInputError(f"search_length must be an int or None, got {search_length!r}", context=chain)
    if search_length == 0:
        raise InvalidInputError("search_length is zero; nothing can be searched", context=chain)
    if search_length < 0:
        raise InvalidInputError(
            f"search_length must be positive or None for an unbounded search, got {search_length}",
            context=chain,
        )
    return min(length, start_index + search_length)


def extract_numeric_rune_sequence(
    target: Union[RuneBuffer, str],
    *,
    start_index: int = 0,
    search_length: Optional[int] = UNBOUNDED,
    negative_signs: Optional[NegativeSignCollection] = None,
    decimal_separator: Optional[DecimalSeparatorSpec] = None,
    terminators: Optional[TerminatorSet] = None,
    request_remainder: bool = False,
    context: Context = None,
) -> Tuple[ParseResult, NumberStrKernel]:
    """Scan ``target`` for one number and return ``(result, kernel)``.

    ``None`` for ``negative_signs``, ``decimal_separator`` or ``terminators``
    disables the corresponding sub-search. Invalid parameters raise
    :class:`~numstrkit.exceptions.InvalidInputError` before anything is
    scanned; finding no digits is reported through
    :attr:`ParseResult.found_numeric_digits`, not raised.
    """

    chain = extend_context(context, _OPERATION)

    buffer = _coerce_buffer(target, chain)
    if buffer.is_empty():
        raise InvalidInputError("target has a length of zero", context=chain)
    buffer.validate(name="target", context=chain)
    length = len(buffer)
    end_index = _resolve_end_index(length, start_index, search_length, chain)

    if negative_signs is None:
        negative_signs = NegativeSignCollection()
    elif not isinstance(negative_signs, NegativeSignCollection):
        raise InvalidInputError(
            f"negative_signs must be a NegativeSignCollection, got {type(negative_signs).__name__}",
            context=chain,
        )
    negative_signs.validate(context=extend_context(chain, "negative_signs"))

    if decimal_separator is None:
        decimal_separator = DecimalSeparatorSpec.nop()
    elif not isinstance(decimal_separator, DecimalSeparatorSpec):
        raise InvalidInputError(
            f"decimal_separator must be a DecimalSeparatorSpec, got {type(decimal_separator).__name__}",
            context=chain,
        )
    decimal_separator.validate(context=extend_context(chain, "decimal_separator"))

    if terminators is None:
        terminators = TerminatorSet.nop()
    elif not isinstance(terminators, TerminatorSet):
        raise InvalidInputError(
            f"terminators must be a TerminatorSet, got {type(terminators).__name__}",
            context=chain,
        )
    terminators.validate(context=extend_context(chain, "terminators"))

    kernel = NumberStrKernel()
    sign_search = negative_signs.new_search()
    check_signs = not negative_signs.is_nop
    check_decimal = not decimal_separator.is_nop
    check_terminators = not terminators.is_nop

    found_first_digit = False
    found_non_zero = False
    found_integer_digits = False
    found_fractional_digits = False
    sign_match = NegativeSignMatch()
    decimal_match = DecimalSeparatorMatch()
    terminator_match = TerminatorMatch()
    termination: Optional[SearchTermination] = None

    index = start_index
    # One past the last character consumed by the scan.
    consumed_end = end_index

    while index < end_index:
        char = buffer[index]

        if is_ascii_digit(char):
            found_first_digit = True
            if char != "0":
                found_non_zero = True
            if decimal_match.found:
                kernel.add_fractional_digit(char, context=chain)
                found_fractional_digits = True
            else:
                kernel.add_integer_digit(char, context=chain)
                found_integer_digits = True
            index += 1
            continue

        if check_terminators and found_first_digit:
            candidate = terminators.search(buffer, index, limit=end_index)
            if candidate.found:
                terminator_match = candidate
                termination = SearchTermination.TERMINATOR_FOUND
                consumed_end = index
                break

        if check_signs and not sign_match.found:
            candidate_sign = sign_search.search(
                buffer,
                index,
                found_first_digit=found_first_digit,
                limit=end_index,
            )
            if candidate_sign.found:
                sign_match = candidate_sign
                index = candidate_sign.end_index
                if candidate_sign.position in _SIGN_ENDS_SCAN:
                    termination = SearchTermination.TRAILING_NEGATIVE_SIGN
                    consumed_end = index
                    break
                continue

        if check_decimal and not decimal_match.found:
            candidate_sep = decimal_separator.search(buffer, index, limit=end_index)
            if candidate_sep.found:
                if found_first_digit:
                    decimal_match = candidate_sep
                    index = candidate_sep.end_index
                    continue
                # A separator ahead of every digit only counts when a digit follows it.
                if buffer.is_digit_at(candidate_sep.end_index, limit=end_index):
                    decimal_match = candidate_sep
                    kernel.add_integer_digit("0", context=chain)
                    found_first_digit = True
                    found_integer_digits = True
                    index = candidate_sep.end_index
                    continue

        index += 1

    if termination is None:
        if end_index < length:
            termination = SearchTermination.SEARCH_LENGTH_LIMIT
        else:
            termination = SearchTermination.END_OF_TARGET

    next_search_index = consumed_end if consumed_end < length else None
    last_search_index = consumed_end - 1

    if found_first_digit:
        remainder = RuneBuffer()
        if request_remainder and next_search_index is not None:
            remainder = buffer.slice(next_search_index)
        kernel.rationalize()
        number_sign = kernel.finalize(negative=sign_match.found)
        result = ParseResult(
            target=buffer.copy(),
            start_index=start_index,
            search_length=search_length,
            end_index=end_index,
            termination=termination,
            next_search_index=next_search_index,
            last_search_index=last_search_index,
            found_numeric_digits=True,
            found_non_zero_value=found_non_zero,
            found_decimal_separator=decimal_match.found,
            found_integer_digits=found_integer_digits,
            found_fractional_digits=found_fractional_digits,
            number_sign=number_sign,
            value_type=kernel.value_type,
            integer_digits=kernel.integer_digits,
            fractional_digits=kernel.fractional_digits,
            remainder=remainder,
            negative_sign_match=sign_match,
            decimal_separator_match=decimal_match,
            terminator_match=terminator_match,
            context=chain,
        )
    else:
        kernel.empty()
        result = ParseResult(
            target=buffer.copy(),
            start_index=start_index,
            search_length=search_length,
            end_index=end_index,
            termination=termination,
            next_search_index=next_search_index,
            last_search_index=last_search_index,
            remainder=buffer.slice(start_index),
            negative_sign_match=NegativeSignMatch(),
            decimal_separator_match=decimal_match,
            terminator_match=terminator_match,
            context=chain,
        )

    if LOGGER.isEnabledFor(logging.DEBUG):
        log_event(
            LOGGER,
            "parse.completed",
            level=logging.DEBUG,
            start_index=start_index,
            next_search_index=next_search_index,
            termination=termination.value,
            found_numeric_digits=result.found_numeric_digits,
        )

    return result, kernel
