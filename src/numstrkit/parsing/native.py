"""Native number strings: validation, statistics and rationalisation.

A native number string is what ``Decimal()`` or ``float()`` would accept
without help: ASCII digits, an optional leading ``'-'`` and ``'.'`` as the
decimal point, e.g. ``"-1234.5678"``. No grouping characters.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from ..exceptions import Context, InvalidInputError, NativeNumStrError, NoDigitsFoundError, extend_context
from .enums import NumSignValue, NumValueType
from .kernel import NumberStrKernel
from .matchers.decimal import DecimalSeparatorSpec
from .runes import RuneBuffer, is_ascii_digit

__all__ = [
    "NativeNumStrStats",
    "dirty_to_native_num_str",
    "native_num_str_stats",
    "parse_native_num_str",
    "rationalize_native_num_str",
    "validate_native_num_str",
]


@dataclass(frozen=True)
class NativeNumStrStats:
    """Digit counts and sign of a native number string."""

    num_integer_digits: int
    num_significant_integer_digits: int
    num_fractional_digits: int
    num_significant_fractional_digits: int
    value_type: NumValueType
    number_sign: NumSignValue
    is_zero_value: bool


def validate_native_num_str(native_num_str: str, *, context: Context = None) -> None:
    """Raise :class:`NativeNumStrError` unless every character is allowed.

    Repeated ``'.'`` characters pass; only their position relative to the
    digits is interpreted later, by :func:`native_num_str_stats`.
    """

    chain = extend_context(context, "validate_native_num_str")
    if not isinstance(native_num_str, str):
        raise NativeNumStrError(
            f"native number string must be a str, got {type(native_num_str).__name__}",
            context=chain,
        )
    if not native_num_str:
        raise NativeNumStrError("native number string is empty", context=chain)

    for index, char in enumerate(native_num_str):
        if is_ascii_digit(char) or char == ".":
            continue
        if char == "-" and index == 0:
            continue
        if char == "-":
            message = f"minus sign at index {index} is only allowed at index 0 in {native_num_str!r}"
        else:
            message = f"invalid character {char!r} at index {index} in {native_num_str!r}"
        raise NativeNumStrError(message, index=index, char=char, context=chain)


def _split_native(native_num_str: str) -> Tuple[bool, str, str]:
    negative = native_num_str.startswith("-")
    body = native_num_str[1:] if negative else native_num_str
    integer_part, _, fractional_part = body.partition(".")
    return negative, integer_part, fractional_part.replace(".", "")


def _stats(negative: bool, integer_part: str, fractional_part: str) -> NativeNumStrStats:
    significant_integer = len(integer_part.lstrip("0"))
    significant_fractional = len(fractional_part.rstrip("0"))
    is_zero = significant_integer == 0 and significant_fractional == 0
    if fractional_part:
        value_type = NumValueType.FLOATING_POINT
    elif integer_part:
        value_type = NumValueType.INTEGER
    else:
        value_type = NumValueType.NONE

    if is_zero:
        sign = NumSignValue.ZERO
    elif negative:
        sign = NumSignValue.NEGATIVE
    else:
        sign = NumSignValue.POSITIVE

    return NativeNumStrStats(
        num_integer_digits=len(integer_part),
        num_significant_integer_digits=significant_integer,
        num_fractional_digits=len(fractional_part),
        num_significant_fractional_digits=significant_fractional,
        value_type=value_type,
        number_sign=sign,
        is_zero_value=is_zero,
    )


def native_num_str_stats(native_num_str: str, *, context: Context = None) -> NativeNumStrStats:
    """Validate ``native_num_str`` and count its digits."""

    chain = extend_context(context, "native_num_str_stats")
    validate_native_num_str(native_num_str, context=chain)
    negative, integer_part, fractional_part = _split_native(native_num_str)
    if not integer_part and not fractional_part:
        raise NoDigitsFoundError(f"{native_num_str!r} contains no numeric digits", context=chain)
    return _stats(negative, integer_part, fractional_part)


def rationalize_native_num_str(
    native_num_str: str,
    *,
    context: Context = None,
) -> Tuple[str, NativeNumStrStats]:
    """Strip zero padding: ``"-00123.4500"`` becomes ``"-123.45"``.

    Strings without leading integer zeros or trailing fractional zeros are
    returned unchanged.
    """

    chain = extend_context(context, "rationalize_native_num_str")
    stats = native_num_str_stats(native_num_str, context=chain)

    needs_rewrite = (
        stats.num_integer_digits != stats.num_significant_integer_digits
        or stats.num_fractional_digits != stats.num_significant_fractional_digits
    )
    if not needs_rewrite:
        return native_num_str, stats

    _, integer_part, fractional_part = _split_native(native_num_str)
    integer_part = integer_part.lstrip("0") or "0"
    fractional_part = fractional_part.rstrip("0")

    prefix = "-" if stats.number_sign is NumSignValue.NEGATIVE else ""
    rationalized = f"{prefix}{integer_part}"
    if fractional_part:
        rationalized = f"{rationalized}.{fractional_part}"

    return rationalized, native_num_str_stats(rationalized, context=chain)


def parse_native_num_str(native_num_str: str, *, context: Context = None) -> NumberStrKernel:
    """Build a kernel from a native number string such as ``"-0012.50"``."""

    chain = extend_context(context, "parse_native_num_str")
    stats = native_num_str_stats(native_num_str, context=chain)
    _, integer_part, fractional_part = _split_native(native_num_str)
    return NumberStrKernel.from_string_digits(
        integer_part,
        fractional_part,
        negative=stats.number_sign is NumSignValue.NEGATIVE,
        context=chain,
    )


def dirty_to_native_num_str(
    dirty_num_str: Union[str, RuneBuffer],
    decimal_separator: Union[DecimalSeparatorSpec, str] = ".",
    *,
    context: Context = None,
) -> str:
    """Reduce a formatted number like ``"($1,234.50)"`` to ``"-1234.50"``.

    Digits are kept, the first decimal separator becomes ``'.'`` and a value
    is negative when it carries a ``'-'`` anywhere, or a ``'('`` before its
    first digit closed by a ``')'`` after it. Everything else is dropped.
    """

    chain = extend_context(context, "dirty_to_native_num_str")

    if isinstance(decimal_separator, str):
        decimal_separator = DecimalSeparatorSpec(decimal_separator)
    if not isinstance(decimal_separator, DecimalSeparatorSpec):
        raise InvalidInputError(
            f"decimal_separator must be a DecimalSeparatorSpec or str, got {type(decimal_separator).__name__}",
            context=chain,
        )

    buffer = dirty_num_str if isinstance(dirty_num_str, RuneBuffer) else RuneBuffer(dirty_num_str)
    if buffer.is_empty():
        raise InvalidInputError("dirty number string is empty", context=chain)
    buffer.validate(name="dirty_num_str", context=chain)

    digits = []
    negative = False
    opening_paren = False
    found_digit = False
    found_separator = False

    index = 0
    while index < len(buffer):
        char = buffer[index]

        if is_ascii_digit(char):
            digits.append(char)
            found_digit = True
            index += 1
            continue

        if not negative:
            if char == "-":
                negative = True
                index += 1
                continue
            if char == "(" and not found_digit:
                opening_paren = True
            elif char == ")" and found_digit and opening_paren:
                negative = True

        if (
            not found_separator
            and not decimal_separator.is_nop
            and buffer.matches_at(index, decimal_separator.symbol)
        ):
            digits.append(".")
            found_separator = True
            index += len(decimal_separator.symbol)
            continue

        index += 1

    if not found_digit:
        raise NoDigitsFoundError(f"{buffer.text!r} contains no numeric digits", context=chain)

    native = "".join(digits)
    return f"-{native}" if negative else native
