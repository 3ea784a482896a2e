"""Parser for pure number strings.

A pure number string holds exactly one number: digits, at most one decimal
separator and a ``'-'`` minus sign placed either before the digits (leading)
or after them (trailing). Unlike the full engine there are no terminators and
no alternative sign conventions to try.
"""
from __future__ import annotations

from typing import Union

from ..exceptions import Context, InvalidInputError, NoDigitsFoundError, extend_context
from .kernel import NumberStrKernel
from .matchers.decimal import DecimalSeparatorSpec
from .runes import RuneBuffer, is_ascii_digit

__all__ = ["parse_pure_num_str"]


def parse_pure_num_str(
    pure_num_str: Union[str, RuneBuffer],
    decimal_separator: Union[DecimalSeparatorSpec, str] = ".",
    *,
    leading_minus_sign: bool = True,
    context: Context = None,
) -> NumberStrKernel:
    """Parse ``pure_num_str`` into a kernel.

    A ``'-'`` in the wrong place for the configured convention is ignored,
    not rejected: with ``leading_minus_sign`` it only counts before the first
    digit, otherwise only after one. Digits after a recorded sign are kept.
    A no-op separator disables decimal detection.
    """

    chain = extend_context(context, "parse_pure_num_str")

    if isinstance(decimal_separator, str):
        decimal_separator = DecimalSeparatorSpec(decimal_separator)
    if not isinstance(decimal_separator, DecimalSeparatorSpec):
        raise InvalidInputError(
            f"decimal_separator must be a DecimalSeparatorSpec or str, got {type(decimal_separator).__name__}",
            context=chain,
        )

    buffer = pure_num_str if isinstance(pure_num_str, RuneBuffer) else RuneBuffer(pure_num_str)
    if buffer.is_empty():
        raise InvalidInputError("pure number string is empty", context=chain)
    buffer.validate(name="pure_num_str", context=chain)

    kernel = NumberStrKernel()
    found_minus = False
    found_digit = False
    found_separator = False
    separator = decimal_separator.symbol
    check_decimal = not decimal_separator.is_nop

    index = 0
    while index < len(buffer):
        char = buffer[index]

        if char == "-":
            if leading_minus_sign and not found_digit:
                found_minus = True
            elif not leading_minus_sign and found_digit:
                found_minus = True
            index += 1
            continue

        if check_decimal and not found_separator and buffer.matches_at(index, separator):
            found_separator = True
            index += len(separator)
            continue

        if is_ascii_digit(char):
            found_digit = True
            if found_separator:
                kernel.add_fractional_digit(char, context=chain)
            else:
                kernel.add_integer_digit(char, context=chain)

        index += 1

    if not found_digit:
        raise NoDigitsFoundError(f"{buffer.text!r} contains no numeric digits", context=chain)

    kernel.rationalize()
    kernel.finalize(negative=found_minus)
    return kernel
