"""Digit accumulator holding the integer and fractional runs of a number."""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import List, Tuple, Union

from ..exceptions import Context, InvalidInputError, extend_context
from .enums import NumSignValue, NumValueType
from .runes import is_ascii_digit

__all__ = ["NumberStrKernel"]

NumericValue = Union[int, float, Decimal, str]


class NumberStrKernel:
    """Integer digits, fractional digits and a sign.

    Digits are stored most significant first. The value type is always derived
    from the stored digits; the sign is resolved by :meth:`finalize` (or
    :meth:`set_number_sign`) and is forced to ``ZERO`` for all-zero digits and
    to ``NONE`` when no digits are stored.
    """

    __slots__ = ("_integer_digits", "_fractional_digits", "_number_sign")

    def __init__(self) -> None:
        self._integer_digits: List[str] = []
        self._fractional_digits: List[str] = []
        self._number_sign = NumSignValue.NONE

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_string_digits(
        cls,
        integer_digits: str,
        fractional_digits: str = "",
        *,
        negative: bool = False,
        context: Context = None,
    ) -> "NumberStrKernel":
        chain = extend_context(context, "NumberStrKernel.from_string_digits")
        kernel = cls()
        for char in integer_digits:
            kernel.add_integer_digit(char, context=chain)
        for char in fractional_digits:
            kernel.add_fractional_digit(char, context=chain)
        kernel.rationalize()
        kernel.finalize(negative=negative)
        return kernel

    @classmethod
    def from_numeric_value(cls, value: NumericValue, *, context: Context = None) -> "NumberStrKernel":
        """Build a kernel from an ``int``, ``float``, ``Decimal`` or native string."""

        chain = extend_context(context, "NumberStrKernel.from_numeric_value")
        if isinstance(value, bool):
            raise InvalidInputError("booleans are not numeric values", context=chain)
        if isinstance(value, int):
            text = str(value)
        elif isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidInputError(f"cannot represent {value!r}", context=chain)
            text = format(Decimal(repr(value)), "f")
        elif isinstance(value, Decimal):
            if not value.is_finite():
                raise InvalidInputError(f"cannot represent {value!r}", context=chain)
            text = format(value, "f")
        elif isinstance(value, str):
            try:
                parsed = Decimal(value.strip())
            except InvalidOperation as exc:
                raise InvalidInputError(f"{value!r} is not a numeric string", context=chain) from exc
            if not parsed.is_finite():
                raise InvalidInputError(f"cannot represent {value!r}", context=chain)
            text = format(parsed, "f")
        else:
            raise InvalidInputError(f"unsupported numeric type {type(value).__name__}", context=chain)

        negative = text.startswith("-")
        integer_part, _, fractional_part = text.lstrip("-").partition(".")
        return cls.from_string_digits(integer_part, fractional_part, negative=negative, context=chain)

    # ------------------------------------------------------------------
    # Accumulation
    # ------------------------------------------------------------------

    def add_integer_digit(self, char: str, *, context: Context = None) -> None:
        self._check_digit(char, "add_integer_digit", context)
        self._integer_digits.append(char)

    def add_fractional_digit(self, char: str, *, context: Context = None) -> None:
        self._check_digit(char, "add_fractional_digit", context)
        self._fractional_digits.append(char)

    @staticmethod
    def _check_digit(char: str, operation: str, context: Context) -> None:
        if not isinstance(char, str) or len(char) != 1 or not is_ascii_digit(char):
            raise InvalidInputError(
                f"{char!r} is not a numeric digit (0-9)",
                context=extend_context(context, f"NumberStrKernel.{operation}"),
            )

    def rationalize(self) -> None:
        """Insert a leading ``'0'`` when fractional digits have no integer part."""

        if self._fractional_digits and not self._integer_digits:
            self._integer_digits.append("0")

    def finalize(self, *, negative: bool = False) -> NumSignValue:
        """Resolve the sign from the stored digits and return it."""

        if not self.has_digits():
            self._number_sign = NumSignValue.NONE
        elif not self.is_non_zero():
            self._number_sign = NumSignValue.ZERO
        elif negative:
            self._number_sign = NumSignValue.NEGATIVE
        else:
            self._number_sign = NumSignValue.POSITIVE
        return self._number_sign

    def set_number_sign(self, sign: Union[NumSignValue, str, int], *, context: Context = None) -> None:
        """Set the sign; only ``POSITIVE``/``NEGATIVE`` (or 1/-1) carry meaning for non-zero values."""

        chain = extend_context(context, "NumberStrKernel.set_number_sign")
        if isinstance(sign, int) and not isinstance(sign, bool):
            mapping = {-1: NumSignValue.NEGATIVE, 0: NumSignValue.ZERO, 1: NumSignValue.POSITIVE}
            if sign not in mapping:
                raise InvalidInputError(f"integer sign must be -1, 0 or 1, got {sign}", context=chain)
            resolved = mapping[sign]
        else:
            try:
                resolved = NumSignValue(sign)
            except ValueError as exc:
                raise InvalidInputError(f"unknown sign {sign!r}", context=chain) from exc
        self.finalize(negative=resolved is NumSignValue.NEGATIVE)

    def empty(self) -> None:
        self._integer_digits.clear()
        self._fractional_digits.clear()
        self._number_sign = NumSignValue.NONE

    def set_zero_if_empty(self) -> None:
        if not self.has_digits():
            self._integer_digits.append("0")
            self._number_sign = NumSignValue.ZERO

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def integer_digits(self) -> str:
        return "".join(self._integer_digits)

    @property
    def fractional_digits(self) -> str:
        return "".join(self._fractional_digits)

    @property
    def integer_digit_count(self) -> int:
        return len(self._integer_digits)

    @property
    def fractional_digit_count(self) -> int:
        return len(self._fractional_digits)

    def digit_counts(self) -> Tuple[int, int]:
        return len(self._integer_digits), len(self._fractional_digits)

    @property
    def number_sign(self) -> NumSignValue:
        return self._number_sign

    @property
    def value_type(self) -> NumValueType:
        if self._fractional_digits:
            return NumValueType.FLOATING_POINT
        if self._integer_digits:
            return NumValueType.INTEGER
        return NumValueType.NONE

    def has_digits(self) -> bool:
        return bool(self._integer_digits or self._fractional_digits)

    def is_non_zero(self) -> bool:
        return any(char != "0" for char in self._integer_digits) or any(
            char != "0" for char in self._fractional_digits
        )

    def is_zero_value(self) -> bool:
        return not self.is_non_zero()

    def is_floating_point(self) -> bool:
        return self.value_type is NumValueType.FLOATING_POINT

    def integer_leading_zeros_count(self) -> int:
        count = 0
        for char in self._integer_digits:
            if char != "0":
                break
            count += 1
        return count

    # ------------------------------------------------------------------
    # Rendering and conversion
    # ------------------------------------------------------------------

    def to_native_str(self) -> str:
        """Render as a native number string, e.g. ``-123.45``; empty kernels render ``""``."""

        if not self.has_digits():
            return ""
        prefix = "-" if self._number_sign is NumSignValue.NEGATIVE else ""
        integer = self.integer_digits or "0"
        if self._fractional_digits:
            return f"{prefix}{integer}.{self.fractional_digits}"
        return f"{prefix}{integer}"

    def __str__(self) -> str:
        return self.to_native_str()

    def __repr__(self) -> str:
        return (
            f"NumberStrKernel(integer={self.integer_digits!r}, fractional={self.fractional_digits!r}, "
            f"sign={self._number_sign.value})"
        )

    def to_decimal(self) -> Decimal:
        if not self.has_digits():
            return Decimal(0)
        return Decimal(self.to_native_str())

    def to_int(self) -> int:
        """Integer part with sign applied; fractional digits are truncated."""

        if not self._integer_digits:
            return 0
        value = int(self.integer_digits)
        return -value if self._number_sign is NumSignValue.NEGATIVE else value

    def to_float(self) -> float:
        return float(self.to_decimal())

    # ------------------------------------------------------------------
    # Copies and comparison
    # ------------------------------------------------------------------

    def copy(self) -> "NumberStrKernel":
        clone = NumberStrKernel()
        clone._integer_digits = list(self._integer_digits)
        clone._fractional_digits = list(self._fractional_digits)
        clone._number_sign = self._number_sign
        return clone

    def equal_digits(self, other: "NumberStrKernel") -> bool:
        return (
            self._integer_digits == other._integer_digits
            and self._fractional_digits == other._fractional_digits
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberStrKernel):
            return NotImplemented
        return self.equal_digits(other) and self._number_sign == other._number_sign

    __hash__ = None  # type: ignore[assignment]

    def as_dict(self) -> dict:
        return {
            "integer_digits": self.integer_digits,
            "fractional_digits": self.fractional_digits,
            "number_sign": self._number_sign.value,
            "value_type": self.value_type.value,
            "native": self.to_native_str(),
        }

