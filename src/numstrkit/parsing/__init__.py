"""Number string parsing: the scan engine, its matchers and helpers."""

from .engine import UNBOUNDED, ParseResult, extract_numeric_rune_sequence
from .enums import NumSignPosition, NumSignValue, NumValueType, SearchTermination
from .kernel import NumberStrKernel
from .matchers import (
    DecimalSeparatorMatch,
    DecimalSeparatorSpec,
    NegativeSignCollection,
    NegativeSignMatch,
    NegativeSignSearch,
    NegativeSignSpec,
    TerminatorMatch,
    TerminatorSet,
)
from .native import (
    NativeNumStrStats,
    dirty_to_native_num_str,
    native_num_str_stats,
    parse_native_num_str,
    rationalize_native_num_str,
    validate_native_num_str,
)
from .presets import (
    parse_custom_number_str,
    parse_french_number_str,
    parse_german_number_str,
    parse_number_str,
    parse_us_number_str,
)
from .pure import parse_pure_num_str
from .runes import RuneBuffer, is_ascii_digit

__all__ = [
    "UNBOUNDED",
    "DecimalSeparatorMatch",
    "DecimalSeparatorSpec",
    "NativeNumStrStats",
    "NegativeSignCollection",
    "NegativeSignMatch",
    "NegativeSignSearch",
    "NegativeSignSpec",
    "NumSignPosition",
    "NumSignValue",
    "NumValueType",
    "NumberStrKernel",
    "ParseResult",
    "RuneBuffer",
    "SearchTermination",
    "TerminatorMatch",
    "TerminatorSet",
    "dirty_to_native_num_str",
    "extract_numeric_rune_sequence",
    "is_ascii_digit",
    "native_num_str_stats",
    "parse_custom_number_str",
    "parse_french_number_str",
    "parse_german_number_str",
    "parse_native_num_str",
    "parse_number_str",
    "parse_pure_num_str",
    "parse_us_number_str",
    "rationalize_native_num_str",
    "validate_native_num_str",
]
