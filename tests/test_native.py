import pytest

from numstrkit.exceptions import InvalidInputError, NativeNumStrError, NoDigitsFoundError
from numstrkit.parsing import (
    NumSignValue,
    NumValueType,
    dirty_to_native_num_str,
    native_num_str_stats,
    parse_native_num_str,
    rationalize_native_num_str,
    validate_native_num_str,
)


@pytest.mark.parametrize("text", ["0", "-1234.5678", ".5", "12.", "1.2.3", "-"])
def test_validate_accepts(text: str) -> None:
    validate_native_num_str(text)


@pytest.mark.parametrize(
    "text, index, char",
    [
        ("12-", 2, "-"),
        ("1,234", 1, ","),
        (" 12", 0, " "),
        ("+5", 0, "+"),
        ("--5", 1, "-"),
    ],
)
def test_validate_reports_offending_character(text: str, index: int, char: str) -> None:
    with pytest.raises(NativeNumStrError) as excinfo:
        validate_native_num_str(text)

    assert excinfo.value.index == index
    assert excinfo.value.char == char


def test_validate_rejects_empty() -> None:
    with pytest.raises(NativeNumStrError):
        validate_native_num_str("")


def test_stats() -> None:
    stats = native_num_str_stats("-00123.4500")

    assert stats.num_integer_digits == 5
    assert stats.num_significant_integer_digits == 3
    assert stats.num_fractional_digits == 4
    assert stats.num_significant_fractional_digits == 2
    assert stats.value_type is NumValueType.FLOATING_POINT
    assert stats.number_sign is NumSignValue.NEGATIVE
    assert not stats.is_zero_value


def test_stats_without_digits() -> None:
    with pytest.raises(NoDigitsFoundError):
        native_num_str_stats("-.")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-00123.4500", "-123.45"),
        ("0012", "12"),
        ("12.000", "12"),
        ("000.000", "0"),
        ("-0", "0"),
        ("-0.0500", "-0.05"),
        ("123.45", "123.45"),
        ("7", "7"),
    ],
)
def test_rationalize(text: str, expected: str) -> None:
    rationalized, stats = rationalize_native_num_str(text)

    assert rationalized == expected
    assert stats == native_num_str_stats(expected)


@pytest.mark.parametrize("text", ["-00123.4500", "0.000", "42", "-7.25", "0"])
def test_rationalize_is_idempotent(text: str) -> None:
    once, _ = rationalize_native_num_str(text)
    twice, _ = rationalize_native_num_str(once)

    assert twice == once


def test_rationalize_zero_stats() -> None:
    _, stats = rationalize_native_num_str("-000.000")

    assert stats.is_zero_value
    assert stats.number_sign is NumSignValue.ZERO
    assert stats.value_type is NumValueType.INTEGER


def test_parse_native_builds_kernel() -> None:
    kernel = parse_native_num_str("-0012.50")

    assert kernel.integer_digits == "0012"
    assert kernel.fractional_digits == "50"
    assert kernel.number_sign is NumSignValue.NEGATIVE
    assert kernel.to_native_str() == "-0012.50"


def test_parse_native_round_trip() -> None:
    kernel = parse_native_num_str("-45.5")

    assert parse_native_num_str(kernel.to_native_str()) == kernel


@pytest.mark.parametrize(
    "text, separator, expected",
    [
        ("$1,234.50", ".", "1234.50"),
        ("($1,234.50)", ".", "-1234.50"),
        ("1.234,50 €", ",", "1234.50"),
        ("USD -12", ".", "-12"),
        ("12-", ".", "-12"),
        ("(12", ".", "12"),
        ("1.2.3", ".", "1.23"),
    ],
)
def test_dirty_to_native(text: str, separator: str, expected: str) -> None:
    assert dirty_to_native_num_str(text, separator) == expected


def test_dirty_to_native_without_digits() -> None:
    with pytest.raises(NoDigitsFoundError):
        dirty_to_native_num_str("n/a")


def test_dirty_to_native_rejects_empty() -> None:
    with pytest.raises(InvalidInputError):
        dirty_to_native_num_str("")
