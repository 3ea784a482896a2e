import pytest

from numstrkit.config import ParseProfile, reset_settings
from numstrkit.exceptions import InvalidInputError
from numstrkit.parsing import (
    NumSignValue,
    SearchTermination,
    parse_custom_number_str,
    parse_french_number_str,
    parse_german_number_str,
    parse_number_str,
    parse_us_number_str,
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "NUMSTRKIT_CONFIG_FILE",
        "NUMSTRKIT_DECIMAL_SEPARATOR",
        "NUMSTRKIT_TERMINATORS",
        "NUMSTRKIT_MAX_SEARCH_LENGTH",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.mark.parametrize(
    "text, native",
    [
        ("-$1,234.56", "-1234.56"),
        ("($1,234.56)", "-1234.56"),
        ("Total: 99.90 USD", "99.90"),
        ("-0.00", "0.00"),
    ],
)
def test_us_preset(text: str, native: str) -> None:
    _, kernel = parse_us_number_str(text)

    assert kernel.to_native_str() == native


@pytest.mark.parametrize(
    "text, native",
    [
        ("1 234,5", "1234.5"),
        ("-3,25 €", "-3.25"),
        ("(3,25)", "3.25"),
    ],
)
def test_french_preset(text: str, native: str) -> None:
    _, kernel = parse_french_number_str(text)

    assert kernel.to_native_str() == native


@pytest.mark.parametrize(
    "text, native, sign",
    [
        ("1.234,5-", "-1234.5", NumSignValue.NEGATIVE),
        ("1.234,5", "1234.5", NumSignValue.POSITIVE),
        ("-5", "5", NumSignValue.POSITIVE),
    ],
)
def test_german_preset(text: str, native: str, sign: NumSignValue) -> None:
    _, kernel = parse_german_number_str(text)

    assert kernel.to_native_str() == native
    assert kernel.number_sign is sign


def test_custom_preset() -> None:
    result, kernel = parse_custom_number_str(
        "[1'250.75] rest",
        decimal_separator=".",
        leading_negative_signs=(),
        enclosing_negative_signs=[("[", "]")],
        request_remainder=True,
    )

    assert kernel.to_native_str() == "-1250.75"
    assert result.termination is SearchTermination.TRAILING_NEGATIVE_SIGN
    assert result.remainder == " rest"


def test_custom_preset_trailing_literal() -> None:
    _, kernel = parse_custom_number_str("75.00 DR", trailing_negative_signs=[" DR"])

    assert kernel.to_native_str() == "-75.00"


def test_presets_accept_plain_terminator_lists() -> None:
    result, kernel = parse_us_number_str("12; 13", terminators=[";"], request_remainder=True)

    assert kernel.to_int() == 12
    assert result.termination is SearchTermination.TERMINATOR_FOUND
    assert result.remainder == "; 13"

    second, kernel = parse_us_number_str("12; 13", start_index=result.next_search_index, terminators=[";"])
    assert kernel.to_int() == 13
    assert second.next_search_index is None


def test_preset_errors_carry_context() -> None:
    with pytest.raises(InvalidInputError) as excinfo:
        parse_us_number_str("", context="batch")

    assert excinfo.value.context == ("batch", "parse_us_number_str", "extract_numeric_rune_sequence")


def test_parse_number_str_with_profile() -> None:
    result, kernel = parse_number_str("1.234,5- EUR", ParseProfile.named("germany"))

    assert kernel.to_native_str() == "-1234.5"
    assert result.remainder == " EUR"


def test_parse_number_str_uses_configured_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUMSTRKIT_DECIMAL_SEPARATOR", ",")
    monkeypatch.setenv("NUMSTRKIT_TERMINATORS", ";")

    result, kernel = parse_number_str("-3,5; 4")

    assert kernel.to_native_str() == "-3.5"
    assert result.termination is SearchTermination.TERMINATOR_FOUND
    assert result.remainder == "; 4"
