import pytest

from numstrkit.exceptions import InvalidInputError
from numstrkit.parsing.runes import RuneBuffer, first_invalid_char_index, is_ascii_digit


@pytest.mark.parametrize("char", list("0123456789"))
def test_is_ascii_digit_accepts_ascii(char: str) -> None:
    assert is_ascii_digit(char)


@pytest.mark.parametrize("char", ["a", "-", ".", " ", "٣", "１"])
def test_is_ascii_digit_rejects_other_digits(char: str) -> None:
    assert not is_ascii_digit(char)


def test_first_invalid_char_index() -> None:
    assert first_invalid_char_index("abc") is None
    assert first_invalid_char_index(["a", "bc"]) == 1
    assert first_invalid_char_index(["1", "\ud800"]) == 1
    assert first_invalid_char_index(["x", 5]) == 1


def test_buffer_copies_do_not_alias() -> None:
    source = RuneBuffer("123")
    clone = source.copy()
    clone.append("4")

    assert source == "123"
    assert clone == "1234"
    assert len(source) == 3


def test_buffer_slicing_returns_buffers() -> None:
    buffer = RuneBuffer("12 USD")

    assert buffer[2:] == RuneBuffer(" USD")
    assert buffer.slice(3).text == "USD"
    assert buffer.slice(0, 2).text == "12"
    assert buffer[0] == "1"


def test_buffer_validate_rejects_surrogates() -> None:
    buffer = RuneBuffer(["1", "\udc00"])

    with pytest.raises(InvalidInputError) as excinfo:
        buffer.validate(name="target", context="unit-test")

    assert excinfo.value.context == ("unit-test", "RuneBuffer.validate")
    assert "index 1" in str(excinfo.value)


def test_matches_at_respects_limit() -> None:
    buffer = RuneBuffer("12 USD")

    assert buffer.matches_at(2, " USD")
    assert not buffer.matches_at(2, " USD", limit=5)
    assert not buffer.matches_at(4, "SDX")
    assert not buffer.matches_at(0, "")


def test_is_digit_at_bounds() -> None:
    buffer = RuneBuffer(".5")

    assert buffer.is_digit_at(1)
    assert not buffer.is_digit_at(1, limit=1)
    assert not buffer.is_digit_at(2)
    assert not buffer.is_digit_at(-1)
