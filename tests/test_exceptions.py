import pytest

from numstrkit.exceptions import (
    InvalidInputError,
    NativeNumStrError,
    NoDigitsFoundError,
    NumStrError,
    extend_context,
)


@pytest.mark.parametrize(
    "context, labels, expected",
    [
        (None, ("op",), ("op",)),
        ("", ("op",), ("op",)),
        ("caller", ("op",), ("caller", "op")),
        (["a", "", "b"], ("op", ""), ("a", "b", "op")),
        (("a",), (), ("a",)),
    ],
)
def test_extend_context(context, labels, expected) -> None:
    assert extend_context(context, *labels) == expected


def test_message_rendering() -> None:
    error = InvalidInputError("start_index is negative", context=("report", "scan"))

    assert str(error) == "report -> scan: start_index is negative"
    assert error.message == "start_index is negative"
    assert str(NoDigitsFoundError("nothing")) == "nothing"


def test_hierarchy() -> None:
    for cls in (InvalidInputError, NoDigitsFoundError, NativeNumStrError):
        assert issubclass(cls, NumStrError)
    assert issubclass(NumStrError, ValueError)


def test_native_error_fields() -> None:
    error = NativeNumStrError("bad", index=3, char="x", context="validate")

    assert (error.index, error.char) == (3, "x")
    assert error.context == ("validate",)
