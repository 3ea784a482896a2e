import pytest

from numstrkit.exceptions import InvalidInputError
from numstrkit.parsing import (
    DecimalSeparatorSpec,
    NegativeSignCollection,
    NegativeSignSpec,
    NumSignPosition,
    RuneBuffer,
    TerminatorSet,
)


def test_decimal_presets() -> None:
    assert DecimalSeparatorSpec.us().symbol == "."
    assert DecimalSeparatorSpec.european_union().symbol == ","
    assert DecimalSeparatorSpec.france().symbol == ","
    assert DecimalSeparatorSpec.nop().is_nop


@pytest.mark.parametrize("symbol", ["-", "(", ")", ".-", "1"])
def test_decimal_separator_rejects_reserved_characters(symbol: str) -> None:
    with pytest.raises(InvalidInputError):
        DecimalSeparatorSpec(symbol)


def test_decimal_separator_search() -> None:
    spec = DecimalSeparatorSpec(".")
    buffer = RuneBuffer("12.5")

    match = spec.search(buffer, 2)
    assert match.found
    assert (match.start_index, match.end_index) == (2, 3)
    assert not spec.search(buffer, 1).found
    assert not spec.search(buffer, 2, limit=2).found
    assert not DecimalSeparatorSpec.nop().search(buffer, 2).found


def test_multi_character_separator() -> None:
    spec = DecimalSeparatorSpec("<>")
    match = spec.search(RuneBuffer("1<>5"), 1)

    assert match.found
    assert match.end_index == 3


def test_terminator_first_pattern_wins() -> None:
    terminators = TerminatorSet([" US", " USD"])

    match = terminators.search(RuneBuffer("12 USD"), 2)

    assert match.found
    assert match.pattern == " US"
    assert match.pattern_index == 0
    assert match.end_index == 5


@pytest.mark.parametrize("patterns", [[""], ["ok", ""], [None]])
def test_terminator_set_rejects_empty_patterns(patterns: list) -> None:
    with pytest.raises(InvalidInputError):
        TerminatorSet(patterns)


def test_terminator_nop() -> None:
    assert TerminatorSet.nop().is_nop
    assert not TerminatorSet.nop().search(RuneBuffer("12;"), 2).found


@pytest.mark.parametrize(
    "kwargs",
    [
        {"position": NumSignPosition.NONE, "leading": "-"},
        {"position": NumSignPosition.BEFORE},
        {"position": NumSignPosition.BEFORE, "leading": "-", "trailing": "-"},
        {"position": NumSignPosition.AFTER, "leading": "-"},
        {"position": NumSignPosition.BEFORE_AND_AFTER, "leading": "("},
        {"position": NumSignPosition.BEFORE, "leading": "1"},
        {"position": "sideways", "leading": "-"},
    ],
)
def test_negative_sign_spec_validation(kwargs: dict) -> None:
    with pytest.raises(InvalidInputError):
        NegativeSignSpec(**kwargs)


def test_negative_sign_spec_accepts_string_positions() -> None:
    spec = NegativeSignSpec("after", trailing="-")

    assert spec.position is NumSignPosition.AFTER


def test_united_states_collection() -> None:
    collection = NegativeSignCollection.united_states()

    assert [spec.position for spec in collection] == [
        NumSignPosition.BEFORE,
        NumSignPosition.BEFORE_AND_AFTER,
    ]
    assert not collection.is_nop
    assert NegativeSignCollection().is_nop


def test_collection_validate_rejects_foreign_items() -> None:
    collection = NegativeSignCollection([NegativeSignSpec.leading_sign("-"), "-"])

    with pytest.raises(InvalidInputError) as excinfo:
        collection.validate(context="signs")

    assert excinfo.value.context[-1] == "NegativeSignCollection[1]"


def test_leading_sign_only_before_digits() -> None:
    search = NegativeSignCollection().add_leading("-").new_search()
    buffer = RuneBuffer("-5-")

    assert search.search(buffer, 0, found_first_digit=False).found
    assert not search.search(buffer, 2, found_first_digit=True).found


def test_trailing_sign_only_after_digits() -> None:
    search = NegativeSignCollection().add_trailing("-").new_search()
    buffer = RuneBuffer("-5-")

    assert not search.search(buffer, 0, found_first_digit=False).found
    match = search.search(buffer, 2, found_first_digit=True)
    assert match.found
    assert match.position is NumSignPosition.AFTER


def test_enclosing_sign_needs_opening() -> None:
    collection = NegativeSignCollection().add_enclosing("(", ")")
    buffer = RuneBuffer("(5)")

    fresh = collection.new_search()
    assert not fresh.search(buffer, 2, found_first_digit=True).found

    search = collection.new_search()
    assert not search.search(buffer, 0, found_first_digit=False).found
    assert search.opening_found(0)
    match = search.search(buffer, 2, found_first_digit=True)
    assert match.found
    assert match.position is NumSignPosition.BEFORE_AND_AFTER
    assert (match.start_index, match.end_index) == (2, 3)


def test_sign_searches_do_not_share_state() -> None:
    collection = NegativeSignCollection().add_enclosing("(", ")")
    first = collection.new_search()
    first.search(RuneBuffer("("), 0, found_first_digit=False)

    second = collection.new_search()

    assert first.opening_found(0)
    assert not second.opening_found(0)
