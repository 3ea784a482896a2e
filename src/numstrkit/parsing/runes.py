"""Owned character buffers consumed by the number string parsers."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Union, overload

from ..exceptions import Context, InvalidInputError, extend_context

__all__ = ["RuneBuffer", "first_invalid_char_index", "is_ascii_digit"]

_SURROGATE_LOW = 0xD800
_SURROGATE_HIGH = 0xDFFF


def is_ascii_digit(char: str) -> bool:
    """Return ``True`` for the ten ASCII digits only (``str.isdigit`` accepts more)."""

    return "0" <= char <= "9"


def first_invalid_char_index(chars: Iterable[str]) -> Optional[int]:
    """Index of the first element that is not a single valid code point."""

    for index, char in enumerate(chars):
        if not isinstance(char, str) or len(char) != 1:
            return index
        if _SURROGATE_LOW <= ord(char) <= _SURROGATE_HIGH:
            return index
    return None


class RuneBuffer:
    """Resizable sequence of single characters.

    Python strings are already code point sequences; the buffer adds copy and
    slicing semantics that never alias the caller's data, plus the literal
    matching used by the sign, separator and terminator matchers.
    """

    __slots__ = ("_chars",)

    def __init__(self, chars: Union[str, Iterable[str], "RuneBuffer", None] = None) -> None:
        if chars is None:
            self._chars: List[str] = []
        elif isinstance(chars, RuneBuffer):
            self._chars = list(chars._chars)
        else:
            self._chars = list(chars)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> "RuneBuffer": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return RuneBuffer(self._chars[index])
        return self._chars[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RuneBuffer):
            return self._chars == other._chars
        if isinstance(other, str):
            return "".join(self._chars) == other
        return NotImplemented

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"RuneBuffer({str(self)!r})"

    # ------------------------------------------------------------------
    # Mutation and copies
    # ------------------------------------------------------------------

    @property
    def text(self) -> str:
        return str(self)

    def is_empty(self) -> bool:
        return not self._chars

    def copy(self) -> "RuneBuffer":
        return RuneBuffer(self)

    def slice(self, start: int, end: Optional[int] = None) -> "RuneBuffer":
        """Return a new buffer holding ``[start:end]``."""

        return RuneBuffer(self._chars[start:end])

    def append(self, char: str) -> None:
        self._chars.append(char)

    def extend(self, chars: Union[str, Iterable[str]]) -> None:
        self._chars.extend(chars)

    def clear(self) -> None:
        self._chars.clear()

    def validate(self, *, name: str = "buffer", context: Context = None) -> None:
        """Raise :class:`InvalidInputError` when the buffer holds an illegal element."""

        bad_index = first_invalid_char_index(self._chars)
        if bad_index is not None:
            raise InvalidInputError(
                f"'{name}' contains an invalid character at index {bad_index}: "
                f"{self._chars[bad_index]!r}",
                context=extend_context(context, "RuneBuffer.validate"),
            )

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def is_digit_at(self, index: int, *, limit: Optional[int] = None) -> bool:
        end = len(self._chars) if limit is None else min(limit, len(self._chars))
        return 0 <= index < end and is_ascii_digit(self._chars[index])

    def matches_at(self, index: int, literal: str, *, limit: Optional[int] = None) -> bool:
        """Whether ``literal`` occurs at ``index`` and ends at or before ``limit``."""

        if not literal:
            return False
        end = len(self._chars) if limit is None else min(limit, len(self._chars))
        stop = index + len(literal)
        if index < 0 or stop > end:
            return False
        return all(self._chars[index + offset] == char for offset, char in enumerate(literal))
