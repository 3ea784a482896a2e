"""numstrkit exception hierarchy."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple, Union

__all__ = [
    "Context",
    "InvalidInputError",
    "NativeNumStrError",
    "NoDigitsFoundError",
    "NumStrError",
    "extend_context",
]

Context = Union[str, Iterable[str], None]


def extend_context(context: Context, *labels: str) -> Tuple[str, ...]:
    """Return ``context`` normalised to a tuple with ``labels`` appended."""

    if context is None:
        chain: Tuple[str, ...] = ()
    elif isinstance(context, str):
        chain = (context,) if context else ()
    else:
        chain = tuple(label for label in context if label)
    return chain + tuple(label for label in labels if label)


class NumStrError(ValueError):
    """Base exception for all numstrkit errors."""

    def __init__(self, message: str, *, context: Context = None) -> None:
        self.message = message
        self.context = extend_context(context)
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.context:
            return self.message
        return f"{' -> '.join(self.context)}: {self.message}"


class InvalidInputError(NumStrError):
    """Input parameters passed to a parsing operation are invalid."""


class NoDigitsFoundError(NumStrError):
    """A string expected to hold a number contains no numeric digits."""


class NativeNumStrError(NumStrError):
    """A native number string contains a disallowed character."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        char: Optional[str] = None,
        context: Context = None,
    ) -> None:
        self.index = index
        self.char = char
        super().__init__(message, context=context)
