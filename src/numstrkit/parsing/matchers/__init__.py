"""Sub-searches consulted by the number string parsing engine."""

from .decimal import DecimalSeparatorMatch, DecimalSeparatorSpec
from .negative import NegativeSignCollection, NegativeSignMatch, NegativeSignSearch, NegativeSignSpec
from .terminators import TerminatorMatch, TerminatorSet

__all__ = [
    "DecimalSeparatorMatch",
    "DecimalSeparatorSpec",
    "NegativeSignCollection",
    "NegativeSignMatch",
    "NegativeSignSearch",
    "NegativeSignSpec",
    "TerminatorMatch",
    "TerminatorSet",
]
