"""numstrkit: character-level number string parsing."""

from ._version import __version__

__all__ = [
    "__version__",
    "cli",
    "config",
    "exceptions",
    "parsing",
    "utils",
]
