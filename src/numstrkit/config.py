"""Default parse profile resolution for numstrkit.

:func:`get_settings` returns the :class:`ParseProfile` used by
:func:`numstrkit.parsing.presets.parse_number_str` and by the CLI when no
explicit options are given. The profile can be customised by pointing
``NUMSTRKIT_CONFIG_FILE`` to a TOML/YAML document with a ``profile`` section,
and individual fields can be overridden through environment variables.
"""
from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, MutableMapping, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .parsing.matchers import DecimalSeparatorSpec, NegativeSignCollection, TerminatorSet

__all__ = ["PROFILE_NAMES", "ParseProfile", "get_settings", "reset_settings"]

CONFIG_FILE_ENV = "NUMSTRKIT_CONFIG_FILE"
DECIMAL_SEPARATOR_ENV = "NUMSTRKIT_DECIMAL_SEPARATOR"
TERMINATORS_ENV = "NUMSTRKIT_TERMINATORS"
MAX_SEARCH_LENGTH_ENV = "NUMSTRKIT_MAX_SEARCH_LENGTH"

_CONFIG_CACHE: Optional["ParseProfile"] = None
_CONFIG_SOURCE: Optional[Path] = None

_NAMED_PROFILES: Dict[str, Dict[str, Any]] = {
    "us": {
        "decimal_separator": ".",
        "leading_negative_signs": ["-"],
        "trailing_negative_signs": [],
        "enclosing_negative_signs": [("(", ")")],
    },
    "france": {
        "decimal_separator": ",",
        "leading_negative_signs": ["-"],
        "trailing_negative_signs": [],
        "enclosing_negative_signs": [],
    },
    "germany": {
        "decimal_separator": ",",
        "leading_negative_signs": [],
        "trailing_negative_signs": ["-"],
        "enclosing_negative_signs": [],
    },
}

PROFILE_NAMES: Tuple[str, ...] = tuple(_NAMED_PROFILES)


class ParseProfile(BaseModel):
    """Declarative parsing options that expand into matcher objects."""

    decimal_separator: str = Field(default=".", description="Decimal separator literal; empty disables it")
    leading_negative_signs: List[str] = Field(default_factory=lambda: ["-"])
    trailing_negative_signs: List[str] = Field(default_factory=list)
    enclosing_negative_signs: List[Tuple[str, str]] = Field(default_factory=lambda: [("(", ")")])
    terminators: List[str] = Field(default_factory=list, description="Literals that end a scan after a digit")
    max_search_length: Optional[int] = Field(default=None, description="Upper bound on scanned characters")
    request_remainder: bool = Field(default=True, description="Whether results carry the unparsed suffix")

    model_config = ConfigDict(extra="forbid")

    @field_validator("decimal_separator")
    @classmethod
    def _separator_allowed(cls, value: str) -> str:
        if any(char in value for char in "-()"):
            raise ValueError(f"decimal separator {value!r} must not contain '-', '(' or ')'")
        return value

    @field_validator("leading_negative_signs", "trailing_negative_signs", "terminators")
    @classmethod
    def _literals_not_empty(cls, value: List[str]) -> List[str]:
        if any(not literal for literal in value):
            raise ValueError("literals must not be empty strings")
        return value

    @field_validator("enclosing_negative_signs")
    @classmethod
    def _pairs_not_empty(cls, value: List[Tuple[str, str]]) -> List[Tuple[str, str]]:
        for opening, closing in value:
            if not opening or not closing:
                raise ValueError("enclosing sign literals must not be empty strings")
        return value

    @field_validator("max_search_length")
    @classmethod
    def _positive_length(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise ValueError("max_search_length must be a positive integer")
        return value

    @classmethod
    def named(cls, name: str, **overrides: Any) -> "ParseProfile":
        """Return one of the built-in profiles (``us``, ``france``, ``germany``)."""

        key = name.strip().lower()
        if key not in _NAMED_PROFILES:
            raise ValueError(f"Unknown profile '{name}'. Available: {', '.join(PROFILE_NAMES)}")
        payload: Dict[str, Any] = dict(_NAMED_PROFILES[key])
        payload.update(overrides)
        return cls.model_validate(payload)

    # ------------------------------------------------------------------
    # Matcher builders
    # ------------------------------------------------------------------

    def negative_signs(self) -> NegativeSignCollection:
        collection = NegativeSignCollection()
        for symbol in self.leading_negative_signs:
            collection.add_leading(symbol)
        for symbol in self.trailing_negative_signs:
            collection.add_trailing(symbol)
        for opening, closing in self.enclosing_negative_signs:
            collection.add_enclosing(opening, closing)
        return collection

    def decimal_separator_spec(self) -> DecimalSeparatorSpec:
        return DecimalSeparatorSpec(self.decimal_separator)

    def terminator_set(self) -> TerminatorSet:
        return TerminatorSet(self.terminators)


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _env_overrides() -> Dict[str, Any]:
    env = os.environ
    overrides: Dict[str, Any] = {}

    separator = env.get(DECIMAL_SEPARATOR_ENV)
    if separator is not None:
        overrides["decimal_separator"] = separator

    terminators = env.get(TERMINATORS_ENV)
    if terminators is not None:
        overrides["terminators"] = [item for item in terminators.split(",") if item]

    max_length = env.get(MAX_SEARCH_LENGTH_ENV)
    if max_length is not None:
        overrides["max_search_length"] = max_length.strip() or None

    return overrides


def _build_profile(config_file: Optional[Path]) -> ParseProfile:
    payload: MutableMapping[str, Any] = {}
    if config_file is not None:
        config_data = _load_config_file(config_file.expanduser().resolve())
        section = dict(_coalesce_mapping(config_data.get("profile")))
        preset = section.pop("preset", None)
        if preset is not None:
            payload.update(ParseProfile.named(str(preset)).model_dump())
        payload.update(section)

    payload.update(_env_overrides())
    return ParseProfile.model_validate(payload)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> ParseProfile:
    """Return the cached default :class:`ParseProfile`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached profile is discarded and rebuilt.
    config_file:
        Optional explicit path to a configuration document. The resulting
        profile is not cached, so callers can override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_profile(Path(config_file))

    env_path = os.getenv(CONFIG_FILE_ENV)
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_profile(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached profile (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
