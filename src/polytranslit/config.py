"""
Transliteration settings as an immutable, validated value.

A TransliterationConfig is checked when it is built: an unknown language
or scheme fails right there, never in the middle of a transliteration.
Changing a setting means building a new config (``replace``,
``set_scheme``).

Usage:
    from polytranslit.config import TransliterationConfig, load_config, set_scheme

    config = TransliterationConfig(language="arabic", scheme="bgn")
    config = set_scheme(config, "iso")
    config = load_config("polytranslit.toml")       # [transliteration] table

Config file format:
    [transliteration]
    language = "russian"
    scheme = "bgn"
    preserve_case = true
"""

from __future__ import annotations

import dataclasses
import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from polytranslit.errors import (
    ConfigError, InvalidSchemeError, TransliterationError, UnknownLanguageError,
)
from polytranslit.languages import get_profile, list_profiles, profiles_for_kind
from polytranslit.scripts import ScriptKind

LOGGER = logging.getLogger(__name__)

AUTO = "auto"
KANJI_READING_MODES = ("first", "all", "context")
DEFAULT_CONFIG_NAME = "polytranslit.toml"


@dataclass(frozen=True, slots=True)
class TransliterationConfig:
    """Options for one Transliterator.

    ``language`` is a profile id or ``"auto"`` (detected per call).
    ``scheme`` None means the language's default scheme; with ``"auto"``
    there is no single language to pick a scheme for, so it must be None.
    """

    language: str = AUTO
    scheme: str | None = None
    lowercase: bool = True
    remove_diacritics: bool = True
    preserve_punctuation: bool = True
    show_untranslated: bool = True
    preserve_case: bool = True
    word_first: bool = True
    include_tones: bool = True
    numeric_tones: bool = False
    handle_script_rules: bool = True
    kanji_reading: str = "first"

    def __post_init__(self):
        if self.language != AUTO:
            table = get_profile(self.language).table
            if self.scheme is not None and not table.has_scheme(self.scheme):
                raise InvalidSchemeError(self.scheme, self.language, table.scheme_ids)
        elif self.scheme is not None:
            raise InvalidSchemeError(self.scheme, AUTO, ())
        if self.kanji_reading not in KANJI_READING_MODES:
            raise ConfigError(
                f"kanji_reading must be one of {', '.join(KANJI_READING_MODES)}, "
                f"got {self.kanji_reading!r}"
            )

    @property
    def resolved_scheme(self) -> str | None:
        """Scheme in effect, or None while the language is still ``auto``."""
        if self.scheme is not None:
            return self.scheme
        if self.language == AUTO:
            return None
        return get_profile(self.language).table.default_scheme

    def replace(self, **changes: Any) -> TransliterationConfig:
        """Validated copy with some fields changed."""
        unknown = set(changes) - _FIELD_NAMES
        if unknown:
            raise ConfigError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        # switching language drops a scheme that belonged to the old one
        if "language" in changes and "scheme" not in changes:
            changes["scheme"] = None
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, options: dict[str, Any]) -> TransliterationConfig:
        unknown = set(options) - _FIELD_NAMES
        if unknown:
            raise ConfigError(f"Unknown config option(s): {', '.join(sorted(unknown))}")
        for name, value in options.items():
            expected = _FIELD_TYPES[name]
            if name == "scheme" and value is None:
                continue
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Option {name!r} must be {expected.__name__}, got {value!r}"
                )
        return cls(**options)

    @classmethod
    def from_toml(cls, config_path: str | Path = DEFAULT_CONFIG_NAME) -> TransliterationConfig:
        """Read the ``[transliteration]`` table of a TOML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            try:
                cfg = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"{config_path}: {e}") from e

        section = cfg.get("transliteration", {})
        if not isinstance(section, dict):
            raise ConfigError(f"{config_path}: [transliteration] must be a table")
        LOGGER.debug("loaded %d option(s) from %s", len(section), config_path)
        return cls.from_dict(section)


_FIELD_NAMES = frozenset(f.name for f in dataclasses.fields(TransliterationConfig))
_FIELD_TYPES = {
    f.name: bool if isinstance(f.default, bool) else str
    for f in dataclasses.fields(TransliterationConfig)
}


def load_config(config_path: str | Path = DEFAULT_CONFIG_NAME) -> TransliterationConfig:
    return TransliterationConfig.from_toml(config_path)


# ── Schemes ─────────────────────────────────────────────────────────────────

def set_scheme(config: TransliterationConfig, scheme: str) -> TransliterationConfig:
    """New config using ``scheme``; raises InvalidSchemeError."""
    return config.replace(scheme=scheme)


def try_set_scheme(
    config: TransliterationConfig, scheme: str,
) -> tuple[TransliterationConfig | None, TransliterationError | None]:
    """Like set_scheme, but returns ``(config, None)`` or ``(None, error)``."""
    try:
        return set_scheme(config, scheme), None
    except InvalidSchemeError as e:
        return None, e


def list_schemes(language_or_kind: str | ScriptKind) -> list[dict[str, str]]:
    """Schemes available for a language id or a ScriptKind.

    A kind shared by several languages (Kanji) lists the schemes of each.
    """
    if not isinstance(language_or_kind, ScriptKind) and language_or_kind in list_profiles():
        tables = [get_profile(language_or_kind).table]
    else:
        try:
            kind = ScriptKind(language_or_kind)
        except ValueError:
            raise UnknownLanguageError(language_or_kind, list_profiles()) from None
        tables = [p.table for p in profiles_for_kind(kind)]

    schemes: list[dict[str, str]] = []
    seen: set[str] = set()
    for table in tables:
        for info in table.schemes:
            if info.id not in seen:
                seen.add(info.id)
                schemes.append(info.as_dict())
    return schemes
