"""
Language profiles: one ScriptTable plus its ordered rules per language.

Han characters are shared by Japanese and Mandarin, so callers select a
profile by id rather than by ScriptKind.  ``detect_language`` picks a
profile from the scripts present in a text.

Usage:
    from polytranslit.languages import detect_language, get_profile

    profile = get_profile("thai")
    profile.table.default_scheme          # 'rtgs'
    detect_language("こんにちは世界")       # 'japanese'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from polytranslit.errors import UnknownLanguageError
from polytranslit.languages import (
    arabic, devanagari, greek, hebrew, japanese, korean, mandarin, russian, thai,
)
from polytranslit.rules import Rule, RuleEngine
from polytranslit.scripts import ScriptKind, count_scripts
from polytranslit.tables import ScriptTable

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class LanguageProfile:
    table: ScriptTable
    rules: Sequence[Rule] = ()

    @property
    def id(self) -> str:
        return self.table.name

    @property
    def display_name(self) -> str:
        return self.table.display_name

    def engine(self) -> RuleEngine:
        return RuleEngine(self.rules)


PROFILES: dict[str, LanguageProfile] = {
    module.TABLE.name: LanguageProfile(module.TABLE, module.RULES)
    for module in (
        arabic, japanese, mandarin, russian, thai, korean, devanagari, greek, hebrew,
    )
}

# Profile chosen for a text whose predominant script is the key
_BY_KIND = {
    ScriptKind.ARABIC: "arabic",
    ScriptKind.HIRAGANA: "japanese",
    ScriptKind.KATAKANA: "japanese",
    ScriptKind.KANJI: "mandarin",
    ScriptKind.CYRILLIC: "russian",
    ScriptKind.THAI: "thai",
    ScriptKind.HANGUL: "korean",
    ScriptKind.DEVANAGARI: "devanagari",
    ScriptKind.GREEK: "greek",
    ScriptKind.HEBREW: "hebrew",
}


def list_profiles() -> list[str]:
    return list(PROFILES)


def get_profile(language: str) -> LanguageProfile:
    """Look up a profile by id; raises UnknownLanguageError."""
    try:
        return PROFILES[language]
    except KeyError:
        raise UnknownLanguageError(language, list_profiles()) from None


def profiles_for_kind(kind: ScriptKind) -> list[LanguageProfile]:
    return [p for p in PROFILES.values() if kind in p.table.kinds]


def detect_language(text: str) -> str | None:
    """Pick the profile for the scripts present in text.

    Any kana means Japanese (kanji included); Han characters alone are
    read as Mandarin.  Otherwise the most frequent supported script wins.
    Returns None when no supported script is present.
    """
    if not isinstance(text, str):
        return None
    counts = count_scripts(text)
    if counts[ScriptKind.HIRAGANA] or counts[ScriptKind.KATAKANA]:
        return "japanese"
    supported = [(n, kind) for kind, n in counts.items() if kind in _BY_KIND]
    if not supported:
        return None
    # ties resolve to the kind seen first in the text
    best = max(supported, key=lambda item: item[0])[1]
    language = _BY_KIND[best]
    LOGGER.debug("detected %s from %s", language, dict(counts))
    return language


@dataclass(frozen=True, slots=True)
class MixedScriptReport:
    is_mixed: bool
    scripts: dict[ScriptKind, int]
    ratios: dict[ScriptKind, float]
    total: int


def detect_mixed_script(text: str) -> MixedScriptReport:
    """Share of each script among the letters of text (whitespace, digits,
    marks and punctuation are ignored)."""
    if not isinstance(text, str):
        text = ""
    counts = count_scripts("".join(char for char in text if char.isalpha()))
    counts.pop(ScriptKind.OTHER, None)
    total = sum(counts.values())
    ratios = {kind: n / total for kind, n in counts.items()} if total else {}
    return MixedScriptReport(
        is_mixed=len(counts) > 1,
        scripts=dict(counts),
        ratios=ratios,
        total=total,
    )
