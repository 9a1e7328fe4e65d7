"""
Static per-language lookup tables.

A ScriptTable bundles everything one language profile needs to romanize
text: the default-scheme character map, partial overlays for alternative
schemes, the phrase dictionary, multi-character clusters, punctuation
normalization and tone tables.  Tables are built once at import time and
are read-only afterwards; every mapping is exposed through a
MappingProxyType.

Usage:
    from polytranslit.languages import get_profile

    table = get_profile("arabic").table
    table.lookup_char("ش")                   # 'sh'
    table.lookup_char("ش", "iso")            # 'š'
    table.lookup_phrase("مرحبا بك", 0)       # Match('marḥaban', 5, 'مرحبا')
"""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping

from polytranslit.matcher import Match, longest_match
from polytranslit.scripts import ScriptKind, classify


@dataclass(frozen=True, slots=True)
class SchemeInfo:
    """One romanization scheme offered by a language."""

    id: str
    display_name: str
    description: str = ""

    def as_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "display_name": self.display_name,
            "description": self.description,
        }


def _freeze(mapping: Mapping | None) -> Mapping:
    return MappingProxyType(dict(mapping or {}))


def fold_ascii(text: str) -> str:
    """Drop diacritics and any other non-ASCII character: 'marḥaban' -> 'marhaban'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return decomposed.encode("ascii", "ignore").decode("ascii")


@dataclass(frozen=True, eq=False)
class ScriptTable:
    """Read-only romanization data for one language profile.

    ``overlays`` maps a non-default scheme id to the entries that differ
    from ``char_map``; an overlay value of ``""`` is a real mapping that
    emits nothing.  ``composer`` is an optional fallback used for
    characters that are computed rather than listed (Hangul syllables).
    Dictionary entries are written once, with diacritics; under a scheme
    in ``ascii_schemes`` they are folded to plain ASCII on lookup.
    """

    name: str
    display_name: str
    kinds: frozenset[ScriptKind]
    schemes: tuple[SchemeInfo, ...]
    char_map: Mapping[str, str]
    overlays: Mapping[str, Mapping[str, str]] = field(default_factory=dict)
    phrases: Mapping[str, str] = field(default_factory=dict)
    max_phrase_length: int = 2
    clusters: Mapping[str, str] = field(default_factory=dict)
    punctuation: Mapping[str, str] = field(default_factory=dict)
    spaced_kinds: frozenset[ScriptKind] = frozenset()
    case_insensitive: bool = False
    requires_word_boundary: bool = True
    strip_marks: frozenset[str] = frozenset()
    tone_strip: Mapping[str, str] = field(default_factory=dict)
    tone_numbers: Mapping[str, str] = field(default_factory=dict)
    readings: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    composer: Callable[[str, str], str | None] | None = None
    ascii_schemes: frozenset[str] = frozenset()

    # derived
    max_cluster_length: int = field(init=False, default=0)
    strip_translation: dict[int, str] = field(init=False, repr=False, default_factory=dict)

    def __post_init__(self):
        if not self.schemes:
            raise ValueError(f"{self.name}: at least one scheme is required")
        scheme_ids = {s.id for s in self.schemes}
        for scheme in self.overlays:
            if scheme not in scheme_ids:
                raise ValueError(f"{self.name}: overlay for undeclared scheme {scheme!r}")
        for scheme in self.ascii_schemes:
            if scheme not in scheme_ids:
                raise ValueError(f"{self.name}: ASCII folding for undeclared scheme {scheme!r}")

        phrases = dict(self.phrases)
        if self.case_insensitive:
            phrases = {k.lower(): v for k, v in phrases.items()}
        for key in phrases:
            if not 2 <= len(key) <= self.max_phrase_length:
                raise ValueError(
                    f"{self.name}: phrase {key!r} has length {len(key)}, "
                    f"allowed 2..{self.max_phrase_length}"
                )
        for key in self.clusters:
            if len(key) < 2:
                raise ValueError(f"{self.name}: cluster {key!r} is shorter than 2")

        set_ = object.__setattr__
        set_(self, "char_map", _freeze(self.char_map))
        set_(self, "overlays", MappingProxyType(
            {scheme: _freeze(entries) for scheme, entries in self.overlays.items()}
        ))
        set_(self, "phrases", MappingProxyType(phrases))
        set_(self, "clusters", _freeze(self.clusters))
        set_(self, "punctuation", _freeze(self.punctuation))
        set_(self, "tone_strip", _freeze(self.tone_strip))
        set_(self, "tone_numbers", _freeze(self.tone_numbers))
        set_(self, "readings", MappingProxyType(
            {k: tuple(v) for k, v in (self.readings or {}).items()}
        ))
        set_(self, "max_cluster_length", max((len(k) for k in self.clusters), default=0))
        set_(self, "strip_translation", str.maketrans(dict(self.tone_strip)))

    # ── Schemes ─────────────────────────────────────────────────────────

    @property
    def default_scheme(self) -> str:
        return self.schemes[0].id

    @property
    def scheme_ids(self) -> tuple[str, ...]:
        return tuple(s.id for s in self.schemes)

    def has_scheme(self, scheme: str) -> bool:
        return scheme in self.scheme_ids

    def _overlay(self, scheme: str | None) -> Mapping[str, str]:
        if scheme is None or scheme == self.default_scheme:
            return {}
        return self.overlays.get(scheme, {})

    # ── Lookups ─────────────────────────────────────────────────────────

    def owns(self, char: str) -> bool:
        """True if char belongs to one of this table's scripts."""
        return classify(char) in self.kinds

    def lookup_char(self, char: str, scheme: str | None = None) -> str | None:
        """Romanize one character, or None if it has no mapping.

        The scheme overlay wins when it lists the character; otherwise the
        default-scheme map answers, then the composer (if any).
        """
        overlay = self._overlay(scheme)
        if char in overlay:
            return overlay[char]
        if char in self.char_map:
            return self.char_map[char]
        if self.composer is not None:
            return self.composer(char, scheme or self.default_scheme)
        return None

    def lookup_cluster(self, text: str, start: int, scheme: str | None = None) -> Match | None:
        """Longest cluster starting at start; clusters ignore word boundaries."""
        if not self.max_cluster_length:
            return None
        overlay = self._overlay(scheme)
        upper = min(self.max_cluster_length, len(text) - start)
        for length in range(upper, 1, -1):
            candidate = text[start:start + length]
            if candidate in overlay:
                return Match(overlay[candidate], length, candidate)
            if candidate in self.clusters:
                return Match(self.clusters[candidate], length, candidate)
        return None

    def lookup_phrase(self, text: str, start: int, scheme: str | None = None) -> Match | None:
        """Longest dictionary word or phrase starting at start.

        Phrases are shared by every scheme of a language; only an ASCII
        scheme changes them, by folding.
        """
        match = longest_match(text, start, self)
        if match is None or scheme not in self.ascii_schemes:
            return match
        return Match(fold_ascii(match.romanized), match.length, match.source)
