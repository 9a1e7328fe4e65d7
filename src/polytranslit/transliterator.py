"""
Single-pass transliteration of text into Latin script.

The scanner walks the input left to right.  At each position it tries, in
order: whitespace passthrough, non-script passthrough (with punctuation
normalization), the longest dictionary phrase, the language's rules, and
finally the single-character map.  Each consumed stretch of input becomes
a Segment; the output is the formatted segments joined with the spacing
the language asks for.

Usage:
    from polytranslit import Transliterator

    t = Transliterator(language="mandarin")
    t.transliterate("你好")                       # 'nǐ hǎo'
    t.transliterate_batch(["谢谢", "再见"])        # ['xiè xie', 'zài jiàn']

    t = Transliterator.from_config()              # loads polytranslit.toml
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Sequence

from polytranslit.config import AUTO, DEFAULT_CONFIG_NAME, TransliterationConfig, load_config
from polytranslit.languages import LanguageProfile, detect_language, get_profile
from polytranslit.rules import RuleContext
from polytranslit.scripts import ScriptKind, classify

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Segment:
    """One consumed stretch of input and what it became."""

    positions: tuple[int, ...]  # of each source character in the original text
    source: str
    output: str
    method: str           # phrase, rule name, char, unmapped, passthrough, ...
    kind: ScriptKind
    script: bool = False  # handled by the language profile
    found: bool = False   # a table or rule produced the output
    spaced: bool = False
    alnum: bool = False   # digits or Latin passed through unchanged

    @property
    def start(self) -> int:
        return self.positions[0]


class Transliterator:
    """Romanizes text according to one TransliterationConfig.

    The config is fixed for the lifetime of the instance; ``with_options``
    returns a new Transliterator.
    """

    def __init__(self, config: TransliterationConfig | None = None, **options: Any):
        if config is None:
            config = TransliterationConfig.from_dict(options)
        elif options:
            config = config.replace(**options)
        self.config = config

    @classmethod
    def from_config(cls, config_path: str | Path = DEFAULT_CONFIG_NAME) -> Transliterator:
        """Build a Transliterator from the [transliteration] table of a TOML file."""
        return cls(load_config(config_path))

    def with_options(self, **changes: Any) -> Transliterator:
        return Transliterator(self.config.replace(**changes))

    # ── Profile ─────────────────────────────────────────────────────────

    def resolve_profile(self, text: str) -> LanguageProfile | None:
        """Profile for this text: the configured one, or detected under ``auto``."""
        if self.config.language != AUTO:
            return get_profile(self.config.language)
        language = detect_language(text)
        if language is None:
            LOGGER.debug("no supported script in %r", text[:40])
            return None
        return get_profile(language)

    # ── Public API ──────────────────────────────────────────────────────

    def transliterate(self, text: str) -> str:
        if not isinstance(text, str) or not text:
            return ""
        _profile, segments = self.segment(text)
        return join_segments(segments)

    def transliterate_batch(self, texts: Sequence[str]) -> list[str]:
        """Transliterate each element; anything but a list or tuple gives []."""
        if not isinstance(texts, (list, tuple)):
            return []
        return [self.transliterate(text) for text in texts]

    def analyze(self, text: str):
        from polytranslit.analyzer import analyze_segments

        return analyze_segments(self, text)

    # ── Scanning ────────────────────────────────────────────────────────

    def segment(self, text: str) -> tuple[LanguageProfile | None, list[Segment]]:
        """Scan text once and return the profile used and the segments."""
        if not isinstance(text, str) or not text:
            return None, []
        profile = self.resolve_profile(text)
        if profile is None:
            return None, [self._non_script(text, i, i, None) for i in range(len(text))]

        cfg = self.config
        table = profile.table
        scheme = cfg.scheme or table.default_scheme
        engine = profile.engine() if cfg.handle_script_rules else None

        # Work on a copy without the strippable marks; origin maps back.
        segments: list[Segment] = []
        if cfg.remove_diacritics and table.strip_marks:
            origin = []
            for pos, char in enumerate(text):
                if char in table.strip_marks:
                    segments.append(Segment((pos,), char, "", "stripped", classify(char),
                                            script=True, found=True))
                else:
                    origin.append(pos)
            work = "".join(text[pos] for pos in origin)
        else:
            origin = list(range(len(text)))
            work = text

        emitted: list[Segment] = []
        i = 0
        while i < len(work):
            char = work[i]
            if char.isspace():
                segment = Segment((origin[i],), char, char, "whitespace", ScriptKind.OTHER)
            elif not table.owns(char):
                segment = self._non_script(work, i, origin[i], table.punctuation)
            else:
                segment = self._script_unit(work, i, origin, profile, scheme, engine, emitted)
            segments.append(segment)
            emitted.append(segment)
            i += len(segment.source)

        segments.sort(key=lambda s: s.start)
        return profile, segments

    def _non_script(self, text: str, i: int, start: int,
                    punctuation: Mapping[str, str] | None) -> Segment:
        char = text[i]
        kind = classify(char)
        at = (start,)
        if char.isspace():
            return Segment(at, char, char, "whitespace", kind)
        if self.config.preserve_punctuation and punctuation and char in punctuation:
            return Segment(at, char, punctuation[char], "punctuation", kind)
        if char.isalnum():
            return Segment(at, char, char, "passthrough", kind, alnum=True)
        if self.config.preserve_punctuation:
            return Segment(at, char, char, "passthrough", kind)
        return Segment(at, char, "", "dropped", kind)

    def _script_unit(self, work: str, i: int, origin: list[int], profile: LanguageProfile,
                     scheme: str, engine, emitted: list[Segment]) -> Segment:
        cfg = self.config
        table = profile.table
        char = work[i]
        kind = classify(char)
        spaced = kind in table.spaced_kinds

        def unit(length: int, output: str, method: str, found: bool = True,
                 verbatim: bool = False) -> Segment:
            source = work[i:i + length]
            if found:
                output = self._format(output, source, table, verbatim)
            return Segment(tuple(origin[i:i + length]), source, output, method, kind,
                           script=True, found=found, spaced=spaced)

        if cfg.word_first:
            match = table.lookup_phrase(work, i, scheme)
            if match is not None:
                return unit(match.length, match.romanized, "phrase")

        if engine is not None:
            ctx = RuleContext(work, i, emitted, table, scheme, cfg.kanji_reading)
            hit = engine.try_rules(ctx)
            if hit is not None:
                return unit(hit.length, hit.romanized, hit.rule or "rule", verbatim=hit.verbatim)

        romanized = table.lookup_char(char, scheme)
        if romanized is not None:
            return unit(1, romanized, "char")

        LOGGER.debug("no %s mapping for %r (U+%04X)", table.name, char, ord(char))
        marker = f"[{char}]" if cfg.show_untranslated else char
        return unit(1, marker, "unmapped", found=False)

    # ── Formatting ──────────────────────────────────────────────────────

    def _format(self, output: str, source: str, table, verbatim: bool = False) -> str:
        cfg = self.config
        if cfg.include_tones and cfg.numeric_tones and table.tone_numbers:
            output = number_tones(output, table.tone_numbers)
        elif not cfg.include_tones and table.tone_strip:
            output = output.translate(table.strip_translation)
        if verbatim:
            return output
        if cfg.preserve_case:
            return mirror_case(source, output)
        if cfg.lowercase:
            return output.lower()
        return output


# ── Helpers ─────────────────────────────────────────────────────────────────

def number_tones(text: str, tone_numbers: Mapping[str, str]) -> str:
    """Replace tone-marked vowels with plain ones and a trailing tone digit
    per syllable: 'nǐ hǎo' -> 'ni3 hao3'."""
    syllables = []
    for syllable in text.split(" "):
        digit = ""
        chars = []
        for char in syllable:
            numbered = tone_numbers.get(char)
            if numbered:
                chars.append(numbered[:-1])
                digit = numbered[-1]
            else:
                chars.append(char)
        syllables.append("".join(chars) + digit)
    return " ".join(syllables)


def mirror_case(source: str, output: str) -> str:
    """Copy the case of source onto output character by character.

    Output characters beyond the source length are lowercase.  A source
    without cased letters (Arabic, Thai, CJK) leaves output untouched.
    """
    if not any(c.isupper() or c.islower() for c in source):
        return output
    mirrored = []
    for pos, char in enumerate(output):
        if pos < len(source) and source[pos].isupper():
            mirrored.append(char.upper())
        else:
            mirrored.append(char.lower())
    return "".join(mirrored)


def _needs_space(prev: Segment, seg: Segment) -> bool:
    if prev.spaced:
        return seg.spaced or seg.alnum
    return prev.alnum and seg.spaced


def join_segments(segments: Sequence[Segment]) -> str:
    """Concatenate segment outputs, spacing spaced units, and normalize whitespace."""
    parts: list[str] = []
    prev: Segment | None = None
    for seg in segments:
        if not seg.output:
            continue
        if (prev is not None and _needs_space(prev, seg)
                and not parts[-1][-1:].isspace() and not seg.output[:1].isspace()):
            parts.append(" ")
        parts.append(seg.output)
        prev = seg
    return " ".join("".join(parts).split())


# ── Module-level shortcuts ──────────────────────────────────────────────────

def transliterate(text: str, config: TransliterationConfig | None = None, **options: Any) -> str:
    return Transliterator(config, **options).transliterate(text)


def transliterate_batch(texts: Sequence[str], config: TransliterationConfig | None = None,
                        **options: Any) -> list[str]:
    return Transliterator(config, **options).transliterate_batch(texts)
