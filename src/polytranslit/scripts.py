"""
Unicode script classification.

Every code point belongs to exactly one ScriptKind.  The lookup table is a
sorted list of disjoint (start, end, kind) ranges searched with bisect;
overlapping ranges are rejected when the module is imported.

Usage:
    from polytranslit.scripts import ScriptKind, classify, is_combining_mark

    classify("ب")                    # ScriptKind.ARABIC
    classify(0x3042)                 # ScriptKind.HIRAGANA
    is_combining_mark("َ")      # True (fatha)
    count_scripts("abc ابت")         # Counter({LATIN: 3, ARABIC: 3})
"""

from __future__ import annotations

import bisect
import unicodedata
from collections import Counter
from enum import Enum


class ScriptKind(str, Enum):
    ARABIC = "arabic"
    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    KANJI = "kanji"
    HANGUL = "hangul"
    CYRILLIC = "cyrillic"
    DEVANAGARI = "devanagari"
    THAI = "thai"
    GREEK = "greek"
    HEBREW = "hebrew"
    LATIN = "latin"
    OTHER = "other"

    def __str__(self) -> str:
        return self.value


# ── Range table ─────────────────────────────────────────────────────────────

_RANGES: list[tuple[int, int, ScriptKind]] = [
    # Latin
    (0x0041, 0x005A, ScriptKind.LATIN),
    (0x0061, 0x007A, ScriptKind.LATIN),
    (0x00C0, 0x00D6, ScriptKind.LATIN),
    (0x00D8, 0x00F6, ScriptKind.LATIN),
    (0x00F8, 0x024F, ScriptKind.LATIN),
    (0x1E00, 0x1EFF, ScriptKind.LATIN),
    # Greek and Coptic, Greek Extended
    (0x0370, 0x03FF, ScriptKind.GREEK),
    (0x1F00, 0x1FFF, ScriptKind.GREEK),
    # Cyrillic, Supplement, Extended-A, Extended-B
    (0x0400, 0x04FF, ScriptKind.CYRILLIC),
    (0x0500, 0x052F, ScriptKind.CYRILLIC),
    (0x2DE0, 0x2DFF, ScriptKind.CYRILLIC),
    (0xA640, 0xA69F, ScriptKind.CYRILLIC),
    # Hebrew, Hebrew presentation forms
    (0x0590, 0x05FF, ScriptKind.HEBREW),
    (0xFB1D, 0xFB4F, ScriptKind.HEBREW),
    # Arabic, Supplement, Extended-A, Presentation Forms A/B
    (0x0600, 0x06FF, ScriptKind.ARABIC),
    (0x0750, 0x077F, ScriptKind.ARABIC),
    (0x08A0, 0x08FF, ScriptKind.ARABIC),
    (0xFB50, 0xFDFF, ScriptKind.ARABIC),
    (0xFE70, 0xFEFF, ScriptKind.ARABIC),
    # Devanagari
    (0x0900, 0x097F, ScriptKind.DEVANAGARI),
    # Thai
    (0x0E00, 0x0E7F, ScriptKind.THAI),
    # Hangul jamo, compatibility jamo, syllables
    (0x1100, 0x11FF, ScriptKind.HANGUL),
    (0x3130, 0x318F, ScriptKind.HANGUL),
    (0xAC00, 0xD7AF, ScriptKind.HANGUL),
    # Kana (the katakana middle dot U+30FB stays punctuation)
    (0x3041, 0x309F, ScriptKind.HIRAGANA),
    (0x30A1, 0x30FA, ScriptKind.KATAKANA),
    (0x30FC, 0x30FF, ScriptKind.KATAKANA),
    # CJK ideographs: iteration mark, Ext A, URO, compatibility, Ext B-D
    (0x3005, 0x3005, ScriptKind.KANJI),
    (0x3400, 0x4DBF, ScriptKind.KANJI),
    (0x4E00, 0x9FFF, ScriptKind.KANJI),
    (0xF900, 0xFAFF, ScriptKind.KANJI),
    (0x20000, 0x2A6DF, ScriptKind.KANJI),
    (0x2A700, 0x2B73F, ScriptKind.KANJI),
    (0x2B740, 0x2B81F, ScriptKind.KANJI),
]


def _check_ranges(
    ranges: list[tuple[int, int, ScriptKind]],
) -> list[tuple[int, int, ScriptKind]]:
    """Sort the range table and reject empty or overlapping ranges."""
    ordered = sorted(ranges)
    for start, end, kind in ordered:
        if start > end:
            raise ValueError(f"Empty range {start:#06x}-{end:#06x} for {kind}")
    for (s1, e1, k1), (s2, e2, k2) in zip(ordered, ordered[1:]):
        if s2 <= e1:
            raise ValueError(
                f"Overlapping script ranges: {s1:#06x}-{e1:#06x} ({k1}) "
                f"and {s2:#06x}-{e2:#06x} ({k2})"
            )
    return ordered


SCRIPT_RANGES = _check_ranges(_RANGES)
_STARTS = [start for start, _end, _kind in SCRIPT_RANGES]


# ── Classification ──────────────────────────────────────────────────────────

def _code_point(char: str | int) -> int:
    if isinstance(char, int):
        return char
    return ord(char[0]) if char else -1


def classify(char: str | int) -> ScriptKind:
    """Return the ScriptKind of a character (or integer code point).

    Code points outside every known range, including digits, punctuation
    and the empty string, classify as OTHER.
    """
    cp = _code_point(char)
    pos = bisect.bisect_right(_STARTS, cp) - 1
    if pos < 0:
        return ScriptKind.OTHER
    start, end, kind = SCRIPT_RANGES[pos]
    if start <= cp <= end:
        return kind
    return ScriptKind.OTHER


# Arabic tashkeel, superscript alif and tatweel
ARABIC_MARKS = frozenset(
    [chr(cp) for cp in range(0x064B, 0x0653)] + ["ٰ", "ـ"]
)

# Thai vowel signs written above/below the consonant, plus tone marks
THAI_TONE_MARKS = frozenset("่้๊๋")
_THAI_MARKS = frozenset(
    ["ั"]
    + [chr(cp) for cp in range(0x0E34, 0x0E3B)]
    + [chr(cp) for cp in range(0x0E47, 0x0E4F)]
)

# Hangul trailing (final) conjoining jamo
_HANGUL_TRAILING = range(0x11A8, 0x1200)


def is_combining_mark(char: str | int, kind: ScriptKind | None = None) -> bool:
    """True if the character modifies a preceding base rather than standing alone.

    Covers Arabic tashkeel (U+064B-U+0652, U+0670) and tatweel, Thai tone
    marks and above/below vowel signs, Hangul trailing jamo, and for other
    scripts any Unicode mark (category M*).
    """
    cp = _code_point(char)
    if cp < 0:
        return False
    ch = chr(cp)
    if kind is None:
        kind = classify(cp)
    if kind is ScriptKind.ARABIC:
        return ch in ARABIC_MARKS
    if kind is ScriptKind.THAI:
        return ch in _THAI_MARKS
    if kind is ScriptKind.HANGUL:
        return cp in _HANGUL_TRAILING
    return unicodedata.category(ch).startswith("M")


# ── Text helpers ────────────────────────────────────────────────────────────

def count_scripts(text: str, *, skip_whitespace: bool = True) -> Counter:
    """Count characters per ScriptKind."""
    counts: Counter = Counter()
    for ch in text:
        if skip_whitespace and ch.isspace():
            continue
        counts[classify(ch)] += 1
    return counts


def predominant_script(text: str) -> ScriptKind | None:
    """The most frequent non-OTHER script in text, or None."""
    counts = count_scripts(text)
    counts.pop(ScriptKind.OTHER, None)
    if not counts:
        return None
    return counts.most_common(1)[0][0]


def text_direction(text: str) -> str:
    """'rtl' if the text contains Arabic or Hebrew letters, else 'ltr'."""
    if not isinstance(text, str):
        return "ltr"
    for ch in text:
        if classify(ch) in (ScriptKind.ARABIC, ScriptKind.HEBREW):
            return "rtl"
    return "ltr"
