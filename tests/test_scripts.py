"""Tests for script classification (scripts.py)."""

import pytest

from polytranslit.scripts import (
    SCRIPT_RANGES, ScriptKind, _check_ranges, classify, count_scripts,
    is_combining_mark, predominant_script, text_direction,
)


# ── classify ──────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("char, kind", [
    ("ب", ScriptKind.ARABIC),
    ("あ", ScriptKind.HIRAGANA),
    ("ア", ScriptKind.KATAKANA),
    ("ー", ScriptKind.KATAKANA),
    ("漢", ScriptKind.KANJI),
    ("々", ScriptKind.KANJI),
    ("한", ScriptKind.HANGUL),
    ("Ж", ScriptKind.CYRILLIC),
    ("क", ScriptKind.DEVANAGARI),
    ("ก", ScriptKind.THAI),
    ("Ω", ScriptKind.GREEK),
    ("ש", ScriptKind.HEBREW),
    ("a", ScriptKind.LATIN),
    ("é", ScriptKind.LATIN),
])
def test_classify_scripts(char, kind):
    assert classify(char) is kind


@pytest.mark.parametrize("char", ["1", ".", " ", "", "・", "€"])
def test_classify_other(char):
    assert classify(char) is ScriptKind.OTHER


def test_classify_code_point():
    assert classify(0x3042) is ScriptKind.HIRAGANA
    assert classify(0x10FFFF) is ScriptKind.OTHER


def test_classify_uses_first_character():
    assert classify("Жa") is ScriptKind.CYRILLIC


def test_kind_str():
    assert str(ScriptKind.DEVANAGARI) == "devanagari"


# ── Range table ───────────────────────────────────────────────────────────────

def test_ranges_are_sorted_and_disjoint():
    for (_s1, e1, _k1), (s2, _e2, _k2) in zip(SCRIPT_RANGES, SCRIPT_RANGES[1:]):
        assert s2 > e1


def test_overlapping_ranges_rejected():
    with pytest.raises(ValueError, match="Overlapping"):
        _check_ranges([
            (0x10, 0x20, ScriptKind.LATIN),
            (0x15, 0x30, ScriptKind.GREEK),
        ])


def test_empty_range_rejected():
    with pytest.raises(ValueError, match="Empty range"):
        _check_ranges([(0x20, 0x10, ScriptKind.LATIN)])


# ── Combining marks ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("char", ["َ", "ً", "ـ", "่", "ิ", "ᆨ", "́", "्"])
def test_combining_marks(char):
    assert is_combining_mark(char)


@pytest.mark.parametrize("char", ["ب", "ก", "า", "한", "a", "", "क"])
def test_not_combining_marks(char):
    assert not is_combining_mark(char)


# ── Text helpers ──────────────────────────────────────────────────────────────

def test_count_scripts_skips_whitespace():
    counts = count_scripts("ab Жи 1")
    assert counts[ScriptKind.LATIN] == 2
    assert counts[ScriptKind.CYRILLIC] == 2
    assert counts[ScriptKind.OTHER] == 1


def test_count_scripts_with_whitespace():
    assert count_scripts("a b", skip_whitespace=False)[ScriptKind.OTHER] == 1


def test_predominant_script():
    assert predominant_script("Привет, world") is ScriptKind.CYRILLIC
    assert predominant_script("123 !?") is None
    assert predominant_script("") is None


def test_text_direction():
    assert text_direction("مرحبا") == "rtl"
    assert text_direction("hello שלום") == "rtl"
    assert text_direction("Привет") == "ltr"
    assert text_direction(None) == "ltr"
