"""Tests for character-level analysis (analyzer.py)."""

import dataclasses

import pytest

from polytranslit.analyzer import AnalysisResult, analyze
from polytranslit.languages import PROFILES
from polytranslit.scripts import ScriptKind
from polytranslit.transliterator import Transliterator


# ── Coverage ──────────────────────────────────────────────────────────────────

def test_full_coverage():
    result = analyze("Привет, мир!")
    assert result.coverage == 1.0
    assert result.script_characters == 9
    assert result.found_characters == 9
    assert result.total_characters == 12
    assert result.predominant_script is ScriptKind.CYRILLIC
    assert result.language == "russian"
    assert result.scheme == "gost"
    assert result.transliteration == "Privet, mir!"


def test_partial_coverage():
    result = analyze("بڤ", language="arabic")
    assert result.coverage == pytest.approx(0.5)
    assert [info.char for info in result.missing] == ["ڤ"]


def test_no_script_characters():
    result = analyze("hello")
    assert result.language is None
    assert result.scheme is None
    assert result.script_characters == 0
    assert result.coverage == 0.0
    assert result.predominant_script is ScriptKind.LATIN


@pytest.mark.parametrize("value", ["", None])
def test_empty_input(value):
    result = analyze(value)
    assert result == AnalysisResult()
    assert result.summary() == "No characters analyzed."


# ── Breakdown ─────────────────────────────────────────────────────────────────

def test_unit_romanization_on_first_char():
    result = analyze("مرحبا")
    assert [info.romanized for info in result.breakdown] == ["marḥaban", "", "", "", ""]
    assert [info.position for info in result.breakdown] == [0, 1, 2, 3, 4]


def test_whitespace_in_phrase_not_counted():
    result = analyze("السلام عليكم")
    assert result.script_characters == 11
    assert result.coverage == 1.0


def test_stripped_diacritics_counted_as_found():
    result = analyze("مَرْحَبًا")
    assert result.has_diacritics
    assert result.script_characters == 9
    assert result.coverage == 1.0
    assert result.transliteration == "marḥaban"
    assert [info.position for info in result.breakdown] == list(range(9))
    assert result.breakdown[1].is_diacritic
    assert not result.breakdown[0].is_diacritic


def test_no_diacritics():
    assert not analyze("مرحبا").has_diacritics


# ── Scripts and scheme ────────────────────────────────────────────────────────

def test_mixed_script():
    result = analyze("Hello Привет")
    assert result.is_mixed
    assert set(result.script_ratios) == {ScriptKind.LATIN, ScriptKind.CYRILLIC}


def test_configured_scheme_reported():
    assert analyze("Привет", language="russian", scheme="bgn").scheme == "bgn"


def test_analysis_matches_transliteration():
    t = Transliterator(language="mandarin")
    result = t.analyze("你好")
    assert result.scheme == "pinyin"
    assert result.transliteration == t.transliterate("你好")


# ── Output ────────────────────────────────────────────────────────────────────

def test_as_dict():
    d = analyze("Привет, мир!").as_dict()
    assert d["script_counts"] == {"cyrillic": 9, "other": 2}
    assert d["predominant_script"] == "cyrillic"
    assert d["coverage"] == 1.0
    assert "breakdown" not in d


def test_summary():
    text = analyze("بڤ", language="arabic").summary()
    assert "═══ Transliteration Analysis ═══" in text
    assert "Language:       arabic" in text
    assert "Unmapped characters" in text
    assert "U+06A4" in text


def test_result_is_immutable():
    result = analyze("Привет")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.coverage = 0.5


# ── Every profile and scheme ──────────────────────────────────────────────────

LANGUAGE_SCHEMES = [
    (language, scheme)
    for language, profile in PROFILES.items()
    for scheme in profile.table.scheme_ids
]


@pytest.mark.parametrize("remove_diacritics", [True, False])
@pytest.mark.parametrize("language, scheme", LANGUAGE_SCHEMES)
def test_every_table_character_is_found(language, scheme, remove_diacritics):
    table = PROFILES[language].table
    text = "".join(c for c in table.char_map if table.owns(c))
    result = analyze(text, language=language, scheme=scheme,
                     remove_diacritics=remove_diacritics)
    assert result.script_characters > 0
    assert result.coverage == 1.0
    assert not result.missing
