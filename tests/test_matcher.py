"""Tests for ScriptTable lookups and longest-match phrase segmentation (tables.py, matcher.py)."""

import pytest

from polytranslit.matcher import Match, is_word_boundary, longest_match
from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable, fold_ascii


# ── Helpers ───────────────────────────────────────────────────────────────────

def _table(**overrides) -> ScriptTable:
    fields = dict(
        name="toy",
        display_name="Toy",
        kinds=frozenset({ScriptKind.CYRILLIC}),
        schemes=(SchemeInfo("base", "Base"), SchemeInfo("alt", "Alternative")),
        char_map={"д": "d", "а": "a", "н": "n", "е": "e", "т": "t"},
        overlays={"alt": {"д": "dh", "на": "NA"}},
        phrases={"да": "yes", "дане": "dane"},
        max_phrase_length=4,
        clusters={"на": "na"},
    )
    fields.update(overrides)
    return ScriptTable(**fields)


# ── Word boundaries ───────────────────────────────────────────────────────────

def test_boundary_at_end_of_text():
    assert is_word_boundary("да", 2)


def test_boundary_before_space_and_punctuation():
    assert is_word_boundary("да нет", 2)
    assert is_word_boundary("да, нет", 2)


def test_no_boundary_inside_word():
    assert not is_word_boundary("дане", 2)


def test_boundary_at_script_change():
    assert is_word_boundary("даok", 2)


def test_combining_mark_continues_word():
    assert not is_word_boundary("مرحباً", 5)


# ── longest_match ─────────────────────────────────────────────────────────────

def test_longest_phrase_wins():
    match = longest_match("дане", 0, _table())
    assert match == Match("dane", 4, "дане")


def test_phrase_must_end_on_boundary():
    # "да" is a prefix of the unlisted word "данет"
    assert longest_match("данет", 0, _table()) is None
    assert longest_match("да нет", 0, _table()).romanized == "yes"


def test_boundary_not_required():
    match = longest_match("данет", 0, _table(requires_word_boundary=False))
    assert match.romanized == "dane"
    assert match.length == 4


def test_max_phrase_length_caps_candidates():
    table = _table(phrases={"да": "yes"}, max_phrase_length=2)
    assert longest_match("да", 0, table).length == 2


def test_match_from_offset():
    assert longest_match("т да", 2, _table()).source == "да"


def test_no_match_past_end():
    assert longest_match("да", 2, _table()) is None


def test_no_phrases():
    assert longest_match("да", 0, _table(phrases={})) is None


def test_case_insensitive_phrases():
    table = _table(phrases={"Да": "yes"}, case_insensitive=True)
    match = longest_match("ДА", 0, table)
    assert match.romanized == "yes"
    assert match.source == "ДА"


def test_zero_length_match_rejected():
    with pytest.raises(ValueError):
        Match("x", 0, "")


# ── ScriptTable ───────────────────────────────────────────────────────────────

def test_default_scheme_is_first():
    table = _table()
    assert table.default_scheme == "base"
    assert table.scheme_ids == ("base", "alt")
    assert table.has_scheme("alt")
    assert not table.has_scheme("gost")


def test_overlay_wins_over_default_map():
    table = _table()
    assert table.lookup_char("д") == "d"
    assert table.lookup_char("д", "alt") == "dh"
    assert table.lookup_char("а", "alt") == "a"


def test_lookup_char_unmapped():
    assert _table().lookup_char("ж") is None


def test_composer_fallback():
    table = _table(composer=lambda char, scheme: f"<{char}:{scheme}>")
    assert table.lookup_char("ж") == "<ж:base>"
    assert table.lookup_char("ж", "alt") == "<ж:alt>"
    assert table.lookup_char("д") == "d"


def test_lookup_cluster_uses_overlay():
    table = _table()
    assert table.lookup_cluster("нал", 0).romanized == "na"
    assert table.lookup_cluster("нал", 0, "alt").romanized == "NA"
    assert table.lookup_cluster("ан", 0) is None


def test_owns():
    table = _table()
    assert table.owns("ж")
    assert not table.owns("z")


def test_tables_are_read_only():
    table = _table()
    with pytest.raises(TypeError):
        table.char_map["ж"] = "zh"


def test_table_requires_scheme():
    with pytest.raises(ValueError, match="scheme"):
        _table(schemes=())


def test_overlay_for_undeclared_scheme():
    with pytest.raises(ValueError, match="undeclared"):
        _table(overlays={"gost": {"д": "d"}})


def test_ascii_scheme_folds_phrases():
    table = _table(phrases={"да": "dá", "дане": "dʿane"}, ascii_schemes=frozenset({"alt"}))
    assert table.lookup_phrase("да", 0).romanized == "dá"
    assert table.lookup_phrase("да", 0, "alt").romanized == "da"
    match = table.lookup_phrase("дане", 0, "alt")
    assert (match.romanized, match.length) == ("dane", 4)


def test_ascii_folding_for_undeclared_scheme():
    with pytest.raises(ValueError, match="undeclared"):
        _table(ascii_schemes=frozenset({"gost"}))


@pytest.mark.parametrize("text, expected", [
    ("marḥaban", "marhaban"),
    ("Qurʾān", "Quran"),
    ("al-salāmu ʿalaykum", "al-salamu alaykum"),
    ("plain", "plain"),
])
def test_fold_ascii(text, expected):
    assert fold_ascii(text) == expected


def test_phrase_longer_than_limit():
    with pytest.raises(ValueError, match="length"):
        _table(phrases={"данет": "x"})


def test_single_char_cluster_rejected():
    with pytest.raises(ValueError, match="cluster"):
        _table(clusters={"д": "d"})


def test_scheme_info_as_dict():
    assert SchemeInfo("bgn", "BGN/PCGN").as_dict() == {
        "id": "bgn", "display_name": "BGN/PCGN", "description": "",
    }
