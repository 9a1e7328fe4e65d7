"""Tests for Transliterator (transliterator.py) and the per-language rules it runs."""

import pytest

from polytranslit.config import TransliterationConfig
from polytranslit.errors import InvalidSchemeError, UnknownLanguageError
from polytranslit.languages import PROFILES
from polytranslit.languages.mandarin import TONE_NUMBERS
from polytranslit.scripts import ScriptKind, classify
from polytranslit.transliterator import (
    Segment, Transliterator, join_segments, mirror_case, number_tones,
    transliterate, transliterate_batch,
)


def _t(text, **options):
    return Transliterator(**options).transliterate(text)


# ── Core scenarios ────────────────────────────────────────────────────────────

def test_arabic_greeting_is_fully_latin():
    out = _t("مرحبا")
    assert out == "marḥaban"
    assert not any(classify(c) is ScriptKind.ARABIC for c in out)


def test_arabic_phrase():
    out = _t("السلام عليكم")
    assert "salām" in out
    assert "ʿalaykum" in out


def test_japanese_greeting():
    assert _t("こんにちは") == "konnichiwa"


def test_mandarin_tones():
    assert _t("你好") == "nǐ hǎo"
    assert _t("你好", include_tones=False) == "ni hao"
    assert _t("你好", numeric_tones=True) == "ni3 hao3"


def test_sokuon_doubles_consonant():
    assert _t("っか").startswith("kk")


def test_batch_matches_single_calls():
    texts = ["مرحبا", "こんにちは", "你好", "Привет", ""]
    t = Transliterator()
    assert t.transliterate_batch(texts) == [t.transliterate(x) for x in texts]


# ── Input handling ────────────────────────────────────────────────────────────

def test_latin_text_unchanged(auto):
    assert auto.transliterate("Hello, World 42!") == "Hello, World 42!"


@pytest.mark.parametrize("value", ["", None, 42, ["a"]])
def test_non_text_gives_empty_string(auto, value):
    assert auto.transliterate(value) == ""


@pytest.mark.parametrize("value", ["abc", None, 3])
def test_batch_requires_list_or_tuple(auto, value):
    assert auto.transliterate_batch(value) == []


def test_batch_accepts_tuple(auto):
    assert auto.transliterate_batch(("你好",)) == ["nǐ hǎo"]


def test_whitespace_normalized(auto):
    assert auto.transliterate("  Привет \n  мир  ") == "Privet mir"


# ── Configuration ─────────────────────────────────────────────────────────────

def test_invalid_scheme_raises():
    with pytest.raises(InvalidSchemeError):
        Transliterator(language="arabic", scheme="nope")


def test_unknown_language_raises():
    with pytest.raises(UnknownLanguageError):
        Transliterator(language="klingon")


def test_config_and_options_combine():
    cfg = TransliterationConfig(language="russian")
    t = Transliterator(cfg, scheme="simplified")
    assert t.config.scheme == "simplified"
    assert cfg.scheme is None


def test_with_options_returns_new_instance():
    t = Transliterator(language="mandarin")
    plain = t.with_options(include_tones=False)
    assert plain is not t
    assert t.transliterate("你好") == "nǐ hǎo"
    assert plain.transliterate("你好") == "ni hao"


def test_from_config(config_file):
    t = Transliterator.from_config(config_file)
    assert t.config.scheme == "bgn"
    assert t.transliterate("Привет") == "Privet"


def test_module_shortcuts():
    assert transliterate("你好", include_tones=False) == "ni hao"
    assert transliterate_batch(["谢谢"], language="mandarin") == ["xiè xie"]


def test_explicit_language_ignores_other_scripts():
    # Cyrillic is not owned by the Arabic profile, so it passes through
    assert _t("مرحبا Жук", language="arabic") == "marḥaban Жук"


# ── Unmapped characters ───────────────────────────────────────────────────────

def test_unmapped_character_marked():
    assert _t("بڤ", language="arabic") == "b[ڤ]"
    assert _t("\ufe8f", language="arabic") == "[\ufe8f]"  # presentation form


def test_hide_untranslated():
    assert _t("بڤ", language="arabic", show_untranslated=False) == "bڤ"


# ── Case ──────────────────────────────────────────────────────────────────────

def test_source_case_by_default():
    assert _t("Москва") == "Moskva"
    assert _t("МОСКВА") == "MOSKVA"
    assert _t("الله") == "Allāh"
    assert transliterate("Москва") == "Moskva"


def test_lowercase_without_preserve_case():
    assert _t("Москва", preserve_case=False) == "moskva"
    assert _t("الله", preserve_case=False) == "allāh"


def test_no_lowercase_keeps_table_case():
    assert _t("الله", preserve_case=False, lowercase=False) == "Allāh"


def test_preserve_case():
    assert _t("Привет", preserve_case=True) == "Privet"
    assert _t("Αθήνα", preserve_case=True) == "Athina"


def test_preserve_case_caseless_script():
    assert _t("الله", preserve_case=True) == "Allāh"


def test_mirror_case():
    assert mirror_case("Щ", "shch") == "Shch"
    assert mirror_case("ДА", "da") == "DA"
    assert mirror_case("ب", "Baa") == "Baa"


# ── Punctuation ───────────────────────────────────────────────────────────────

def test_mandarin_punctuation():
    assert _t("你好，世界") == "nǐ hǎo, shì jiè"


def test_arabic_punctuation():
    assert _t("نعم؟", language="arabic").endswith("?")


def test_drop_punctuation():
    assert _t("Привет, мир!", preserve_punctuation=False) == "Privet mir"


def test_japanese_brackets_removed():
    assert _t("「こんにちは」") == "konnichiwa"


# ── Dictionary vs. characters ─────────────────────────────────────────────────

def test_char_first_skips_dictionary():
    assert _t("学校", language="japanese") == "gakkou"
    assert _t("学校", language="japanese", word_first=False) != "gakkou"


def test_mandarin_digits_spaced():
    assert _t("我有3个苹果") == "wǒ yǒu 3 gè píng guǒ"


# ── Arabic ────────────────────────────────────────────────────────────────────

def test_arabic_moon_letter_article():
    assert _t("الكتاب") == "al-kitāb"


def test_arabic_sun_letter_article():
    assert _t("الشمس").startswith("ash-sh")


def test_arabic_ta_marbuta():
    assert _t("مدينة").endswith("ah")
    assert _t("مدينة", language="arabic", scheme="simplified").endswith("h")
    assert not _t("مدينة", language="arabic", scheme="simplified").endswith("ah")


def test_arabic_diacritics_removed_before_lookup():
    assert _t("مَرْحَبًا") == "marḥaban"


def test_arabic_diacritics_kept():
    assert _t("مَرْحَبًا", remove_diacritics=False) == "marḥabana"


def test_arabic_schemes():
    assert _t("ش", language="arabic") == "sh"
    assert _t("ش", language="arabic", scheme="iso") == "š"
    assert _t("ح", language="arabic", scheme="bgn") == "h"


def test_arabic_simplified_is_ascii():
    assert _t("مرحبا", language="arabic", scheme="simplified") == "marhaban"
    assert _t("السلام عليكم", language="arabic", scheme="simplified") == "al-salamu alaykum"
    assert _t("قرآن", language="arabic", scheme="simplified") == "Quran"
    assert _t("مَرْحَبًا يا صديقي", language="arabic", scheme="simplified").isascii()


def test_arabic_numerals():
    assert _t("٢٠٢٤") == "2024"


def test_no_script_rules():
    assert _t("الشمس", handle_script_rules=False) == "alshms"


# ── Japanese ──────────────────────────────────────────────────────────────────

def test_japanese_sokuon_before_ch():
    assert _t("マッチ") == "matchi"
    assert _t("ちょっと") == "chotto"


def test_japanese_choonpu():
    assert _t("コーヒー") == "koohii"


def test_japanese_yoon():
    assert _t("きょう") == "kyou"


def test_japanese_compound():
    assert _t("日本語", language="japanese") == "nihongo"


def test_japanese_kanji_spacing():
    assert _t("日本人", language="japanese") == "nihon jin"


@pytest.mark.parametrize("mode, expected", [
    ("first", "jin"),
    ("all", "jin/hito"),
    ("context", "hito"),
])
def test_kanji_reading_modes(mode, expected):
    assert _t("人", language="japanese", kanji_reading=mode) == expected


def test_han_alone_reads_as_mandarin():
    assert _t("人") == "rén"


# ── Russian ───────────────────────────────────────────────────────────────────

def test_russian_hard_sign():
    assert _t("съезд") == 's"ezd'
    assert _t("съезд", language="russian", scheme="simplified") == "sezd"


def test_russian_soft_sign_before_vowel():
    assert _t("статья") == "statyya"


def test_russian_initial_yo():
    assert _t("Ёлка") == "Yolka"
    assert _t("Ёлка", preserve_case=False) == "yolka"


def test_russian_scientific():
    assert _t("щи", language="russian", scheme="scientific") == "ŝi"


# ── Thai ──────────────────────────────────────────────────────────────────────

def test_thai_dictionary_word():
    assert _t("สวัสดี") == "sawasdee"


@pytest.mark.parametrize("text, expected", [
    ("กิน", "kin"),
    ("เด็ก", "dek"),
    ("แดง", "daeng"),
    ("คน", "khon"),
    ("ทำ", "tham"),
    ("ตัว", "tua"),
])
def test_thai_syllables(text, expected):
    assert _t(text) == expected


def test_thai_final_after_tone_mark():
    assert _t("บ้าน", word_first=False) == "ban"


def test_thai_repetition_mark():
    assert _t("เด็กๆ") == "dek dek"
    assert _t("เด็ก ๆ") == "dek dek"


def test_thai_repetition_ignores_punctuation():
    assert _t("เด็ก!ๆ") == "dek!"
    assert _t("สวัสดี เด็ก!ๆ") == "sawasdee dek!"


def test_thai_digits():
    assert _t("๑๒") == "12"


def test_thai_ala_tones():
    assert _t("ก่า", language="thai", scheme="ala") == "kā̀"
    assert _t("ก่า", language="thai", scheme="ala", include_tones=False) == "kā"


# ── Korean ────────────────────────────────────────────────────────────────────

def test_korean_dictionary_word():
    assert _t("안녕하세요") == "annyeonghaseyo"


def test_korean_liaison():
    assert _t("한국어") == "hangugeo"


def test_korean_palatalization():
    assert _t("같이") == "gachi"


@pytest.mark.parametrize("scheme, expected", [
    ("rr", "hangeul"),
    ("mr", "hankŭl"),
    ("yale", "hankul"),
])
def test_korean_schemes(scheme, expected):
    assert _t("한글", language="korean", scheme=scheme) == expected


# ── Devanagari ────────────────────────────────────────────────────────────────

def test_devanagari_dictionary_word():
    assert _t("नमस्ते") == "namaste"


def test_devanagari_matra_and_inherent_vowel():
    assert _t("भारत") == "bhārata"


def test_devanagari_virama():
    assert _t("कर्म") == "karma"


def test_devanagari_conjunct():
    assert _t("क्षमा") == "kṣamā"
    assert _t("क्षमा", language="devanagari", scheme="harvard", lowercase=False) == "kSamA"


def test_devanagari_nukta():
    assert _t("\u091c\u093c") == "za"  # base letter + nukta
    assert _t("\u095b") == "za"        # precomposed


# ── Greek and Hebrew ──────────────────────────────────────────────────────────

def test_greek():
    assert _t("Αθήνα") == "Athina"
    assert _t("Αθήνα", preserve_case=False) == "athina"


def test_hebrew():
    assert _t("שלום") == "shlvm"


# ── Segments ──────────────────────────────────────────────────────────────────

def test_segment_methods():
    profile, segments = Transliterator(language="arabic").segment("مرحبا 1")
    assert profile.id == "arabic"
    assert [s.method for s in segments] == ["phrase", "whitespace", "passthrough"]
    assert segments[0].positions == (0, 1, 2, 3, 4)
    assert segments[2].alnum


def test_stripped_marks_keep_positions():
    _profile, segments = Transliterator().segment("بَ")
    assert [(s.start, s.method) for s in segments] == [(0, "char"), (1, "stripped")]


def test_segment_without_supported_script():
    profile, segments = Transliterator().segment("abc")
    assert profile is None
    assert all(not s.script for s in segments)


def test_join_segments_spacing():
    a = Segment((0,), "你", "nǐ", "char", ScriptKind.KANJI, script=True, found=True, spaced=True)
    b = Segment((1,), "3", "3", "passthrough", ScriptKind.OTHER, alnum=True)
    c = Segment((2,), "，", ", ", "punctuation", ScriptKind.OTHER)
    assert join_segments([a, b]) == "nǐ 3"
    assert join_segments([a, c]) == "nǐ,"


def test_number_tones():
    assert number_tones("zhōng guó", TONE_NUMBERS) == "zhong1 guo2"
    assert number_tones("de", TONE_NUMBERS) == "de"


# ── Every profile and scheme ──────────────────────────────────────────────────

LANGUAGE_SCHEMES = [
    (language, scheme)
    for language, profile in PROFILES.items()
    for scheme in profile.table.scheme_ids
]

SAMPLES = {
    "arabic": "مرحبا، السلام عليكم. الكتاب",
    "japanese": "こんにちは、コーヒー",
    "mandarin": "你好，世界",
    "russian": "Привет, мир! Съезд",
    "thai": "สวัสดี เด็กๆ",
    "korean": "안녕하세요 한국어",
    "devanagari": "नमस्ते भारत",
    "greek": "Αθήνα",
    "hebrew": "שלום",
}


def test_every_profile_has_a_sample():
    assert set(SAMPLES) == set(PROFILES)


@pytest.mark.parametrize("language, scheme", LANGUAGE_SCHEMES)
def test_output_is_stable(auto, language, scheme):
    t = Transliterator(language=language, scheme=scheme)
    once = t.transliterate(SAMPLES[language])
    assert once
    assert t.transliterate(once) == once
    assert auto.transliterate(once) == once
