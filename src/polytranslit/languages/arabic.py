"""
Arabic romanization: ALA-LC (default), BGN/PCGN, ISO 233 and a simplified
ASCII scheme, plus a dictionary of common words and phrases.

Rules handle the definite article (sun/moon letter assimilation) and
word-final ta marbuta.  The module also carries the small text utilities
used around Arabic input: diacritic removal, normalization of alif forms,
numeral and punctuation conversion.
"""

from __future__ import annotations

import re

from polytranslit.rules import RuleContext, RuleHit, cluster_rule
from polytranslit.scripts import ARABIC_MARKS, ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


# ── Character maps ──────────────────────────────────────────────────────────

ALA_LC = {
    # alif and hamza forms
    "ا": "a", "أ": "a", "إ": "i", "آ": "ā", "ء": "'",
    "ئ": "'", "ؤ": "'", "ى": "á",
    # letters
    "ب": "b", "ت": "t", "ث": "th", "ج": "j", "ح": "ḥ", "خ": "kh",
    "د": "d", "ذ": "dh", "ر": "r", "ز": "z", "س": "s", "ش": "sh",
    "ص": "ṣ", "ض": "ḍ", "ط": "ṭ", "ظ": "ẓ", "ع": "'", "غ": "gh",
    "ف": "f", "ق": "q", "ك": "k", "ل": "l", "م": "m", "ن": "n",
    "ه": "h", "و": "w", "ي": "y", "ة": "t",
    # tashkeel (only reached when diacritics are kept)
    "َ": "a", "ِ": "i", "ُ": "u",
    "ً": "an", "ٍ": "in", "ٌ": "un",
    "ْ": "", "ّ": "", "ٰ": "ā", "ـ": "",
    # Persian/Urdu letters
    "پ": "p", "چ": "ch", "ژ": "zh", "گ": "g", "ک": "k", "ی": "y",
    # punctuation written in the Arabic block
    "،": ",", "؛": ";", "؟": "?", "٪": "%",
}

ARABIC_INDIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"
EASTERN_ARABIC_INDIC_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
for _digits in (ARABIC_INDIC_DIGITS, EASTERN_ARABIC_INDIC_DIGITS):
    ALA_LC.update({d: str(n) for n, d in enumerate(_digits)})

OVERLAYS = {
    "bgn": {
        "ح": "h", "ذ": "th", "ص": "s", "ض": "d", "ط": "t", "ظ": "z",
    },
    "iso": {
        "ا": "ā", "أ": "aʾ", "إ": "iʾ", "آ": "ʾā", "ء": "ʾ",
        "ئ": "ʾ", "ؤ": "ʾ", "ى": "ā",
        "ث": "ṯ", "ج": "ǧ", "خ": "ḫ", "ذ": "ḏ", "ش": "š",
        "ع": "ʿ", "غ": "ġ", "ة": "ẗ",
        "لا": "lā",
    },
    "simplified": {
        "آ": "aa", "ء": "", "ئ": "", "ؤ": "", "ى": "a",
        "ح": "h", "ص": "s", "ض": "d", "ط": "t", "ظ": "z", "ع": "",
        "ة": "h", "ٰ": "a",
        "لا": "la",
    },
}

CLUSTERS = {
    "لا": "lā",
}

PUNCTUATION = {
    "؟": "?", "؛": ";", "،": ",", "٪": "%",
}


# ── Word dictionary ─────────────────────────────────────────────────────────

WORDS = {
    # religious terms
    "الله": "Allāh", "اسلام": "Islām", "قرآن": "Qurʾān", "محمد": "Muḥammad",
    "مسلم": "Muslim", "صلاة": "ṣalāh", "زكاة": "zakāh", "حج": "ḥajj",
    "صوم": "ṣawm", "جهاد": "jihād", "شريعة": "sharīʿah", "سنة": "sunnah",
    "حديث": "ḥadīth", "إمام": "imām", "مسجد": "masjid", "رمضان": "Ramaḍān",
    "عيد": "ʿīd",
    # greetings and phrases
    "السلام عليكم": "al-salāmu ʿalaykum",
    "وعليكم السلام": "wa-ʿalaykumu al-salām",
    "أهلا وسهلا": "ahlan wa-sahlan",
    "مرحبا": "marḥaban",
    "شكرا": "shukran",
    "عفوا": "ʿafwan",
    "من فضلك": "min faḍlik",
    "لو سمحت": "law samaḥt",
    "إن شاء الله": "in shāʾ Allāh",
    "الحمد لله": "al-ḥamdu li-llāh",
    "ماشاء الله": "mā shāʾa Allāh",
    "بارك الله فيك": "bāraka Allāhu fīk",
    # everyday vocabulary
    "بيت": "bayt", "مدرسة": "madrasah", "كتاب": "kitāb", "قلم": "qalam",
    "ورقة": "waraqah", "ماء": "māʾ", "خبز": "khubz", "لحم": "laḥm",
    "سمك": "samak", "فواكه": "fawākih", "خضروات": "khuḍrāwāt",
    # family
    "أب": "ab", "أم": "umm", "ابن": "ibn", "بنت": "bint", "أخ": "akh",
    "أخت": "ukht", "جد": "jadd", "جدة": "jaddah", "عم": "ʿamm",
    "عمة": "ʿammah", "خال": "khāl", "خالة": "khālah", "زوج": "zawj",
    "زوجة": "zawjah",
    # numbers
    "واحد": "wāḥid", "اثنان": "ithnān", "ثلاثة": "thalāthah",
    "أربعة": "arbaʿah", "خمسة": "khamsah", "ستة": "sittah", "سبعة": "sabʿah",
    "ثمانية": "thamāniyah", "تسعة": "tisʿah", "عشرة": "ʿasharah",
    "عشرون": "ʿishrūn", "ثلاثون": "thalāthūn", "أربعون": "arbaʿūn",
    "خمسون": "khamsūn", "مئة": "miʾah", "ألف": "alf",
    # days of the week
    "الأحد": "al-Aḥad", "الاثنين": "al-Ithnayn", "الثلاثاء": "al-Thalāthāʾ",
    "الأربعاء": "al-Arbiʿāʾ", "الخميس": "al-Khamīs", "الجمعة": "al-Jumʿah",
    "السبت": "al-Sabt",
    # colours
    "أبيض": "abyaḍ", "أسود": "aswad", "أحمر": "aḥmar", "أزرق": "azraq",
    "أخضر": "akhḍar", "أصفر": "aṣfar",
    # directions
    "شمال": "shimāl", "يمين": "yamīn", "شرق": "sharq", "غرب": "gharb",
    "جنوب": "janūb",
    # time
    "اليوم": "al-yawm", "غدا": "ghadan", "أمس": "ams", "صباح": "ṣabāḥ",
    "مساء": "masāʾ", "ليل": "layl", "نهار": "nahār", "ساعة": "sāʿah",
    "دقيقة": "daqīqah", "ثانية": "thāniyah",
    # places
    "مصر": "Miṣr", "سوريا": "Sūriyā", "العراق": "al-ʿIrāq",
    "الأردن": "al-Urdun", "لبنان": "Lubnān", "المغرب": "al-Maghrib",
    "الجزائر": "al-Jazāʾir", "تونس": "Tūnis", "السعودية": "al-Saʿūdiyyah",
    "الإمارات": "al-Imārāt", "قطر": "Qaṭar", "الكويت": "al-Kuwayt",
    "البحرين": "al-Baḥrayn", "عمان": "ʿUmān", "اليمن": "al-Yaman",
    # academic and professional
    "جامعة": "jāmiʿah", "طالب": "ṭālib", "طالبة": "ṭālibah",
    "أستاذ": "ustādh", "معلم": "muʿallim", "طبيب": "ṭabīb",
    "مهندس": "muhandis", "محاسب": "muḥāsib", "محامي": "muḥāmī",
    # verbs
    "كتب": "kataba", "قرأ": "qaraʾa", "ذهب": "dhahaba", "أكل": "akala",
    "شرب": "shariba", "نام": "nāma", "عمل": "ʿamila", "درس": "darasa",
    "تعلم": "taʿallama",
    # adjectives
    "كبير": "kabīr", "صغير": "ṣaghīr", "طويل": "ṭawīl", "قصير": "qaṣīr",
    "جميل": "jamīl", "قبيح": "qabīḥ", "سريع": "sarīʿ", "بطيء": "baṭīʾ",
    "ذكي": "dhakī", "غبي": "ghubī",
    # question words
    "ما": "mā", "من": "man", "متى": "matā", "أين": "ayna", "كيف": "kayfa",
    "لماذا": "li-mādhā", "كم": "kam",
    # prepositions
    "في": "fī", "على": "ʿalā", "تحت": "taḥta", "فوق": "fawqa",
    "أمام": "amāma", "وراء": "warāʾa", "بين": "bayna", "مع": "maʿa",
    "بدون": "bidūn",
}


# ── Rules ───────────────────────────────────────────────────────────────────

SUN_LETTERS = frozenset("تثدذرزسشصضطظلن")

_ARTICLE = "ال"


def definite_article(ctx: RuleContext) -> RuleHit | None:
    """ال at the start of a word: assimilate before sun letters."""
    if not ctx.at_word_start or ctx.text[ctx.index:ctx.index + 2] != _ARTICLE:
        return None
    following = ctx.char(2)
    if not following or not ctx.table.owns(following):
        return None
    if following in SUN_LETTERS:
        consonant = ctx.lookup(following) or following
        return RuleHit(f"a{consonant}-{consonant}", 3, "sun_letter")
    return RuleHit("al-", 2, "moon_letter")


def ta_marbuta(ctx: RuleContext) -> RuleHit | None:
    """Word-final ة is pronounced -ah (-h in the simplified scheme)."""
    if ctx.current != "ة":
        return None
    following = ctx.char(1)
    if following and ctx.table.owns(following) and following.isalpha():
        return None
    return RuleHit("h" if ctx.scheme == "simplified" else "ah", 1, "ta_marbuta")


RULES = (definite_article, ta_marbuta, cluster_rule)


# ── Text utilities ──────────────────────────────────────────────────────────

_DIACRITICS_RE = re.compile("[" + "".join(sorted(ARABIC_MARKS)) + "]")
_ALIF_FORMS_RE = re.compile("[إأآ]")
_NUMERALS = str.maketrans(
    ARABIC_INDIC_DIGITS + EASTERN_ARABIC_INDIC_DIGITS, "0123456789" * 2
)
_PUNCTUATION = str.maketrans(PUNCTUATION)


def remove_arabic_diacritics(text: str) -> str:
    """Strip tashkeel, superscript alif and tatweel."""
    if not isinstance(text, str):
        return ""
    return _DIACRITICS_RE.sub("", text)


def normalize_arabic(text: str) -> str:
    """Remove diacritics, fold alif variants to ا and ta marbuta to ه."""
    text = remove_arabic_diacritics(text)
    text = _ALIF_FORMS_RE.sub("ا", text)
    return text.replace("ة", "ه")


def convert_arabic_numerals(text: str) -> str:
    if not isinstance(text, str):
        return ""
    return text.translate(_NUMERALS)


def normalize_arabic_punctuation(text: str) -> str:
    if not isinstance(text, str):
        return ""
    return text.translate(_PUNCTUATION)


# ── Profile ─────────────────────────────────────────────────────────────────

TABLE = ScriptTable(
    name="arabic",
    display_name="Arabic",
    kinds=frozenset({ScriptKind.ARABIC}),
    schemes=(
        SchemeInfo("ala", "ALA-LC", "American Library Association - Library of Congress"),
        SchemeInfo("bgn", "BGN/PCGN",
                   "US Board on Geographic Names / Permanent Committee on Geographical Names"),
        SchemeInfo("iso", "ISO 233", "International standard with diacritics"),
        SchemeInfo("simplified", "Simplified", "ASCII-only romanization without diacritics"),
    ),
    char_map=ALA_LC,
    overlays=OVERLAYS,
    phrases=WORDS,
    max_phrase_length=30,
    clusters=CLUSTERS,
    strip_marks=ARABIC_MARKS,
    ascii_schemes=frozenset({"simplified"}),
)
