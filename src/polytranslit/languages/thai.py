"""
Thai romanization: RTGS (default), ALA-LC and a simplified phonetic scheme.

Thai writes some vowels before the consonant they follow in speech, puts
vowel signs and tone marks above or below it, and leaves short vowels
unwritten.  The rules here work syllable by syllable:

    preposed vowel   เ แ โ ใ ไ + consonant [+ tone] [+ trailing part]
    consonant        + [tone] + vowel sign, or + ัว, or + อ
    bare consonant   opens a syllable with an inherent vowel, or closes
                     one with its final-position sound (RTGS finals)

Tone marks emit the scheme's tone diacritic (ALA-LC) or nothing.
"""

from __future__ import annotations

from polytranslit.rules import RuleContext, RuleHit
from polytranslit.scripts import THAI_TONE_MARKS, ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


# ── Letters ─────────────────────────────────────────────────────────────────

CONSONANTS = {
    "ก": "k", "ข": "kh", "ฃ": "kh", "ค": "kh", "ฅ": "kh", "ฆ": "kh",
    "ง": "ng", "จ": "ch", "ฉ": "ch", "ช": "ch", "ซ": "s", "ฌ": "ch",
    "ญ": "y", "ฎ": "d", "ฏ": "t", "ฐ": "th", "ฑ": "th", "ฒ": "th",
    "ณ": "n", "ด": "d", "ต": "t", "ถ": "th", "ท": "th", "ธ": "th",
    "น": "n", "บ": "b", "ป": "p", "ผ": "ph", "ฝ": "f", "พ": "ph",
    "ฟ": "f", "ภ": "ph", "ม": "m", "ย": "y", "ร": "r", "ฤ": "rue",
    "ล": "l", "ฦ": "lue", "ว": "w", "ศ": "s", "ษ": "s", "ส": "s",
    "ห": "h", "ฬ": "l", "อ": "", "ฮ": "h",
}

VOWELS = {
    "ะ": "a", "ั": "a", "า": "a", "ำ": "am",
    "ิ": "i", "ี": "i", "ึ": "ue", "ื": "ue",
    "ุ": "u", "ู": "u", "เ": "e", "แ": "ae",
    "โ": "o", "ใ": "ai", "ไ": "ai", "ๅ": "a",
}

MARKS = {
    # tone marks (RTGS does not write tones)
    "่": "", "้": "", "๊": "", "๋": "",
    # silent markers
    "์": "", "็": "", "ํ": "", "๎": "",
    # punctuation signs
    "ฯ": "...", "๏": "", "๚": "", "๛": "",
}

DIGITS = {chr(0x0E50 + n): str(n) for n in range(10)}

# Sound of a consonant that closes a syllable
FINALS = {
    **{c: "k" for c in "กขฃคฅฆ"},
    "ง": "ng",
    **{c: "t" for c in "จฉชซฌฎฏฐฑฒดตถทธศษส"},
    **{c: "n" for c in "ญณนรลฬ"},
    **{c: "p" for c in "บปผฝพฟภ"},
    "ม": "m", "ย": "i", "ว": "o", "อ": "", "ห": "", "ฮ": "",
}

OVERLAYS = {
    "ala": {
        "ญ": "ỳ", "ฎ": "ḍ", "ฏ": "ṭ", "ฐ": "ṭh", "ฑ": "ṭh", "ฒ": "ṭh",
        "ณ": "ṇ", "ฤ": "r̥", "ฦ": "l̥", "ศ": "ś", "ษ": "ṣ", "ฬ": "ḷ",
        "า": "ā", "ำ": "am̐", "ี": "ī", "ึ": "ụ", "ื": "ụ̄", "ู": "ū",
        "แ": "æ", "ใ": "ai", "ไ": "ai",
        "่": "̀", "้": "̂", "๊": "́", "๋": "̌",
    },
    "simplified": {
        "ก": "g", "ข": "k", "ฃ": "k", "ค": "k", "ฅ": "k", "ฆ": "k",
        "จ": "j", "ฤ": "ri", "ฦ": "lu",
        "า": "aa", "ี": "ii", "ู": "uu",
    },
}

# Vowels spelled around the consonant; "_" stands for the consonant.
COMPLEX_VOWELS = {
    "rtgs": {
        "เ_ะ": "e", "เ_็": "e", "เ_": "e", "แ_ะ": "ae", "แ_็": "ae", "แ_": "ae",
        "โ_ะ": "o", "โ_": "o", "เ_าะ": "o", "เ_า": "ao", "เ_อะ": "oe",
        "เ_อ": "oe", "เ_ิ": "oe", "เ_ียะ": "ia", "เ_ีย": "ia",
        "เ_ือะ": "uea", "เ_ือ": "uea", "ใ_": "ai", "ไ_": "ai",
        "_ัวะ": "ua", "_ัว": "ua", "_อ": "o",
    },
    "ala": {
        "เ_ะ": "e", "เ_็": "e", "เ_": "ē", "แ_ะ": "æ", "แ_็": "æ", "แ_": "ǣ",
        "โ_ะ": "o", "โ_": "ō", "เ_าะ": "ǫ", "เ_า": "ao", "เ_อะ": "œ",
        "เ_อ": "œ̄", "เ_ิ": "œ̄", "เ_ียะ": "ia", "เ_ีย": "īa",
        "เ_ือะ": "ụa", "เ_ือ": "ụ̄a", "ใ_": "ai", "ไ_": "ai",
        "_ัวะ": "ua", "_ัว": "ūa", "_อ": "ō",
    },
    "simplified": {
        "เ_ะ": "e", "เ_็": "e", "เ_": "e", "แ_ะ": "ae", "แ_็": "ae", "แ_": "ae",
        "โ_ะ": "o", "โ_": "o", "เ_าะ": "aw", "เ_า": "ao", "เ_อะ": "er",
        "เ_อ": "er", "เ_ิ": "er", "เ_ียะ": "ia", "เ_ีย": "ia",
        "เ_ือะ": "uea", "เ_ือ": "uea", "ใ_": "ai", "ไ_": "ai",
        "_ัวะ": "ua", "_ัว": "ua", "_อ": "o",
    },
}

# Trailing parts of each preposed vowel, longest first
_TRAILING = {
    "เ": ("ียะ", "ือะ", "าะ", "อะ", "ีย", "ือ", "า", "อ", "ะ", "็", "ิ"),
    "แ": ("ะ", "็"),
    "โ": ("ะ",),
    "ใ": (),
    "ไ": (),
}

PREPOSED = frozenset(_TRAILING)
FOLLOWING_VOWELS = frozenset("ะัาำิีึืุูๅ")
THANTHAKHAT = "์"
MAI_YAMOK = "ๆ"
# Vowel signs after which a bare consonant is a syllable final
_OPEN_VOWELS = frozenset("ัาิีึืุู็")


WORDS = {
    # courtesy
    "สวัสดี": "sawasdee", "สวัสดีครับ": "sawasdee khrap",
    "สวัสดีค่ะ": "sawasdee kha", "ขอบคุณ": "khob khun",
    "ขอบคุณครับ": "khob khun khrap", "ขอบคุณค่ะ": "khob khun kha",
    "ขอโทษ": "kho thot", "ไม่เป็นไร": "mai pen rai",
    # yes and no
    "ใช่": "chai", "ไม่ใช่": "mai chai", "ไม่": "mai", "ได้": "dai",
    "ไม่ได้": "mai dai", "เข้าใจ": "khao jai", "ไม่เข้าใจ": "mai khao jai",
    # family
    "พ่อ": "pho", "แม่": "mae", "ลูก": "luk", "พี่": "phi", "น้อง": "nong",
    "ปู่": "pu", "ย่า": "ya", "ตา": "ta", "ยาย": "yai",
    # time
    "วันนี้": "wan nee", "เมื่อวาน": "meua wan", "พรุ่งนี้": "phrung nee",
    "เช้า": "chao", "เที่ยง": "thiang", "เย็น": "yen", "กลางคืน": "klang khuen",
    # numbers
    "หนึ่ง": "neung", "สอง": "song", "สาม": "saam", "สี่": "see", "ห้า": "haa",
    "หก": "hok", "เจ็ด": "jet", "แปด": "paet", "เก้า": "kao", "สิบ": "sip",
    # food
    "ข้าว": "khao", "น้ำ": "nam", "อาหาร": "aahaan", "ต้มยำ": "tom yam",
    "ผัดไท": "phat thai", "ส้มตำ": "som tam", "มะม่วง": "mamuang",
    "ข้าวโพด": "khao phot",
    # places
    "บ้าน": "baan", "โรงเรียน": "rong rian", "โรงพยาบาล": "rong phayabaan",
    "ตลาด": "talaat", "วัด": "wat", "สถานี": "sathanii",
    # countries
    "ไทย": "thai", "อเมริกา": "amerika", "จีน": "jiin", "ญี่ปุ่น": "yiipun",
    "เกาหลี": "kaoli", "อังกฤษ": "angkrit", "ฝรั่งเศส": "farangset",
    "เยอรมนี": "yoeraman",
}


# ── Helpers ─────────────────────────────────────────────────────────────────

def _collect_tones(ctx: RuleContext, pos: int) -> tuple[str, int]:
    """Read tone marks starting at pos; return their output and the next index."""
    text = ctx.text
    tones = ""
    while pos < len(text) and text[pos] in THAI_TONE_MARKS:
        tones += ctx.lookup(text[pos]) or ""
        pos += 1
    return tones, pos


def _complex(ctx: RuleContext, key: str) -> str | None:
    return COMPLEX_VOWELS.get(ctx.scheme, COMPLEX_VOWELS["rtgs"]).get(key)


def _closes_syllable(text: str, pos: int) -> bool:
    """True if the consonant at pos ends the syllable written before it."""
    j = pos - 1
    while j >= 0 and text[j] in THAI_TONE_MARKS:
        j -= 1
    if j < 0:
        return False
    prev = text[j]
    before = text[j - 1] if j > 0 else ""
    if prev in _OPEN_VOWELS:
        return True
    if prev in "ยอ" and before in "ีื":
        return True
    if prev == "อ" and (before in CONSONANTS or before in THAI_TONE_MARKS):
        return True
    if prev == "ว" and before == "ั":
        return True
    return prev in CONSONANTS and before in "เแโ"


def _ends_word(text: str, pos: int) -> bool:
    return pos >= len(text) or text[pos] not in CONSONANTS and text[pos] not in VOWELS \
        and text[pos] not in THAI_TONE_MARKS and text[pos] != THANTHAKHAT


# ── Rules ───────────────────────────────────────────────────────────────────

def preposed_vowel(ctx: RuleContext) -> RuleHit | None:
    """เ แ โ ใ ไ are read after the consonant that follows them."""
    vowel = ctx.current
    consonant = ctx.char(1)
    if vowel not in PREPOSED or consonant not in CONSONANTS:
        return None
    initial = ctx.lookup(consonant) or ""
    tones, pos = _collect_tones(ctx, ctx.index + 2)
    for trailing in _TRAILING[vowel]:
        if ctx.text.startswith(trailing, pos):
            sound = _complex(ctx, f"{vowel}_{trailing}")
            if sound is not None:
                end = pos + len(trailing)
                return RuleHit(initial + sound + tones, end - ctx.index, "preposed_vowel")
    sound = _complex(ctx, f"{vowel}_") or ctx.lookup(vowel) or ""
    return RuleHit(initial + sound + tones, pos - ctx.index, "preposed_vowel")


def consonant_syllable(ctx: RuleContext) -> RuleHit | None:
    """A consonant with its vowel sign, or a bare consonant."""
    text, i = ctx.text, ctx.index
    consonant = ctx.current
    if consonant not in CONSONANTS:
        return None
    if ctx.char(1) == THANTHAKHAT:
        return RuleHit("", 2, "silent_consonant")

    initial = ctx.lookup(consonant) or ""
    tones, pos = _collect_tones(ctx, i + 1)
    following = text[pos] if pos < len(text) else ""
    after = text[pos + 1] if pos + 1 < len(text) else ""

    for pattern in ("ัวะ", "ัว"):
        if text.startswith(pattern, pos):
            sound = _complex(ctx, "_" + pattern) or "ua"
            return RuleHit(initial + sound + tones, pos + len(pattern) - i, "sara_ua")
    if following in FOLLOWING_VOWELS:
        sound = ctx.lookup(following) or ""
        return RuleHit(initial + sound + tones, pos + 1 - i, "syllable")

    if not tones and _closes_syllable(text, i):
        return RuleHit(FINALS.get(consonant, initial), 1, "final_consonant")
    if following == "อ" and after not in FOLLOWING_VOWELS and after not in THAI_TONE_MARKS:
        sound = _complex(ctx, "_อ") or "o"
        return RuleHit(initial + sound + tones, pos + 1 - i, "sara_o")
    if not tones and following in CONSONANTS and _ends_word(text, pos + 1):
        # two bare consonants at the end of a word: closed syllable with o
        final = FINALS.get(following, "")
        return RuleHit(initial + "o" + final, pos + 1 - i, "inherent_o")
    sound = "a" if initial else ""
    return RuleHit(initial + sound + tones, pos - i, "inherent_a")


def repetition(ctx: RuleContext) -> RuleHit | None:
    """ๆ repeats the preceding Thai word; a space before ๆ is allowed."""
    if ctx.current != MAI_YAMOK:
        return None
    word: list[str] = []
    for segment in reversed(ctx.emitted):
        if not word and segment.method == "whitespace":
            continue
        # anything passed through unchanged ends the word
        if not segment.script or segment.output[-1:].isspace():
            break
        word.append(segment.output)
    repeated = "".join(reversed(word))
    return RuleHit(" " + repeated if repeated else "", 1, "mai_yamok", verbatim=True)


RULES = (preposed_vowel, consonant_syllable, repetition)


TABLE = ScriptTable(
    name="thai",
    display_name="Thai",
    kinds=frozenset({ScriptKind.THAI}),
    schemes=(
        SchemeInfo("rtgs", "RTGS", "Royal Thai General System of Transcription"),
        SchemeInfo("ala", "ALA-LC", "American Library Association - Library of Congress"),
        SchemeInfo("simplified", "Simplified", "Easy-to-read phonetic romanization"),
    ),
    char_map={**CONSONANTS, **VOWELS, **MARKS, **DIGITS, MAI_YAMOK: ""},
    overlays=OVERLAYS,
    phrases=WORDS,
    max_phrase_length=12,
    requires_word_boundary=False,
    tone_strip={"̀": "", "̂": "", "́": "", "̌": ""},
)
