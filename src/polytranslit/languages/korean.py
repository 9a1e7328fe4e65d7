"""
Korean Hangul romanization: Revised Romanization (default),
McCune-Reischauer and Yale.

Precomposed syllables (U+AC00..U+D7A3) are not listed one by one; they are
decomposed arithmetically into initial, vowel and final jamo and composed
from the per-scheme jamo tables.  The syllable rule adds the Revised
Romanization sound changes across syllable boundaries.
"""

from __future__ import annotations

from polytranslit.rules import RuleContext, RuleHit
from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


# ── Jamo tables ─────────────────────────────────────────────────────────────

HANGUL_BASE = 0xAC00
INITIAL_COUNT = 19
VOWEL_COUNT = 21
FINAL_COUNT = 28
HANGUL_LAST = HANGUL_BASE + INITIAL_COUNT * VOWEL_COUNT * FINAL_COUNT - 1

INITIALS = "ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ"
VOWELS = "ㅏㅐㅑㅒㅓㅔㅕㅖㅗㅘㅙㅚㅛㅜㅝㅞㅟㅠㅡㅢㅣ"
FINALS = ("", *"ㄱㄲㄳㄴㄵㄶㄷㄹㄺㄻㄼㄽㄾㄿㅀㅁㅂㅄㅅㅆㅇㅈㅊㅋㅌㅍㅎ")

_FINAL_RR = {
    "": "", "ㄱ": "k", "ㄲ": "k", "ㄳ": "k", "ㄴ": "n", "ㄵ": "n", "ㄶ": "n",
    "ㄷ": "t", "ㄹ": "l", "ㄺ": "k", "ㄻ": "m", "ㄼ": "l", "ㄽ": "l",
    "ㄾ": "l", "ㄿ": "p", "ㅀ": "l", "ㅁ": "m", "ㅂ": "p", "ㅄ": "p",
    "ㅅ": "t", "ㅆ": "t", "ㅇ": "ng", "ㅈ": "t", "ㅊ": "t", "ㅋ": "k",
    "ㅌ": "t", "ㅍ": "p", "ㅎ": "t",
}

JAMO = {
    "rr": {
        "initial": dict(zip(INITIALS, (
            "g", "kk", "n", "d", "tt", "r", "m", "b", "pp", "s",
            "ss", "", "j", "jj", "ch", "k", "t", "p", "h",
        ))),
        "vowel": dict(zip(VOWELS, (
            "a", "ae", "ya", "yae", "eo", "e", "yeo", "ye", "o", "wa", "wae",
            "oe", "yo", "u", "wo", "we", "wi", "yu", "eu", "ui", "i",
        ))),
        "final": _FINAL_RR,
    },
    "mr": {
        "initial": dict(zip(INITIALS, (
            "k", "kk", "n", "t", "tt", "r", "m", "p", "pp", "s",
            "ss", "", "ch", "tch", "ch'", "k'", "t'", "p'", "h",
        ))),
        "vowel": dict(zip(VOWELS, (
            "a", "ae", "ya", "yae", "ŏ", "e", "yŏ", "ye", "o", "wa", "wae",
            "oe", "yo", "u", "wŏ", "we", "wi", "yu", "ŭ", "ŭi", "i",
        ))),
        "final": _FINAL_RR,
    },
    "yale": {
        "initial": dict(zip(INITIALS, (
            "k", "kk", "n", "t", "tt", "l", "m", "p", "pp", "s",
            "ss", "", "c", "cc", "ch", "kh", "th", "ph", "h",
        ))),
        "vowel": dict(zip(VOWELS, (
            "a", "ay", "ya", "yay", "e", "ey", "ye", "yey", "o", "wa", "way",
            "oy", "yo", "wu", "we", "wey", "wuy", "yu", "u", "uy", "i",
        ))),
        "final": {
            "": "", "ㄱ": "k", "ㄲ": "k", "ㄳ": "ks", "ㄴ": "n", "ㄵ": "nc",
            "ㄶ": "nh", "ㄷ": "t", "ㄹ": "l", "ㄺ": "lk", "ㄻ": "lm", "ㄼ": "lp",
            "ㄽ": "ls", "ㄾ": "lth", "ㄿ": "lph", "ㅀ": "lh", "ㅁ": "m",
            "ㅂ": "p", "ㅄ": "ps", "ㅅ": "s", "ㅆ": "ss", "ㅇ": "ng", "ㅈ": "c",
            "ㅊ": "ch", "ㅋ": "kh", "ㅌ": "th", "ㅍ": "ph", "ㅎ": "h",
        },
    },
}


def decompose(syllable: str) -> tuple[str, str, str] | None:
    """Split a precomposed syllable into (initial, vowel, final) jamo."""
    if len(syllable) != 1:
        return None
    code = ord(syllable)
    if not HANGUL_BASE <= code <= HANGUL_LAST:
        return None
    index = code - HANGUL_BASE
    initial, rest = divmod(index, VOWEL_COUNT * FINAL_COUNT)
    vowel, final = divmod(rest, FINAL_COUNT)
    return INITIALS[initial], VOWELS[vowel], FINALS[final]


def compose(syllable: str, scheme: str) -> str | None:
    """Romanize one syllable without looking at its neighbours."""
    parts = decompose(syllable)
    if parts is None:
        return None
    initial, vowel, final = parts
    jamo = JAMO.get(scheme, JAMO["rr"])
    return jamo["initial"][initial] + jamo["vowel"][vowel] + jamo["final"][final]


def _standalone_jamo(scheme: str) -> dict[str, str]:
    # A lone consonant reads as an initial, or as a final when silent initially.
    jamo = JAMO[scheme]
    table = dict(jamo["vowel"])
    for char, latin in jamo["final"].items():
        if char:
            table[char] = latin
    for char, latin in jamo["initial"].items():
        if latin:
            table[char] = latin
    return table


# ── Rules ───────────────────────────────────────────────────────────────────

# Finals that are voiced (or become r) when the next syllable starts with ㅇ
_VOICING = {"k": "g", "p": "b", "t": "d", "l": "r"}
_PALATAL = {"ㄷ": "j", "ㅌ": "ch"}


def hangul_syllable(ctx: RuleContext) -> RuleHit | None:
    """Compose a syllable; under RR apply sound changes across the boundary."""
    parts = decompose(ctx.current)
    if parts is None:
        return None
    romanized = compose(ctx.current, ctx.scheme) or ""
    if ctx.scheme != "rr":
        return RuleHit(romanized, 1, "hangul")

    initial, vowel, final = parts
    following = decompose(ctx.char(1))
    if following is None or following[0] != "ㅇ" or not final:
        return RuleHit(romanized, 1, "hangul")

    jamo = JAMO["rr"]
    stem = jamo["initial"][initial] + jamo["vowel"][vowel]
    if final in _PALATAL and following[1] == "ㅣ":
        # 굳이 -> guji, 같이 -> gachi
        rest = compose(ctx.char(1), "rr") or ""
        return RuleHit(stem + _PALATAL[final] + rest, 2, "palatalization")
    coda = jamo["final"][final]
    if coda in _VOICING:
        return RuleHit(stem + _VOICING[coda], 1, "voicing")
    return RuleHit(romanized, 1, "hangul")


RULES = (hangul_syllable,)


WORDS = {
    # greetings
    "안녕하세요": "annyeonghaseyo", "안녕히 가세요": "annyeonghi gaseyo",
    "안녕히 계세요": "annyeonghi gyeseyo", "감사합니다": "gamsahamnida",
    "고맙습니다": "gomapseumnida", "죄송합니다": "joesonghamnida",
    "미안합니다": "mianhamnida",
    # common phrases
    "아니요": "aniyo", "괜찮아요": "gwaenchanayo", "좋아요": "johayo",
    "싫어요": "silheoyo", "몰라요": "mollayo", "알겠어요": "algesseoyo",
    # family
    "아버지": "abeoji", "어머니": "eomeoni", "누나": "nuna", "오빠": "oppa",
    "언니": "eonni", "동생": "dongsaeng",
    # time
    "오늘": "oneul", "어제": "eoje", "내일": "naeil", "아침": "achim",
    "점심": "jeomsim", "저녁": "jeonyeok",
    # numbers
    "하나": "hana", "다섯": "daseot", "여섯": "yeoseot", "일곱": "ilgop",
    "여덟": "yeodeol", "아홉": "ahop",
    # food
    "김치": "gimchi", "라면": "ramyeon", "치킨": "chikin", "맥주": "maekju",
    "소주": "soju",
    # places
    "학교": "hakgyo", "회사": "hoesa", "병원": "byeongwon", "시장": "sijang",
    "공항": "gonghang", "지하철": "jihacheol",
    # countries
    "한국": "hanguk", "미국": "miguk", "중국": "jungguk", "일본": "ilbon",
    "영국": "yeongguk", "프랑스": "peurangseu", "독일": "dogil",
    "러시아": "reosia",
}


TABLE = ScriptTable(
    name="korean",
    display_name="Korean",
    kinds=frozenset({ScriptKind.HANGUL}),
    schemes=(
        SchemeInfo("rr", "Revised Romanization", "Official South Korean romanization standard (2000)"),
        SchemeInfo("mr", "McCune-Reischauer", "Traditional academic romanization system"),
        SchemeInfo("yale", "Yale Romanization", "Linguistic romanization system"),
    ),
    char_map=_standalone_jamo("rr"),
    overlays={scheme: _standalone_jamo(scheme) for scheme in ("mr", "yale")},
    phrases=WORDS,
    max_phrase_length=10,
    composer=compose,
)
