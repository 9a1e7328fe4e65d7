"""
Japanese romanization (modified Hepburn) for hiragana, katakana and kanji.

Katakana tables are derived from the hiragana ones (the two blocks are
parallel, offset by 0x60) and extended with the loanword digraphs that
only occur in katakana.  Kanji carry a list of readings; the first one is
the default and ``kanji_reading`` selects another.

Rules: sokuon (っ/ッ) gemination, chōonpu (ー) vowel lengthening, yōon
digraphs and kanji reading selection.
"""

from __future__ import annotations

from polytranslit.rules import RuleContext, RuleHit, cluster_rule
from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


# ── Kana ────────────────────────────────────────────────────────────────────

HIRAGANA = {
    "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
    "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
    "が": "ga", "ぎ": "gi", "ぐ": "gu", "げ": "ge", "ご": "go",
    "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
    "ざ": "za", "じ": "ji", "ず": "zu", "ぜ": "ze", "ぞ": "zo",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "だ": "da", "ぢ": "ji", "づ": "zu", "で": "de", "ど": "do",
    "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
    "ば": "ba", "び": "bi", "ぶ": "bu", "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi", "ぷ": "pu", "ぺ": "pe", "ぽ": "po",
    "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
    "や": "ya", "ゆ": "yu", "よ": "yo",
    "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
    "わ": "wa", "ゐ": "wi", "ゑ": "we", "を": "wo", "ん": "n",
    "ゔ": "vu",
    # small kana standing alone
    "ぁ": "a", "ぃ": "i", "ぅ": "u", "ぇ": "e", "ぉ": "o",
    "ゃ": "ya", "ゅ": "yu", "ょ": "yo", "ゎ": "wa", "ゕ": "ka", "ゖ": "ke",
    # sokuon emits nothing on its own
    "っ": "",
}

HIRAGANA_YOON = {
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "じゃ": "ja", "じゅ": "ju", "じょ": "jo",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "ぢゃ": "ja", "ぢゅ": "ju", "ぢょ": "jo",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
}

_KATAKANA_OFFSET = 0x60


def _to_katakana(kana: str) -> str:
    return "".join(chr(ord(ch) + _KATAKANA_OFFSET) for ch in kana)


KATAKANA = {_to_katakana(k): v for k, v in HIRAGANA.items()}
KATAKANA.update({
    "ヷ": "va", "ヸ": "vi", "ヹ": "ve", "ヺ": "vo",
    # the chōonpu is handled by a rule; alone it emits nothing
    "ー": "",
})

KATAKANA_DIGRAPHS = {_to_katakana(k): v for k, v in HIRAGANA_YOON.items()}
KATAKANA_DIGRAPHS.update({
    "ファ": "fa", "フィ": "fi", "フェ": "fe", "フォ": "fo", "フュ": "fyu",
    "ウィ": "wi", "ウェ": "we", "ウォ": "wo",
    "ヴァ": "va", "ヴィ": "vi", "ヴェ": "ve", "ヴォ": "vo", "ヴュ": "vyu",
    "シェ": "she", "ジェ": "je", "チェ": "che",
    "ティ": "ti", "ディ": "di", "トゥ": "tu", "ドゥ": "du", "デュ": "dyu",
    "ツァ": "tsa", "ツィ": "tsi", "ツェ": "tse", "ツォ": "tso",
    "イェ": "ye", "クァ": "kwa", "グァ": "gwa",
})

SOKUON = frozenset("っッ")
CHOONPU = "ー"
_VOWELS = frozenset("aeiou")


# ── Kanji ───────────────────────────────────────────────────────────────────

KANJI_READINGS = {
    # numbers
    "一": ("ichi", "hito"), "二": ("ni", "futa"), "三": ("san", "mi"),
    "四": ("shi", "yon", "yo"), "五": ("go", "itsu"), "六": ("roku", "mu"),
    "七": ("shichi", "nana"), "八": ("hachi", "ya"), "九": ("kyuu", "kokono"),
    "十": ("juu", "too"), "百": ("hyaku", "momo"), "千": ("sen", "chi"),
    "万": ("man", "yorozu"),
    # time
    "日": ("nichi", "hi", "ka"), "月": ("getsu", "tsuki"), "火": ("ka", "hi"),
    "水": ("sui", "mizu"), "木": ("moku", "ki"), "金": ("kin", "kane"),
    "土": ("do", "tsuchi"), "年": ("nen", "toshi"), "時": ("ji", "toki"),
    "分": ("fun", "bu", "wa"), "秒": ("byou",),
    # people and position
    "人": ("jin", "hito"), "大": ("dai", "oo"), "小": ("shou", "chii", "ko"),
    "中": ("chuu", "naka"), "上": ("jou", "ue", "kami"),
    "下": ("ka", "shita", "shimo"), "前": ("zen", "mae"),
    "後": ("go", "ushi", "ato"), "左": ("sa", "hidari"), "右": ("u", "migi"),
    # nature
    "山": ("san", "yama"), "川": ("sen", "kawa"), "田": ("den", "ta"),
    "海": ("kai", "umi"), "空": ("kuu", "sora"), "雨": ("u", "ame"),
    "雪": ("setsu", "yuki"), "風": ("fuu", "kaze"), "花": ("ka", "hana"),
    "林": ("rin", "hayashi"), "森": ("shin", "mori"),
    # family
    "父": ("fu", "chichi"), "母": ("bo", "haha"), "子": ("shi", "ko"),
    "兄": ("kei", "ani"), "弟": ("tei", "otouto"), "姉": ("shi", "ane"),
    "妹": ("mai", "imouto"),
    # colours
    "白": ("haku", "shiro"), "黒": ("koku", "kuro"), "赤": ("seki", "aka"),
    "青": ("sei", "ao"), "黄": ("ou", "ki"), "緑": ("ryoku", "midori"),
    # verbs
    "見": ("ken", "mi"), "聞": ("bun", "ki"), "言": ("gen", "i"),
    "話": ("wa", "hanashi"), "読": ("doku", "yo"), "書": ("sho", "ka"),
    "食": ("shoku", "ta"), "飲": ("in", "no"), "行": ("kou", "i", "yu"),
    "来": ("rai", "ki", "ku"), "帰": ("ki", "kaeri"), "買": ("bai", "ka"),
    "売": ("bai", "u"), "作": ("saku", "tsuku"), "立": ("ritsu", "ta"),
    "座": ("za", "suwa"), "歩": ("ho", "aru"), "走": ("sou", "hashi"),
    "泳": ("ei", "oyo"), "寝": ("shin", "ne"), "起": ("ki", "o"),
    # places
    "国": ("koku", "kuni"), "都": ("to", "miyako"), "市": ("shi",),
    "町": ("chou", "machi"), "村": ("son", "mura"), "家": ("ka", "ie", "ya"),
    "店": ("ten", "mise"), "駅": ("eki",),
    # school and work
    "学": ("gaku", "mana"), "校": ("kou",), "生": ("sei", "nama", "i"),
    "電": ("den",), "車": ("sha", "kuruma"), "機": ("ki", "hata"),
    "械": ("kai",), "会": ("kai", "a"), "社": ("sha", "yashiro"),
    "働": ("dou", "hatara"), "円": ("en",),
    # feelings and qualities
    "好": ("kou", "su"), "嫌": ("ken", "kira"), "楽": ("raku", "tano"),
    "悲": ("hi", "kana"), "怒": ("do", "oko"), "喜": ("ki", "yoroko"),
    "新": ("shin", "atara"), "古": ("ko", "furu"), "高": ("kou", "taka"),
    "安": ("an", "yasu"), "長": ("chou", "naga"), "短": ("tan", "mijika"),
    "重": ("juu", "omo"), "軽": ("kei", "karu"), "強": ("kyou", "tsuyo"),
    "弱": ("jaku", "yowa"), "速": ("soku", "haya"), "遅": ("chi", "oso"),
    # questions
    "何": ("nani", "nan"), "誰": ("dare", "tare"),
}

COMPOUNDS = {
    # countries and languages
    "日本": "nihon", "日本語": "nihongo", "英語": "eigo", "中国": "chuugoku",
    "中国語": "chuugokugo", "韓国": "kankoku", "韓国語": "kankokugo",
    "米国": "beikoku", "英国": "eikoku",
    # places and institutions
    "学校": "gakkou", "会社": "kaisha", "病院": "byouin", "空港": "kuukou",
    # study and work
    "先生": "sensei", "学生": "gakusei", "勉強": "benkyou", "試験": "shiken",
    "宿題": "shukudai", "仕事": "shigoto",
    # things
    "電話": "denwa", "電車": "densha", "新幹線": "shinkansen",
    "自動車": "jidousha", "映画": "eiga", "音楽": "ongaku", "料理": "ryouri",
    "寿司": "sushi", "天気": "tenki",
    # society
    "天皇": "tennou", "政治": "seiji", "経済": "keizai", "文化": "bunka",
    "歴史": "rekishi", "科学": "kagaku", "技術": "gijutsu", "医学": "igaku",
    "法律": "houritsu", "宗教": "shuukyou",
    # relative time
    "今日": "kyou", "昨日": "kinou", "明日": "ashita", "今年": "kotoshi",
    "去年": "kyonen", "来年": "rainen", "今月": "kongetsu",
    "先月": "sengetsu", "来月": "raigetsu", "今週": "konshuu",
    "先週": "senshuu", "来週": "raishuu",
    # weekdays
    "月曜日": "getsuyoubi", "火曜日": "kayoubi", "水曜日": "suiyoubi",
    "木曜日": "mokuyoubi", "金曜日": "kin'youbi", "土曜日": "doyoubi",
    "日曜日": "nichiyoubi",
    # question words
    "何処": "doko", "何時": "itsu", "何故": "naze", "如何": "dou",
    # greetings
    "お疲れ様": "otsukaresama", "おはよう": "ohayou",
    "こんにちは": "konnichiwa", "こんばんは": "konbanwa",
    "さようなら": "sayounara", "ありがとう": "arigatou",
    "すみません": "sumimasen", "ごめんなさい": "gomen'nasai",
}

PUNCTUATION = {
    "、": " ", "。": " ", "！": " ", "？": " ", "・": " ",
    "「": "", "」": "", "『": "", "』": "",
}


# ── Rules ───────────────────────────────────────────────────────────────────

def sokuon(ctx: RuleContext) -> RuleHit | None:
    """Small tsu doubles the first consonant of the following unit."""
    if ctx.current not in SOKUON:
        return None
    following = ctx.peek_unit(1) or ""
    if following.startswith("ch"):
        doubled = "t"
    elif following and following[0] not in _VOWELS and following[0].isalpha():
        doubled = following[0]
    else:
        doubled = ""
    return RuleHit(doubled, 1, "sokuon")


def choonpu(ctx: RuleContext) -> RuleHit | None:
    """The long vowel mark repeats the vowel just written."""
    if ctx.current != CHOONPU:
        return None
    last = ctx.last_emitted_char()
    if last.lower() in _VOWELS:
        return RuleHit(last, 1, "choonpu", verbatim=True)
    return RuleHit("", 1, "choonpu")


def kanji_reading(ctx: RuleContext) -> RuleHit | None:
    """Pick a kanji reading according to the configured reading mode."""
    if ctx.kanji_reading == "first":
        return None
    readings = ctx.table.readings.get(ctx.current)
    if not readings:
        return None
    if ctx.kanji_reading == "all":
        return RuleHit("/".join(readings), 1, "kanji_reading")
    return RuleHit(readings[-1], 1, "kanji_reading")


RULES = (sokuon, choonpu, cluster_rule, kanji_reading)


# ── Profile ─────────────────────────────────────────────────────────────────

CHAR_MAP = {**HIRAGANA, **KATAKANA}
CHAR_MAP.update({kanji: readings[0] for kanji, readings in KANJI_READINGS.items()})

TABLE = ScriptTable(
    name="japanese",
    display_name="Japanese",
    kinds=frozenset({ScriptKind.HIRAGANA, ScriptKind.KATAKANA, ScriptKind.KANJI}),
    schemes=(SchemeInfo("hepburn", "Hepburn", "Modified Hepburn romanization"),),
    char_map=CHAR_MAP,
    phrases=COMPOUNDS,
    max_phrase_length=6,
    clusters={**HIRAGANA_YOON, **KATAKANA_DIGRAPHS},
    punctuation=PUNCTUATION,
    spaced_kinds=frozenset({ScriptKind.KANJI}),
    requires_word_boundary=False,
    readings=KANJI_READINGS,
)
