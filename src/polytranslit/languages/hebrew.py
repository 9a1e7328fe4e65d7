"""Hebrew, simplified romanization of letters and niqqud."""

from __future__ import annotations

from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


SIMPLIFIED = {
    "א": "'", "ב": "b", "ג": "g", "ד": "d", "ה": "h", "ו": "v", "ז": "z",
    "ח": "ch", "ט": "t", "י": "y", "כ": "k", "ל": "l", "מ": "m", "נ": "n",
    "ס": "s", "ע": "'", "פ": "p", "צ": "ts", "ק": "q", "ר": "r", "ש": "sh",
    "ת": "t",
    # final forms
    "ך": "kh", "ם": "m", "ן": "n", "ף": "f", "ץ": "ts",
    # niqqud
    "ַ": "a", "ָ": "a", "ֶ": "e", "ֵ": "e", "ִ": "i", "ֹ": "o", "ֻ": "u",
    "ְ": "", "ֲ": "a", "ֱ": "e", "ֳ": "o", "ּ": "", "ׁ": "", "ׂ": "",
    # maqaf, geresh, gershayim
    "־": "-", "׳": "'", "״": '"',
}

TABLE = ScriptTable(
    name="hebrew",
    display_name="Hebrew",
    kinds=frozenset({ScriptKind.HEBREW}),
    schemes=(SchemeInfo("simplified", "Simplified", "Consonant-based romanization with niqqud vowels"),),
    char_map=SIMPLIFIED,
)

RULES = ()
