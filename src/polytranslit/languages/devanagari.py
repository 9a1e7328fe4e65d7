"""
Devanagari romanization (Hindi, Sanskrit, Marathi, Nepali): IAST
(default), Harvard-Kyoto and a simplified phonetic scheme.

Consonants are listed with their inherent vowel.  The syllable rule drops
it before a virama and replaces it with the vowel of a following matra.
"""

from __future__ import annotations

from polytranslit.rules import RuleContext, RuleHit
from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


VIRAMA = "्"
NUKTA = "़"
MATRAS = frozenset("ािीुूृॄॢॣेैोौॅॉ")

IAST = {
    # vowels
    "अ": "a", "आ": "ā", "इ": "i", "ई": "ī", "उ": "u", "ऊ": "ū",
    "ऋ": "ṛ", "ॠ": "ṝ", "ऌ": "ḷ", "ॡ": "ḹ", "ए": "e", "ऐ": "ai",
    "ओ": "o", "औ": "au", "ऍ": "e", "ऑ": "o",
    # stops
    "क": "ka", "ख": "kha", "ग": "ga", "घ": "gha", "ङ": "ṅa",
    "च": "ca", "छ": "cha", "ज": "ja", "झ": "jha", "ञ": "ña",
    "ट": "ṭa", "ठ": "ṭha", "ड": "ḍa", "ढ": "ḍha", "ण": "ṇa",
    "त": "ta", "थ": "tha", "द": "da", "ध": "dha", "न": "na",
    "प": "pa", "फ": "pha", "ब": "ba", "भ": "bha", "म": "ma",
    # semivowels and sibilants
    "य": "ya", "र": "ra", "ल": "la", "व": "va",
    "श": "śa", "ष": "ṣa", "स": "sa", "ह": "ha",
    # regional letters
    "ळ": "ḷa", "ऱ": "ṟa",
    # nukta forms
    "क़": "qa", "ख़": "ḵẖa", "ग़": "ġa", "ज़": "za",
    "ड़": "ṛa", "ढ़": "ṛha", "फ़": "fa", "य़": "ẏa",
    # matras
    "ा": "ā", "ि": "i", "ी": "ī", "ु": "u", "ू": "ū",
    "ृ": "ṛ", "ॄ": "ṝ", "ॢ": "ḷ", "ॣ": "ḹ",
    "े": "e", "ै": "ai", "ो": "o", "ौ": "au", "ॅ": "e", "ॉ": "o",
    # marks
    VIRAMA: "", "ं": "ṃ", "ः": "ḥ", "ँ": "m̐", NUKTA: "",
    "ॐ": "om", "ऽ": "'",
    # punctuation
    "।": ".", "॥": "..", "॰": "",
}
IAST.update({chr(0x0966 + n): str(n) for n in range(10)})

OVERLAYS = {
    "harvard": {
        "आ": "A", "ई": "I", "ऊ": "U", "ऋ": "R", "ॠ": "RR", "ऌ": "lR", "ॡ": "lRR",
        "ङ": "Ga", "ञ": "Ja", "ट": "Ta", "ठ": "Tha", "ड": "Da", "ढ": "Dha",
        "ण": "Na", "श": "za", "ष": "Sa", "ळ": "La", "ऱ": "ra",
        "ख़": "kha", "ग़": "ga", "ड़": "Ra", "ढ़": "Rha", "य़": "ya",
        "ा": "A", "ी": "I", "ू": "U", "ृ": "R", "ॄ": "RR", "ॢ": "lR", "ॣ": "lRR",
        "ं": "M", "ः": "H", "ँ": "~",
        "क्ष": "kSa", "ज्ञ": "jJa",
    },
    "simplified": {
        "आ": "aa", "ई": "ee", "ऊ": "oo", "ऋ": "ri", "ॠ": "ree", "ऌ": "li", "ॡ": "lee",
        "ङ": "nga", "च": "cha", "छ": "chha", "ञ": "nya",
        "ट": "ta", "ठ": "tha", "ड": "da", "ढ": "dha", "ण": "na",
        "श": "sha", "ष": "sha", "ळ": "la", "ऱ": "ra",
        "ख़": "kha", "ग़": "ga", "ड़": "ra", "ढ़": "rha", "य़": "ya",
        "ा": "aa", "ी": "ee", "ू": "oo", "ृ": "ri", "ॄ": "ree", "ॢ": "li", "ॣ": "lee",
        "ं": "n", "ः": "h", "ँ": "n",
        "क्ष": "ksha", "ज्ञ": "gya",
    },
}

# Conjuncts romanized as a unit; each behaves like a consonant
CLUSTERS = {
    "क्ष": "kṣa", "त्र": "tra", "ज्ञ": "jña",
}


WORDS = {
    # greetings
    "नमस्ते": "namaste", "नमस्कार": "namaskar", "धन्यवाद": "dhanyawad",
    "स्वागत": "swagat", "अलविदा": "alvida",
    # time
    "आज": "aaj", "कल": "kal", "परसों": "parson", "सुबह": "subah",
    "शाम": "shaam", "रात": "raat",
    # family
    "माता": "mata", "पिता": "pita", "भाई": "bhai", "बहन": "bahan",
    "पत्नी": "patni", "पति": "pati",
    # verbs
    "जाना": "jaana", "आना": "aana", "करना": "karna", "होना": "hona",
    "देना": "dena", "लेना": "lena",
    # numbers
    "एक": "ek", "दो": "do", "तीन": "teen", "चार": "chaar", "पांच": "paanch",
    "छह": "chah", "सात": "saat", "आठ": "aath", "नौ": "nau", "दस": "das",
    # colours
    "लाल": "laal", "नीला": "neela", "हरा": "hara", "पीला": "peela",
    "काला": "kaala", "सफेद": "safed",
    # directions
    "उत्तर": "uttar", "दक्षिण": "dakshin", "पूर्व": "purva", "पश्चिम": "pashchim",
    # everyday things
    "पानी": "paani", "रोटी": "roti", "चावल": "chawal", "दूध": "doodh",
    "चाय": "chai", "कॉफी": "coffee",
    # places
    "घर": "ghar", "स्कूल": "school", "अस्पताल": "aspatal", "बाजार": "bazaar",
    "रेलवे": "railway", "हवाई अड्डा": "hawai adda",
}


# Precomposed nukta letters are composition exclusions, so NFC never builds them
_NUKTA_FORMS = dict(zip("कखगजडढफय", "क़ख़ग़ज़ड़ढ़फ़य़"))


def _is_consonant(char: str) -> bool:
    code = ord(char) if len(char) == 1 else 0
    return 0x0915 <= code <= 0x0939 or 0x0958 <= code <= 0x095F or char in "ळऱ"


def consonant_syllable(ctx: RuleContext) -> RuleHit | None:
    """Consonant (or conjunct) followed by virama, matra or nothing."""
    cluster = ctx.table.lookup_cluster(ctx.text, ctx.index, ctx.scheme)
    if cluster is not None:
        base, length = cluster.romanized, cluster.length
    elif _is_consonant(ctx.current):
        char, length = ctx.current, 1
        if ctx.char(1) == NUKTA:
            char, length = _NUKTA_FORMS.get(char, char), 2
        base = ctx.lookup(char) or ""
    else:
        return None

    following = ctx.char(length)
    stem = base[:-1] if base.endswith("a") else base
    if following == VIRAMA:
        return RuleHit(stem, length + 1, "virama")
    if following in MATRAS:
        return RuleHit(stem + (ctx.lookup(following) or ""), length + 1, "matra")
    return RuleHit(base, length, "inherent_a")


RULES = (consonant_syllable,)


TABLE = ScriptTable(
    name="devanagari",
    display_name="Devanagari (Hindi/Sanskrit)",
    kinds=frozenset({ScriptKind.DEVANAGARI}),
    schemes=(
        SchemeInfo("iast", "IAST", "International Alphabet of Sanskrit Transliteration"),
        SchemeInfo("harvard", "Harvard-Kyoto", "ASCII-compatible transliteration scheme"),
        SchemeInfo("simplified", "Simplified", "Easy-to-read phonetic transliteration"),
    ),
    char_map=IAST,
    overlays=OVERLAYS,
    phrases=WORDS,
    max_phrase_length=10,
    clusters=CLUSTERS,
)
