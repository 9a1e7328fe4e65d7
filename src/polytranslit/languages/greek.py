"""Modern Greek, letter-by-letter phonetic romanization."""

from __future__ import annotations

from polytranslit.scripts import ScriptKind
from polytranslit.tables import SchemeInfo, ScriptTable


PHONETIC = {
    "Α": "A", "Β": "V", "Γ": "G", "Δ": "D", "Ε": "E", "Ζ": "Z", "Η": "I",
    "Θ": "Th", "Ι": "I", "Κ": "K", "Λ": "L", "Μ": "M", "Ν": "N", "Ξ": "X",
    "Ο": "O", "Π": "P", "Ρ": "R", "Σ": "S", "Τ": "T", "Υ": "Y", "Φ": "F",
    "Χ": "Ch", "Ψ": "Ps", "Ω": "O",
    "α": "a", "β": "v", "γ": "g", "δ": "d", "ε": "e", "ζ": "z", "η": "i",
    "θ": "th", "ι": "i", "κ": "k", "λ": "l", "μ": "m", "ν": "n", "ξ": "x",
    "ο": "o", "π": "p", "ρ": "r", "σ": "s", "ς": "s", "τ": "t", "υ": "y",
    "φ": "f", "χ": "ch", "ψ": "ps", "ω": "o",
    # tonos and dialytika
    "ά": "a", "έ": "e", "ή": "i", "ί": "i", "ό": "o", "ύ": "y", "ώ": "o",
    "ϊ": "i", "ϋ": "y", "ΐ": "i", "ΰ": "y",
    "Ά": "A", "Έ": "E", "Ή": "I", "Ί": "I", "Ό": "O", "Ύ": "Y", "Ώ": "O",
    "Ϊ": "I", "Ϋ": "Y",
    # question mark and ano teleia
    ";": "?", "·": ";",
}

TABLE = ScriptTable(
    name="greek",
    display_name="Greek",
    kinds=frozenset({ScriptKind.GREEK}),
    schemes=(SchemeInfo("phonetic", "Phonetic", "Modern Greek letter-by-letter romanization"),),
    char_map=PHONETIC,
)

RULES = ()
