"""polytranslit: dictionary- and rule-based transliteration of non-Latin scripts."""

from polytranslit.errors import (
    TransliterationError, ConfigError, InvalidSchemeError, UnknownLanguageError,
)
from polytranslit.scripts import ScriptKind, classify, is_combining_mark, text_direction
from polytranslit.tables import ScriptTable, SchemeInfo
from polytranslit.languages import (
    LanguageProfile, detect_language, detect_mixed_script, get_profile, list_profiles,
)
from polytranslit.config import (
    TransliterationConfig, load_config, list_schemes, set_scheme, try_set_scheme,
)
from polytranslit.transliterator import Transliterator, transliterate, transliterate_batch
from polytranslit.analyzer import AnalysisResult, CharacterInfo, analyze

__all__ = [
    "TransliterationError", "ConfigError", "InvalidSchemeError", "UnknownLanguageError",
    "ScriptKind", "classify", "is_combining_mark", "text_direction",
    "ScriptTable", "SchemeInfo",
    "LanguageProfile", "detect_language", "detect_mixed_script",
    "get_profile", "list_profiles",
    "TransliterationConfig", "load_config", "list_schemes", "set_scheme", "try_set_scheme",
    "Transliterator", "transliterate", "transliterate_batch",
    "AnalysisResult", "CharacterInfo", "analyze",
]
