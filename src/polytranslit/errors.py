"""Exception types raised at the configuration boundary.

Transliteration itself never raises: unmapped characters fall back to the
configured policy and malformed input yields an empty result.  Only
configuration mistakes (an unknown scheme or language, a bad config file)
surface as exceptions, so callers can tell "no such scheme" apart from
"no mapping for this character".
"""

from __future__ import annotations


class TransliterationError(Exception):
    """Base class for every error raised by polytranslit."""


class ConfigError(TransliterationError):
    """A configuration value or config file is invalid."""


class UnknownLanguageError(TransliterationError, ValueError):
    """The requested language profile does not exist."""

    def __init__(self, language: str, available: list[str] | tuple[str, ...]):
        self.language = language
        self.available = tuple(available)
        super().__init__(
            f"Unknown language: {language!r}. Available: {', '.join(self.available)}"
        )


class InvalidSchemeError(TransliterationError, ValueError):
    """The requested romanization scheme is not defined for the language."""

    def __init__(self, scheme: str, language: str, available: list[str] | tuple[str, ...]):
        self.scheme = scheme
        self.language = language
        self.available = tuple(available)
        if self.available:
            hint = f"Available: {', '.join(self.available)}"
        else:
            hint = "pick a concrete language to choose a scheme"
        super().__init__(f"Invalid scheme {scheme!r} for {language}. {hint}")
