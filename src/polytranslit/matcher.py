"""
Greedy longest-match phrase lookup.

Starting at a position, candidate substrings are tried from the longest
allowed length down to 2; the first one present in the phrase dictionary
wins.  For space-delimited scripts a candidate must also end on a word
boundary, so a dictionary word never matches the prefix of a longer,
unlisted word.

Segmentation is greedy and never backtracks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from polytranslit.scripts import classify, is_combining_mark

if TYPE_CHECKING:
    from polytranslit.tables import ScriptTable


@dataclass(frozen=True, slots=True)
class Match:
    romanized: str
    length: int
    source: str

    def __post_init__(self):
        if self.length < 1:
            raise ValueError("a match must consume at least one character")


def is_word_boundary(text: str, end: int) -> bool:
    """True if a word ending just before ``end`` stops on a boundary.

    That is the case at end of text, before whitespace or punctuation, and
    before a letter of a different script than the last matched character.
    A combining mark continues the word.
    """
    if end >= len(text):
        return True
    following = text[end]
    if following.isspace():
        return True
    if is_combining_mark(following):
        return False
    if not following.isalpha():
        return True
    return end == 0 or classify(following) is not classify(text[end - 1])


def longest_match(text: str, start: int, table: ScriptTable) -> Match | None:
    """Find the longest phrase of ``table`` starting at ``start``.

    Never consumes more than ``table.max_phrase_length`` characters and
    never returns a zero-length match.
    """
    if not table.phrases or start >= len(text):
        return None
    phrases = table.phrases
    upper = min(table.max_phrase_length, len(text) - start)
    for length in range(upper, 1, -1):
        candidate = text[start:start + length]
        key = candidate.lower() if table.case_insensitive else candidate
        romanized = phrases.get(key)
        if romanized is None:
            continue
        if table.requires_word_boundary and not is_word_boundary(text, start + length):
            continue
        return Match(romanized, length, candidate)
    return None
