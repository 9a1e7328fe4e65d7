"""
Script-specific phonological rules.

A rule is a plain function ``rule(ctx) -> RuleHit | None``.  It inspects
the input around ``ctx.index`` (and, for rules such as vowel lengthening,
the segments already emitted) and either consumes at least one character or
declines by returning None.  Each language profile lists its rules in
priority order; the RuleEngine tries them in that order and the first hit
wins.

Usage:
    engine = RuleEngine(profile.rules)
    hit = engine.try_rules(RuleContext(text, i, emitted, table, scheme))
    if hit:
        i += hit.length
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Sequence

from polytranslit.tables import ScriptTable

if TYPE_CHECKING:
    from polytranslit.transliterator import Segment

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuleHit:
    """Result of a matching rule: what to emit and how much input it covers."""

    romanized: str
    length: int
    rule: str = ""
    # Set when the output already carries its final case (e.g. a vowel
    # copied from the emitted buffer) and must not be case-mirrored.
    verbatim: bool = False

    def __post_init__(self):
        if self.length < 1:
            raise ValueError(f"rule {self.rule or '?'} consumed no input")


@dataclass(slots=True)
class RuleContext:
    """Read-only view of the scan state handed to each rule."""

    text: str
    index: int
    emitted: Sequence[Segment]  # everything scanned so far, script or not
    table: ScriptTable
    scheme: str
    kanji_reading: str = "first"

    def char(self, offset: int = 0) -> str:
        """Character at index + offset, or '' outside the text."""
        pos = self.index + offset
        if 0 <= pos < len(self.text):
            return self.text[pos]
        return ""

    @property
    def current(self) -> str:
        return self.char(0)

    @property
    def at_word_start(self) -> bool:
        prev = self.char(-1)
        return not prev or not self.table.owns(prev)

    def lookup(self, char: str) -> str | None:
        return self.table.lookup_char(char, self.scheme)

    def peek_unit(self, offset: int = 1) -> str | None:
        """Romanization of the unit (cluster or character) at index + offset."""
        pos = self.index + offset
        if pos >= len(self.text):
            return None
        cluster = self.table.lookup_cluster(self.text, pos, self.scheme)
        if cluster is not None:
            return cluster.romanized
        return self.lookup(self.text[pos])

    def last_emitted_char(self) -> str:
        """Last character written for the current word, or '' after whitespace."""
        for segment in reversed(self.emitted):
            if segment.output:
                return "" if segment.output[-1].isspace() else segment.output[-1]
        return ""


Rule = Callable[[RuleContext], "RuleHit | None"]


class RuleEngine:
    """Tries a profile's rules in priority order."""

    def __init__(self, rules: Sequence[Rule] = ()):
        self.rules = tuple(rules)

    def __len__(self) -> int:
        return len(self.rules)

    def try_rules(self, ctx: RuleContext) -> RuleHit | None:
        for rule in self.rules:
            hit = rule(ctx)
            if hit is not None:
                LOGGER.debug("rule %s matched %r at %d", hit.rule or rule.__name__,
                             ctx.text[ctx.index:ctx.index + hit.length], ctx.index)
                return hit
        return None


# ── Shared rules ────────────────────────────────────────────────────────────

def cluster_rule(ctx: RuleContext) -> RuleHit | None:
    """Multi-character units that are not words (digraphs, conjuncts, ligatures)."""
    match = ctx.table.lookup_cluster(ctx.text, ctx.index, ctx.scheme)
    if match is None:
        return None
    return RuleHit(match.romanized, match.length, "cluster")
