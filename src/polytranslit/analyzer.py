"""
Character-level statistics over one transliteration pass.

The analyzer does not classify or look anything up on its own: it reads
the Segments produced by Transliterator.segment, so its hit/miss counts
are exactly what the transliterator did.

Usage:
    from polytranslit import analyze

    result = analyze("Привет, мир!")
    result.coverage              # 1.0
    result.predominant_script    # ScriptKind.CYRILLIC
    print(result.summary())
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from polytranslit.config import TransliterationConfig
from polytranslit.languages import detect_mixed_script
from polytranslit.scripts import ScriptKind, classify, count_scripts, is_combining_mark
from polytranslit.scripts import predominant_script as _predominant_script
from polytranslit.transliterator import Transliterator, join_segments


@dataclass(frozen=True, slots=True)
class CharacterInfo:
    """One script character of the input and how it was romanized.

    Characters consumed together (a phrase, a syllable) share the unit's
    romanization on the first character; the rest carry ``""``.
    """

    char: str
    romanized: str
    position: int
    found: bool
    is_diacritic: bool
    kind: ScriptKind


@dataclass(frozen=True)
class AnalysisResult:
    """Aggregated statistics for one text."""

    original_text: str = ""
    total_characters: int = 0
    script_counts: Counter = field(default_factory=Counter)  # kind → count
    script_characters: int = 0  # characters handled by the language profile
    found_characters: int = 0
    coverage: float = 0.0
    predominant_script: ScriptKind | None = None
    script_ratios: dict[ScriptKind, float] = field(default_factory=dict)
    is_mixed: bool = False
    has_diacritics: bool = False
    transliteration: str = ""
    language: str | None = None
    scheme: str | None = None
    breakdown: list[CharacterInfo] = field(default_factory=list)

    @property
    def missing(self) -> list[CharacterInfo]:
        return [info for info in self.breakdown if not info.found]

    def as_dict(self) -> dict[str, Any]:
        return {
            "original_text": self.original_text,
            "total_characters": self.total_characters,
            "script_counts": {str(k): n for k, n in self.script_counts.items()},
            "script_characters": self.script_characters,
            "found_characters": self.found_characters,
            "coverage": self.coverage,
            "predominant_script": str(self.predominant_script) if self.predominant_script else None,
            "script_ratios": {str(k): r for k, r in self.script_ratios.items()},
            "is_mixed": self.is_mixed,
            "has_diacritics": self.has_diacritics,
            "transliteration": self.transliteration,
            "language": self.language,
            "scheme": self.scheme,
        }

    def summary(self) -> str:
        if self.total_characters == 0:
            return "No characters analyzed."

        pct = lambda n, d: f"{100*n/d:.1f}%" if d > 0 else "N/A"

        lines = [
            "═══ Transliteration Analysis ═══",
            "",
            f"Language:       {self.language or 'none detected'}",
            f"Scheme:         {self.scheme or '-'}",
            f"Characters:     {self.total_characters}",
            f"Script chars:   {self.script_characters}",
            f"Found:          {self.found_characters:5d}  ({pct(self.found_characters, self.script_characters)})",
            f"Diacritics:     {'yes' if self.has_diacritics else 'no'}",
            f"Mixed script:   {'yes' if self.is_mixed else 'no'}",
            "",
            "─── By script ───",
        ]
        total = sum(self.script_counts.values())
        for kind, count in self.script_counts.most_common():
            lines.append(f"  {str(kind):12s}  {count:5d}  ({pct(count, total)})")

        missing = Counter(info.char for info in self.missing)
        if missing:
            lines.append("")
            lines.append("─── Unmapped characters ───")
            for char, count in missing.most_common(20):
                lines.append(f"  {char}  U+{ord(char):04X}  x{count}")

        lines.append("")
        lines.append("─── Output ───")
        lines.append(f"  {self.transliteration}")
        return "\n".join(lines)


def analyze_segments(transliterator: Transliterator, text: str) -> AnalysisResult:
    """Analyze text using the transliterator's own segmentation."""
    if not isinstance(text, str) or not text:
        return AnalysisResult()

    profile, segments = transliterator.segment(text)
    breakdown: list[CharacterInfo] = []
    for seg in segments:
        if not seg.script:
            continue
        for offset, (char, position) in enumerate(zip(seg.source, seg.positions)):
            if char.isspace():
                continue
            kind = classify(char)
            breakdown.append(CharacterInfo(
                char=char,
                romanized=seg.output if offset == 0 else "",
                position=position,
                found=seg.found,
                is_diacritic=is_combining_mark(char, kind),
                kind=kind,
            ))
    breakdown.sort(key=lambda info: info.position)

    found = sum(1 for info in breakdown if info.found)
    mixed = detect_mixed_script(text)
    config = transliterator.config
    return AnalysisResult(
        original_text=text,
        total_characters=len(text),
        script_counts=count_scripts(text),
        script_characters=len(breakdown),
        found_characters=found,
        coverage=found / len(breakdown) if breakdown else 0.0,
        predominant_script=_predominant_script(text),
        script_ratios=mixed.ratios,
        is_mixed=mixed.is_mixed,
        has_diacritics=any(is_combining_mark(char) for char in text),
        transliteration=join_segments(segments),
        language=profile.id if profile else None,
        scheme=(config.scheme or profile.table.default_scheme) if profile else None,
        breakdown=breakdown,
    )


def analyze(text: str, config: TransliterationConfig | None = None, **options: Any) -> AnalysisResult:
    return Transliterator(config, **options).analyze(text)
