#!/usr/bin/env python3
"""
Multi-script transliteration CLI.

Reads options from polytranslit.toml in the CWD if present; flags override:

    python -m polytranslit.cli --text "مرحبا"
    python -m polytranslit.cli --text "你好" --no-tones
    python -m polytranslit.cli --text "Привет" --language russian --scheme bgn
    python -m polytranslit.cli --file lines.txt --language thai
    python -m polytranslit.cli --text "こんにちは" --analyze
    python -m polytranslit.cli --list-schemes arabic
"""

import argparse
import logging
import sys
from pathlib import Path


def _find_default_config() -> Path | None:
    """Look for polytranslit.toml in CWD."""
    candidate = Path("polytranslit.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description="Transliterate non-Latin scripts into Latin"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect polytranslit.toml)",
    )
    parser.add_argument(
        "--text",
        help="Text to transliterate",
    )
    parser.add_argument(
        "--file",
        metavar="FILE",
        help="Transliterate a UTF-8 file, one input per line",
    )
    parser.add_argument(
        "--language",
        help="Language profile, or 'auto' to detect it (overrides config)",
    )
    parser.add_argument(
        "--scheme",
        help="Romanization scheme of the language (overrides config)",
    )
    parser.add_argument(
        "--analyze",
        action="store_true",
        help="Print a character-level analysis instead of the bare output",
    )
    parser.add_argument(
        "--list-schemes",
        metavar="LANGUAGE",
        help="List the schemes of a language or script kind",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List the available language profiles",
    )
    parser.add_argument("--no-lowercase", action="store_true",
                        help="Keep the case given by the tables")
    parser.add_argument("--keep-diacritics", action="store_true",
                        help="Romanize Arabic vowel marks instead of dropping them")
    parser.add_argument("--show-untranslated", action="store_true",
                        help="Wrap unmapped characters in [brackets] (default)")
    parser.add_argument("--hide-untranslated", action="store_true",
                        help="Pass unmapped characters through unchanged")
    parser.add_argument("--preserve-case", action="store_true",
                        help="Mirror the case of the source text (default)")
    parser.add_argument("--no-preserve-case", action="store_true",
                        help="Ignore source case; --no-lowercase then keeps table case")
    parser.add_argument("--no-tones", action="store_true",
                        help="Strip tone marks (Mandarin, Thai ALA-LC)")
    parser.add_argument("--numeric-tones", action="store_true",
                        help="Write tones as trailing digits (ni3 hao3)")
    parser.add_argument("--char-first", action="store_true",
                        help="Skip the word dictionary, romanize character by character")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from polytranslit.config import TransliterationConfig, list_schemes, load_config
    from polytranslit.errors import TransliterationError
    from polytranslit.languages import get_profile, list_profiles
    from polytranslit.transliterator import Transliterator

    # ── Listings ─────────────────────────────────────────────────────────

    if args.list_languages:
        for language in list_profiles():
            table = get_profile(language).table
            print(f"  {language:12s}  {table.display_name:28s}  {', '.join(table.scheme_ids)}")
        return

    if args.list_schemes:
        try:
            schemes = list_schemes(args.list_schemes)
        except TransliterationError as e:
            parser.error(str(e))
        print(f"═══ Schemes for '{args.list_schemes}' ═══")
        for info in schemes:
            print(f"  {info['id']:12s}  {info['display_name']:28s}  {info['description']}")
        return

    # ── Build config ─────────────────────────────────────────────────────

    config_path = Path(args.config) if args.config else _find_default_config()
    overrides = {}
    if args.language:
        overrides["language"] = args.language
    if args.scheme:
        overrides["scheme"] = args.scheme
    toggles = {
        "no_lowercase": ("lowercase", False),
        "keep_diacritics": ("remove_diacritics", False),
        "show_untranslated": ("show_untranslated", True),
        "hide_untranslated": ("show_untranslated", False),
        "preserve_case": ("preserve_case", True),
        "no_preserve_case": ("preserve_case", False),
        "no_tones": ("include_tones", False),
        "numeric_tones": ("numeric_tones", True),
        "char_first": ("word_first", False),
    }
    for flag, (option, value) in toggles.items():
        if getattr(args, flag):
            overrides[option] = value

    try:
        config = load_config(config_path) if config_path else TransliterationConfig()
        transliterator = Transliterator(config, **overrides)
    except FileNotFoundError as e:
        parser.error(str(e))
    except TransliterationError as e:
        parser.error(str(e))

    # ── Inputs ───────────────────────────────────────────────────────────

    if args.file:
        path = Path(args.file)
        if not path.exists():
            parser.error(f"File not found: {path}")
        texts = path.read_text(encoding="utf-8").splitlines()
    elif args.text is not None:
        texts = [args.text]
    elif not sys.stdin.isatty():
        texts = sys.stdin.read().splitlines()
    else:
        parser.error("Give --text, --file, or pipe text on stdin.")

    if args.analyze:
        for text in texts:
            print(transliterator.analyze(text).summary())
            print()
        return

    for line in transliterator.transliterate_batch(texts):
        print(line)


if __name__ == "__main__":
    main()
