"""Shared test fixtures."""

from pathlib import Path

import pytest

from polytranslit.transliterator import Transliterator


@pytest.fixture
def write_config(tmp_path):
    """Return a function that writes a polytranslit.toml and returns its path."""

    def _write(body: str, name: str = "polytranslit.toml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(write_config) -> Path:
    """A config selecting Russian with the BGN/PCGN scheme."""
    return write_config(
        '[transliteration]\n'
        'language = "russian"\n'
        'scheme = "bgn"\n'
        'preserve_case = true\n'
    )


@pytest.fixture
def auto() -> Transliterator:
    """Transliterator with default options (language detected per call)."""
    return Transliterator()
