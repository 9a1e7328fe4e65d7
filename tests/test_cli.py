"""Tests for the command-line interface (cli.py)."""

import io

import pytest

from polytranslit.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    """Run every test where no polytranslit.toml is lying around."""
    monkeypatch.chdir(tmp_path)


def _run(capsys, *argv) -> str:
    main(list(argv))
    return capsys.readouterr().out


# ── Transliteration ───────────────────────────────────────────────────────────

def test_text(capsys):
    assert _run(capsys, "--text", "你好") == "nǐ hǎo\n"


def test_flags(capsys):
    assert _run(capsys, "--text", "你好", "--no-tones") == "ni hao\n"
    assert _run(capsys, "--text", "你好", "--numeric-tones") == "ni3 hao3\n"
    assert _run(capsys, "--text", "Привет", "--preserve-case") == "Privet\n"
    assert _run(capsys, "--text", "Привет", "--no-preserve-case") == "privet\n"


def test_untranslated_flags(capsys):
    assert _run(capsys, "--text", "بڤ", "--language", "arabic") == "b[ڤ]\n"
    assert _run(capsys, "--text", "بڤ", "--language", "arabic", "--hide-untranslated") == "bڤ\n"


def test_hide_untranslated_overrides_config(capsys, write_config):
    path = write_config('[transliteration]\nlanguage = "arabic"\nshow_untranslated = true\n')
    assert _run(capsys, "--config", str(path), "--text", "بڤ", "--hide-untranslated") == "bڤ\n"


def test_language_and_scheme(capsys):
    out = _run(capsys, "--text", "ش", "--language", "arabic", "--scheme", "iso")
    assert out == "š\n"


def test_file(capsys, tmp_path):
    path = tmp_path / "lines.txt"
    path.write_text("你好\nПривет\n", encoding="utf-8")
    assert _run(capsys, "--file", str(path)) == "nǐ hǎo\nPrivet\n"


def test_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("こんにちは\n"))
    assert _run(capsys) == "konnichiwa\n"


def test_analyze(capsys):
    out = _run(capsys, "--text", "こんにちは", "--analyze")
    assert "═══ Transliteration Analysis ═══" in out
    assert "konnichiwa" in out


# ── Config ────────────────────────────────────────────────────────────────────

def test_explicit_config(capsys, config_file):
    assert _run(capsys, "--config", str(config_file), "--text", "Привет") == "Privet\n"


def test_config_found_in_cwd(capsys, tmp_path):
    (tmp_path / "polytranslit.toml").write_text(
        '[transliteration]\nlanguage = "mandarin"\ninclude_tones = false\n',
        encoding="utf-8",
    )
    assert _run(capsys, "--text", "你好") == "ni hao\n"


def test_flags_override_config(capsys, config_file):
    out = _run(capsys, "--config", str(config_file), "--text", "съезд", "--scheme", "simplified")
    assert out == "sezd\n"


# ── Listings ──────────────────────────────────────────────────────────────────

def test_list_languages(capsys):
    out = _run(capsys, "--list-languages")
    assert "korean" in out
    assert "rr, mr, yale" in out


def test_list_schemes(capsys):
    out = _run(capsys, "--list-schemes", "arabic")
    assert "Schemes for 'arabic'" in out
    assert "iso" in out
    assert "ALA-LC" in out


# ── Errors ────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize("argv", [
    ["--text", "x", "--language", "arabic", "--scheme", "gost"],
    ["--text", "x", "--language", "klingon"],
    ["--text", "x", "--config", "missing.toml"],
    ["--file", "missing.txt"],
    ["--list-schemes", "klingon"],
])
def test_errors_exit(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    assert exc_info.value.code == 2
