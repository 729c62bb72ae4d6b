"""Tests for the terminal front end."""

import pytest

import autocomplete_cli
from autocomplete import constants
from autocomplete.cli import run_cli
from autocomplete.wordlist import WordList


@pytest.fixture
def wordlist(tmp_path, monkeypatch):
    monkeypatch.setattr(constants, "WORDLIST_SEARCH_PATHS", [])
    path = tmp_path / "words.txt"
    path.write_text("cat\ncar\ncare\ndog\n", encoding="utf-8")
    return WordList(str(path))


def feed(monkeypatch, lines):
    answers = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


def test_prints_suggestions(wordlist, monkeypatch, capsys):
    feed(monkeypatch, ["ca", ":quit", "never read"])
    run_cli(wordlist)
    out = capsys.readouterr().out
    assert "3 matches:" in out
    assert "1. car" in out
    assert "3. cat" in out


def test_limit_and_exact_word_note(wordlist, monkeypatch, capsys):
    feed(monkeypatch, ["car"])
    run_cli(wordlist, limit=1)
    out = capsys.readouterr().out
    assert "1. car" in out
    assert "care" not in out
    assert "... and 1 more" in out
    assert "'car' is itself a word." in out


def test_no_matches(wordlist, monkeypatch, capsys):
    feed(monkeypatch, ["xyz"])
    run_cli(wordlist)
    assert "No words start with 'xyz'." in capsys.readouterr().out


def test_add_and_size_commands(wordlist, monkeypatch, capsys):
    feed(monkeypatch, [":size", ":add Dove", ":add", ":add d0ve", ":size", "do", ":bogus"])
    run_cli(wordlist)
    out = capsys.readouterr().out
    assert "4 words" in out
    assert "Added 'dove'" in out
    assert "Format: :add WORD" in out
    assert "Words must be letters only." in out
    assert "5 words" in out
    assert "2. dove" in out
    assert "Unknown command ':bogus'" in out
    assert "dove" in wordlist


def test_main_uses_dict_and_limit(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(constants, "WORDLIST_SEARCH_PATHS", [])
    path = tmp_path / "words.txt"
    path.write_text("alpha\nalpine\nalps\n", encoding="utf-8")
    feed(monkeypatch, ["al"])
    autocomplete_cli.main(["--dict", str(path), "--limit", "2"])
    out = capsys.readouterr().out
    assert "3 matches:" in out
    assert "2. alpine" in out
    assert "alps" not in out


def test_main_rejects_bad_limit():
    with pytest.raises(SystemExit):
        autocomplete_cli.main(["--limit", "0"])
