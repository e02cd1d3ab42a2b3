import pytest

import trie_shell
from captivation import wordlist as wordlist_module
from captivation.cli import HELP_LINES, handle_command, run_cli
from captivation.wordlist import WordList


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncar\ncard\ndog\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def wl(words_file, monkeypatch):
    monkeypatch.setattr(wordlist_module, "DEFAULT_PATHS", [])
    return WordList(words_file)


def test_add_command(wl):
    assert handle_command(wl, "add cart Cat") == [
        "  cart: added",
        "  cat: already present",
    ]
    assert wl.contains("cart")


def test_has_command(wl):
    assert handle_command(wl, "has cat") == ["  yes"]
    assert handle_command(wl, "has CA") == ["  no"]


def test_search_command(wl):
    assert handle_command(wl, "search ca") == [
        "   1  car",
        "   2  card",
        "   3  cat",
    ]
    assert handle_command(wl, "search") == [
        "   1  car",
        "   2  card",
        "   3  cat",
        "   4  dog",
    ]
    assert handle_command(wl, "search x") == ["  No words start with 'x'."]


def test_search_limit(wl):
    out = handle_command(wl, "search", limit=2)
    assert out == ["   1  car", "   2  card", "  ... and 2 more"]


def test_count_and_help(wl):
    assert handle_command(wl, "count") == ["  4 words"]
    assert handle_command(wl, "help") == HELP_LINES


def test_invalid_word_reported(wl):
    out = handle_command(wl, "add c4t")
    assert len(out) == 1
    assert out[0].startswith("  Invalid.")
    assert not wl.contains("c")


def test_unknown_and_blank(wl):
    assert handle_command(wl, "") == []
    assert handle_command(wl, "frobnicate")[0].startswith("  Format:")
    assert handle_command(wl, "has")[0].startswith("  Format:")


def test_run_cli_session(wl, monkeypatch, capsys):
    inputs = iter(["add tree", "search tr", "done", "has tree"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    run_cli(wl)
    out = capsys.readouterr().out
    assert "tree: added" in out
    assert "1  tree" in out
    assert "yes" not in out


def test_run_cli_eof(wl, monkeypatch, capsys):
    def raise_eof(prompt=""):
        raise EOFError
    monkeypatch.setattr("builtins.input", raise_eof)
    run_cli(wl)
    assert "Interactive Shell" in capsys.readouterr().out


def test_main_search(words_file, capsys):
    assert trie_shell.main(["--words", words_file, "--search", "car"]) == 0
    assert capsys.readouterr().out.splitlines() == ["car", "card"]


def test_main_check(words_file, capsys):
    assert trie_shell.main(["--words", words_file, "--check", "dog"]) == 0
    assert capsys.readouterr().out.strip() == "yes"
    assert trie_shell.main(["--words", words_file, "--check", "do"]) == 1
    assert capsys.readouterr().out.strip() == "no"


def test_main_invalid_word(words_file):
    with pytest.raises(SystemExit) as excinfo:
        trie_shell.main(["--words", words_file, "--search", "Ca"])
    assert excinfo.value.code == 2
