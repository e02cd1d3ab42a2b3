"""Word list loaded into a trie for lookups and prefix search."""

from __future__ import annotations

import logging
import os

from captivation.trie import ALPHABET, Trie

log = logging.getLogger("captivation")

_LETTERS = frozenset(ALPHABET)

# Tried in order after an explicit path.
DEFAULT_PATHS = [
    "words.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
]

BUILTIN_WORDS = (
    "a", "an", "and", "ant", "any", "are", "art", "as", "at",
    "bar", "bark", "barn", "bat", "be", "bee", "been", "bet",
    "can", "cap", "car", "card", "care", "cart", "cat", "catch",
    "do", "dog", "done", "door", "dot", "ear", "earn", "east", "eat",
    "tea", "team", "tear", "ten", "the", "then", "there", "to", "ton",
    "top", "tree", "trie", "try", "word", "words", "work", "world",
)


class WordList:
    """Word list with trie-backed lookups and prefix search."""

    def __init__(self, path: str | None = None):
        self.trie = Trie()
        self.source: str | None = None
        self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            if os.path.exists(path):
                search_paths.append(path)
            else:
                log.warning("Word list %s not found -- trying default locations.", path)

        search_paths.extend(DEFAULT_PATHS)

        for candidate in search_paths:
            if os.path.exists(candidate) and self._load_file(candidate):
                self.source = candidate
                log.info("Loaded %s words from %s", f"{len(self.trie):,}", candidate)
                return

        log.warning("No word list found -- using built-in minimal word list.")
        log.warning("Pass --words or save a list as words.txt for real results.")
        self._load_builtin()

    def _load_file(self, path: str) -> int:
        added = skipped = 0
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip().lower()
                if word and _LETTERS.issuperset(word):
                    if self.trie.add(word):
                        added += 1
                else:
                    skipped += 1
        if skipped:
            log.debug("Skipped %d lines in %s", skipped, path)
        return added

    def _load_builtin(self) -> None:
        for w in BUILTIN_WORDS:
            self.trie.add(w)

    def add(self, word: str) -> bool:
        return self.trie.add(word)

    def contains(self, word: str) -> bool:
        return self.trie.contains(word)

    def search(self, prefix: str) -> list[str]:
        return self.trie.search(prefix)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self.trie)
