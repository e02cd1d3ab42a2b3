"""Prefix trie over lowercase a-z words."""

from __future__ import annotations

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_SIZE = len(ALPHABET)

_BASE = ord("a")


class InvalidWordError(ValueError):
    """Raised when a word contains a character outside a-z."""

    def __init__(self, word: str, char: str, position: int):
        self.word = word
        self.char = char
        self.position = position
        super().__init__(
            f"invalid character {char!r} at position {position} in {word!r} "
            f"(only lowercase a-z allowed)"
        )


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_end_of_word")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_end_of_word: bool = False


class Trie:
    """Prefix trie supporting add, exact lookup and prefix enumeration.

    Not thread-safe: callers must hold exclusive access while adding.
    Concurrent lookups are fine as long as no add is running.
    """

    def __init__(self):
        self.root = TrieNode()
        self._count = 0

    def add(self, word: str) -> bool:
        """Store ``word``.

        Returns True if the word was newly recorded, False if it was
        already present.
        """
        indices = _indices(word)
        node = self.root
        for i in indices:
            child = node.children[i]
            if child is None:
                child = node.children[i] = TrieNode()
            node = child
        if node.is_end_of_word:
            return False
        node.is_end_of_word = True
        self._count += 1
        return True

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_end_of_word

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def search(self, prefix: str) -> list[str]:
        """Return every stored word starting with ``prefix``, sorted."""
        node = self._walk(prefix)
        if node is None:
            return []

        words: list[str] = []
        if node.is_end_of_word:
            words.append(prefix)

        # Pre-order, children in alphabetical order. Pushed in reverse so
        # "a" is popped first.
        stack = [(child, prefix + ALPHABET[i])
                 for i, child in reversed(list(enumerate(node.children)))
                 if child is not None]
        while stack:
            child, path = stack.pop()
            if child.is_end_of_word:
                words.append(path)
            for i in range(ALPHABET_SIZE - 1, -1, -1):
                grandchild = child.children[i]
                if grandchild is not None:
                    stack.append((grandchild, path + ALPHABET[i]))
        return words

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for i in _indices(s):
            node = node.children[i]
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._count


def _indices(word: str) -> list[int]:
    """Map ``word`` to child slot indices, rejecting anything outside a-z."""
    if not isinstance(word, str):
        raise TypeError(f"expected str, got {type(word).__name__}")
    indices = []
    for pos, ch in enumerate(word):
        i = ord(ch) - _BASE
        if not 0 <= i < ALPHABET_SIZE:
            raise InvalidWordError(word, ch, pos)
        indices.append(i)
    return indices
