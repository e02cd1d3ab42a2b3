"""Word trie -- prefix tree over lowercase words."""

from captivation.trie import ALPHABET, ALPHABET_SIZE, InvalidWordError, Trie, TrieNode
from captivation.wordlist import WordList
from captivation.cli import handle_command, run_cli

__all__ = [
    "ALPHABET",
    "ALPHABET_SIZE",
    "InvalidWordError",
    "Trie",
    "TrieNode",
    "WordList",
    "handle_command",
    "run_cli",
]
