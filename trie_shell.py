#!/usr/bin/env python3
"""
Word Trie Shell

Loads a word list into a prefix trie and lets you add words, check
membership and list every word starting with a prefix, either
interactively or with a single --search / --check query.
"""

from __future__ import annotations

import argparse
import logging
import sys

from captivation.cli import run_cli
from captivation.trie import InvalidWordError
from captivation.wordlist import WordList


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("captivation")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Word Trie -- prefix search over a word list",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to word list file (one word per line)")
    query = parser.add_mutually_exclusive_group()
    query.add_argument("--search", type=str, default=None, metavar="PREFIX",
                       help="Print every word starting with PREFIX and exit")
    query.add_argument("--check", type=str, default=None, metavar="WORD",
                       help="Print yes/no for WORD and exit (status 1 if absent)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    wordlist = WordList(args.words)

    try:
        if args.search is not None:
            for word in wordlist.search(args.search):
                print(word)
            return 0
        if args.check is not None:
            found = wordlist.contains(args.check)
            print("yes" if found else "no")
            return 0 if found else 1
    except InvalidWordError as exc:
        parser.error(str(exc))

    run_cli(wordlist)
    return 0


if __name__ == "__main__":
    sys.exit(main())
