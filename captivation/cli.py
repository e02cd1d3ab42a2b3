"""CLI / terminal mode for the word trie."""

from __future__ import annotations

import logging
import time

from captivation.trie import InvalidWordError
from captivation.wordlist import WordList

log = logging.getLogger("captivation")

SEARCH_LIMIT = 50

HELP_LINES = [
    "Commands:",
    "  add WORD [WORD...]    -- add words            (e.g. add cat car)",
    "  has WORD              -- exact lookup         (e.g. has cat)",
    "  search [PREFIX]       -- list words by prefix (e.g. search ca)",
    "  count                 -- number of stored words",
    "  help                  -- show this list",
    "  done                  -- quit",
]

QUIT_COMMANDS = ("done", "quit", "exit")


def handle_command(wordlist: WordList, line: str, limit: int = SEARCH_LIMIT) -> list[str]:
    """Run one shell command and return the lines to print."""
    parts = line.split()
    if not parts:
        return []
    cmd = parts[0].lower()
    args = [p.lower() for p in parts[1:]]

    try:
        if cmd == "add" and args:
            out = []
            for word in args:
                status = "added" if wordlist.add(word) else "already present"
                out.append(f"  {word}: {status}")
            return out
        if cmd == "has" and len(args) == 1:
            return ["  yes" if wordlist.contains(args[0]) else "  no"]
        if cmd == "search" and len(args) <= 1:
            prefix = args[0] if args else ""
            return _format_matches(prefix, wordlist.search(prefix), limit)
    except InvalidWordError as exc:
        return [f"  Invalid.  {exc}"]

    if cmd == "count" and not args:
        return [f"  {len(wordlist):,} words"]
    if cmd == "help":
        return list(HELP_LINES)
    return ["  Format: add WORD | has WORD | search PREFIX | count | help | done"]


def _format_matches(prefix: str, matches: list[str], limit: int) -> list[str]:
    if not matches:
        return [f"  No words start with '{prefix}'."]
    out = [f" {i+1:>3}  {w}" for i, w in enumerate(matches[:limit])]
    if len(matches) > limit:
        out.append(f"  ... and {len(matches) - limit} more")
    return out


def run_cli(wordlist: WordList) -> None:
    """Run in terminal mode."""
    print("\n" + "=" * 60)
    print("  WORD TRIE -- Interactive Shell")
    print("=" * 60)
    print()
    for line in HELP_LINES:
        print(line)
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if inp.lower() in QUIT_COMMANDS:
            break

        t0 = time.perf_counter()
        out = handle_command(wordlist, inp)
        log.debug("%r took %.3f ms", inp, (time.perf_counter() - t0) * 1000)
        for line in out:
            print(line)
