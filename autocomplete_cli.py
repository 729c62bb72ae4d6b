#!/usr/bin/env python3
"""
Autocomplete

Loads a word list into a prefix trie and suggests completions for
prefixes typed at the terminal.
"""

from __future__ import annotations

import argparse
import logging

from autocomplete.cli import run_cli
from autocomplete.constants import DEFAULT_LIMIT
from autocomplete.wordlist import WordList


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("autocomplete")


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Autocomplete -- suggests words for a typed prefix",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to word list file (one word per line)")
    parser.add_argument("--limit", type=int, default=DEFAULT_LIMIT,
                        help="Maximum suggestions shown per prefix")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.limit < 1:
        parser.error("--limit must be at least 1")

    wordlist = WordList(args.dict)
    log.debug("Word list source: %s", wordlist.source or "built-in")
    run_cli(wordlist, limit=args.limit)


if __name__ == "__main__":
    main()
