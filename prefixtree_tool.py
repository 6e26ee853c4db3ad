#!/usr/bin/env python3
"""
Prefix Tree Tool

Builds a prefix tree from words given on the command line and/or a
word list file, then answers exact-match and prefix queries against it.
Run without any words to try it on a small demo set.
"""

from __future__ import annotations

import argparse
import logging

from prefixtree.cli import run_cli
from prefixtree.constants import DEMO_WORDS, LOG_FORMAT, LOGGER_NAME
from prefixtree.wordlist import WordList

log = logging.getLogger(LOGGER_NAME)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Prefix Tree Tool -- store words and query them by word or prefix",
    )
    parser.add_argument("words", nargs="*",
                        help="Words to insert, in order")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to a word list file (one word per line)")
    parser.add_argument("--search", action="append", default=[], metavar="WORD",
                        help="Check whether WORD is stored (repeatable)")
    parser.add_argument("--prefix", action="append", default=[], metavar="PREFIX",
                        help="Check whether any stored word starts with PREFIX (repeatable)")
    parser.add_argument("--dump", action="store_true",
                        help="Print every stored word in ascending order")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Enter an interactive session after loading")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    words = WordList(args.dict)
    tree = words.tree
    demo = not args.words and not args.dict
    if demo:
        log.info("No words given -- using demo words: %s", ", ".join(DEMO_WORDS))
        tree.update(DEMO_WORDS)
    else:
        tree.update(args.words)

    # Only the demo set is listed at INFO unless --verbose.
    if demo or args.verbose:
        tree.debug()
    if demo:
        log.debug("Empty search: %s", tree.search(""))

    for word in args.search:
        print(f"{word}: {'yes' if tree.search(word) else 'no'}")
    for prefix in args.prefix:
        print(f"{prefix}: {'yes' if tree.starts_with(prefix) else 'no'}")
    if args.dump:
        tree.print()

    if args.interactive:
        run_cli(tree)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
