"""Word list file loader backed by a prefix tree."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from prefixtree.constants import COMMENT_PREFIX, LOGGER_NAME
from prefixtree.trie import PrefixTree

log = logging.getLogger(LOGGER_NAME)


class WordList:
    """Words read from a text file, one per line, stored in a prefix tree."""

    def __init__(self, path: str | None = None):
        self.path = path
        self.tree = PrefixTree()
        if path:
            self._load(path)

    def _load(self, path: str) -> None:
        if not os.path.exists(path):
            log.warning("Word list %s not found -- starting empty.", path)
            return

        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if word and not word.startswith(COMMENT_PREFIX):
                    self.tree.insert(word)
        log.info("Loaded %s words from %s", f"{len(self.tree):,}", path)

    def add(self, words: Iterable[str]) -> None:
        self.tree.update(words)

    def is_valid(self, word: str) -> bool:
        return self.tree.search(word)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return len(self.tree)
