"""Prefix tree for exact-match, prefix and enumeration queries."""

from __future__ import annotations

import logging
import sys
from typing import IO, Iterable, Iterator

from prefixtree.constants import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)


class PrefixTreeNode:
    """One character of a stored string, plus the subtree beneath it.

    Every method takes the *rest* of a key, i.e. the characters after
    this node's own ``value``.
    """

    __slots__ = ("value", "children", "is_terminal")

    def __init__(self, value: str):
        self.value: str = value
        self.children: dict[str, PrefixTreeNode] = {}
        self.is_terminal: bool = False

    def insert(self, rest: str) -> bool:
        """Add ``rest`` below this node.

        Returns True if the node for the last character was not terminal
        before, i.e. the tree now holds one more string.
        """
        node = self
        for ch in rest:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = PrefixTreeNode(ch)
            node = child
        if node.is_terminal:
            return False
        node.is_terminal = True
        return True

    def find(self, rest: str) -> PrefixTreeNode | None:
        node = self
        for ch in rest:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def search(self, rest: str) -> bool:
        node = self.find(rest)
        return node is not None and node.is_terminal

    def starts_with(self, rest: str) -> bool:
        # Every node was created for some insertion, so reaching it is enough.
        return self.find(rest) is not None

    def words(self, path: str = "") -> Iterator[str]:
        """Yield stored strings in this subtree, ascending.

        ``path`` is the string spelled by the nodes above this one.
        A word is emitted at every terminal node, including ones that
        still have children.
        """
        stack = [(self, path + self.value)]
        while stack:
            node, word = stack.pop()
            if node.is_terminal:
                yield word
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], word + ch))

    def __repr__(self) -> str:
        end = "*" if self.is_terminal else ""
        return f"PrefixTreeNode({self.value!r}{end}, children={len(self.children)})"


class PrefixTree:
    """Set of non-empty strings stored as a prefix tree.

    The root holds only the first-level branching table; it has no value
    and no terminal flag, so the empty string is never a member.
    """

    __slots__ = ("children", "_size")

    def __init__(self):
        self.children: dict[str, PrefixTreeNode] = {}
        self._size = 0

    @classmethod
    def create(cls, s: str) -> PrefixTree | None:
        """A tree holding just ``s``, or None when ``s`` is empty."""
        if not s:
            return None
        tree = cls()
        tree.insert(s)
        return tree

    def insert(self, s: str) -> None:
        if not s:
            log.debug("Ignoring insert of the empty string.")
            return
        child = self.children.get(s[0])
        if child is None:
            child = self.children[s[0]] = PrefixTreeNode(s[0])
        if child.insert(s[1:]):
            self._size += 1

    def update(self, words: Iterable[str]) -> None:
        for word in words:
            self.insert(word)

    def search(self, key: str) -> bool:
        """True if ``key`` was inserted. Always False for ``""``."""
        if not key:
            log.debug("Search key was empty.")
            return False
        child = self.children.get(key[0])
        return child is not None and child.search(key[1:])

    def starts_with(self, prefix: str) -> bool:
        """True if at least one stored string begins with ``prefix``.

        The empty string counts as a prefix of anything, so ``""`` is
        always True, even on an empty tree.
        """
        if not prefix:
            return True
        child = self.children.get(prefix[0])
        return child is not None and child.starts_with(prefix[1:])

    def dump(self) -> list[str]:
        """Every stored string exactly once, in ascending order."""
        return list(self)

    def print(self, file: IO[str] | None = None) -> None:
        out = file if file is not None else sys.stdout
        for word in self.dump():
            print(word, file=out)

    def debug(self) -> None:
        for word in self.dump():
            log.info("%s", word)

    def __iter__(self) -> Iterator[str]:
        for ch in sorted(self.children):
            yield from self.children[ch].words()

    def __contains__(self, key: str) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"PrefixTree(size={self._size})"
