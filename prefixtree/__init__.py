"""Prefix tree (trie) with exact-match, prefix and enumeration queries."""

from prefixtree.trie import PrefixTree, PrefixTreeNode
from prefixtree.wordlist import WordList
from prefixtree.cli import handle_command, run_cli

__all__ = [
    "PrefixTree",
    "PrefixTreeNode",
    "WordList",
    "handle_command",
    "run_cli",
]
