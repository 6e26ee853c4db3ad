"""Interactive terminal session over a prefix tree."""

from __future__ import annotations

from prefixtree.constants import PROMPT
from prefixtree.trie import PrefixTree


def print_help() -> None:
    print("Commands:")
    print("  add WORD [WORD ...]   -- store one or more words")
    print("  search WORD           -- is WORD stored exactly?")
    print("  prefix PREFIX         -- does any stored word start with PREFIX?")
    print("  dump                  -- list every stored word")
    print("  count                 -- number of stored words")
    print("  help                  -- show this message")
    print("  done                  -- leave the session")


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def handle_command(tree: PrefixTree, line: str) -> bool:
    """Run one command line. Returns False when the session should end."""
    parts = line.split()
    if not parts:
        return True

    cmd, args = parts[0].lower(), parts[1:]
    if cmd in ("done", "quit", "exit"):
        return False
    if cmd == "help":
        print_help()
    elif cmd == "add" and args:
        tree.update(args)
        print(f"  Added {len(args)} word(s); {len(tree)} stored.")
    elif cmd == "search" and len(args) == 1:
        print(f"  {args[0]}: {_yes_no(tree.search(args[0]))}")
    elif cmd == "prefix" and len(args) <= 1:
        prefix = args[0] if args else ""
        print(f"  {prefix!r}: {_yes_no(tree.starts_with(prefix))}")
    elif cmd == "dump":
        words = tree.dump()
        if not words:
            print("  (empty)")
        for word in words:
            print(f"  {word}")
    elif cmd == "count":
        print(f"  {len(tree)} word(s) stored.")
    else:
        print("  Unknown command.  Type 'help' for the list.")
    return True


def run_cli(tree: PrefixTree) -> None:
    """Read commands from the terminal until 'done' or EOF."""
    print("\n" + "=" * 60)
    print("  PREFIX TREE -- Interactive Session")
    print("=" * 60)
    print()
    print_help()
    print()

    while True:
        try:
            line = input(PROMPT).strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not handle_command(tree, line):
            break

    print(f"\n{len(tree)} word(s) stored.")
