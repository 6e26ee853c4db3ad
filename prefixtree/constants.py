"""Shared constants for the prefix tree package."""

LOGGER_NAME = "prefixtree"
LOG_FORMAT = "[%(levelname)s] %(message)s"

# Word list files
COMMENT_PREFIX = "#"

# Interactive session
PROMPT = "  trie> "

# Seeded when the tool is run without any words
DEMO_WORDS = ("abcd", "foobar")
