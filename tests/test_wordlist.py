import logging

from prefixtree import WordList


def test_loads_words_skipping_blanks_and_comments(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# sample list\nzebra\n\n  apple  \nzebra\napp\n", encoding="utf-8")

    words = WordList(str(path))

    assert words.path == str(path)
    assert len(words) == 3
    assert words.tree.dump() == ["app", "apple", "zebra"]
    assert "apple" in words
    assert not words.is_valid("ap")
    assert words.tree.starts_with("ap")


def test_load_logs_word_count(tmp_path, caplog):
    path = tmp_path / "words.txt"
    path.write_text("one\ntwo\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="prefixtree"):
        WordList(str(path))
    assert "Loaded 2 words" in caplog.text


def test_missing_file_warns_and_stays_empty(tmp_path, caplog):
    missing = tmp_path / "nope.txt"
    with caplog.at_level(logging.WARNING, logger="prefixtree"):
        words = WordList(str(missing))
    assert len(words) == 0
    assert "not found" in caplog.text


def test_add_without_file():
    words = WordList()
    words.add(["beta", "alpha", ""])
    assert words.tree.dump() == ["alpha", "beta"]
    assert "" not in words
