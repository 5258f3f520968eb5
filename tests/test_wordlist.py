import logging

import pytest

from prefixtree import Trie, iter_words, load_word_list


def write_words(tmp_path, *lines):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_iter_words_strips_and_lowercases(tmp_path):
    path = write_words(tmp_path, "  Hello ", "", "WORLD", "   ")
    assert list(iter_words(path)) == ["hello", "world"]


def test_load_word_list(tmp_path, caplog):
    path = write_words(tmp_path, "the", "quick", "brown", "fox", "jumps",
                       "over", "the", "lazy", "dog")
    t = Trie()

    with caplog.at_level(logging.INFO, logger="prefixtree"):
        count = load_word_list(path, t)

    assert count == 9
    assert t.nodes_total() == 858
    assert t.contains_word("lazy") is True
    assert f"Loaded 9 words from {path}" in caplog.text


def test_load_word_list_skips_invalid(tmp_path, caplog):
    path = write_words(tmp_path, "cat", "don't", "dog", "naïve")
    t = Trie()

    with caplog.at_level(logging.DEBUG, logger="prefixtree"):
        count = load_word_list(path, t)

    assert count == 2
    assert t.contains_word("cat") is True
    assert t.contains_word("dog") is True
    assert t.contains_prefix("don") is False
    assert "Skipped 2 words" in caplog.text
    assert "Skipping \"don't\"" in caplog.text


def test_load_word_list_32_accepts_braces(tmp_path):
    path = write_words(tmp_path, "a{b", "a|")
    t = Trie(alphabet_size=32)
    assert load_word_list(path, t) == 2
    assert t.contains_word("a{b") is True


def test_load_word_list_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / "missing.txt"), Trie())
