"""Word list loading into a prefix trie."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from prefixtree.trie import InvalidCharacter, Trie

log = logging.getLogger("prefixtree")


def iter_words(path: str) -> Iterator[str]:
    """Yield one lower-cased word per non-blank line of ``path``."""
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().lower()
            if word:
                yield word


def load_word_list(path: str, trie: Trie) -> int:
    """Insert every word from ``path`` that fits the trie's alphabet.

    Words with characters outside the alphabet are skipped, not fatal.
    Returns the number of words inserted, duplicates included.
    """
    inserted = 0
    skipped = 0
    for word in iter_words(path):
        try:
            trie.insert(word)
        except InvalidCharacter as exc:
            skipped += 1
            log.debug("Skipping %r: %s", word, exc)
            continue
        inserted += 1

    if skipped:
        log.warning("Skipped %s words with characters outside the alphabet", f"{skipped:,}")
    log.info("Loaded %s words from %s", f"{inserted:,}", path)
    return inserted
