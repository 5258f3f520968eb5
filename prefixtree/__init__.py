"""prefixtree — dense-array prefix trie for lower-case words."""

from prefixtree.constants import BASE_CHAR, DEFAULT_ALPHABET_SIZE, SUPPORTED_ALPHABET_SIZES
from prefixtree.trie import InvalidCharacter, Trie, TrieNode
from prefixtree.wordlist import iter_words, load_word_list

# Alternate name for the trie type.
PrefixTree = Trie

__all__ = [
    "BASE_CHAR",
    "DEFAULT_ALPHABET_SIZE",
    "SUPPORTED_ALPHABET_SIZES",
    "InvalidCharacter",
    "PrefixTree",
    "Trie",
    "TrieNode",
    "iter_words",
    "load_word_list",
]
