"""Prefix trie over a fixed lower-case alphabet.

Every node carries a dense list of child slots, one per letter, so a
lookup is a single index operation.  This trades memory for speed: the
tree is charged ``alphabet_size`` per node in :meth:`Trie.nodes_total`.
A Patricia tree that merges single-child chains would be far smaller.
"""

from __future__ import annotations

from prefixtree.constants import BASE_CODE, DEFAULT_ALPHABET_SIZE, SUPPORTED_ALPHABET_SIZES


class InvalidCharacter(ValueError):
    """A word contains a character outside the trie's alphabet."""

    def __init__(self, word: str, position: int, alphabet_size: int):
        super().__init__(word, position, alphabet_size)
        self.word = word
        self.position = position
        self.char = word[position]
        self.alphabet_size = alphabet_size

    def __str__(self) -> str:
        return (
            f"invalid character {self.char!r} at position {self.position} in {self.word!r} "
            f"(alphabet size {self.alphabet_size})"
        )


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self, alphabet_size: int = DEFAULT_ALPHABET_SIZE):
        self.children: list[TrieNode | None] = [None] * alphabet_size
        self.is_terminal: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        # Iterative so deep chains do not hit the recursion limit.
        stack: list[tuple[TrieNode, TrieNode]] = [(self, other)]
        while stack:
            a, b = stack.pop()
            if a.is_terminal != b.is_terminal or len(a.children) != len(b.children):
                return False
            for x, y in zip(a.children, b.children):
                if x is None or y is None:
                    if x is not y:
                        return False
                else:
                    stack.append((x, y))
        return True

    def __repr__(self) -> str:
        used = sum(1 for child in self.children if child is not None)
        return f"TrieNode(children={used}/{len(self.children)}, is_terminal={self.is_terminal})"


class Trie:
    """Prefix trie for fast word and prefix checks.

    Parameters
    ----------
    alphabet_size : int
        Number of child slots per node, one of ``SUPPORTED_ALPHABET_SIZES``.

    Not safe for concurrent use; callers sharing a trie across threads
    must serialise ``insert`` and ``clear`` themselves.
    """

    def __init__(self, alphabet_size: int = DEFAULT_ALPHABET_SIZE):
        if alphabet_size not in SUPPORTED_ALPHABET_SIZES:
            raise ValueError(
                f"alphabet_size must be one of {SUPPORTED_ALPHABET_SIZES}, got {alphabet_size!r}"
            )
        self.alphabet_size = alphabet_size
        self.root = TrieNode(alphabet_size)
        self.node_count = alphabet_size

    # public API

    def insert(self, word: str) -> None:
        """Add ``word``.  The whole word is validated before the tree changes."""
        size = self.alphabet_size
        node = self.root
        for idx in self._indices(word):
            child = node.children[idx]
            if child is None:
                child = TrieNode(size)
                node.children[idx] = child
                self.node_count += size
            node = child
        node.is_terminal = True

    def contains_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def contains_prefix(self, word: str) -> bool:
        return self._walk(word) is not None

    def is_empty(self) -> bool:
        """True if the root is indistinguishable from a fresh node."""
        return self.root == TrieNode(self.alphabet_size)

    def clear(self) -> None:
        self.root = TrieNode(self.alphabet_size)
        self.node_count = self.alphabet_size

    def nodes_total(self) -> int:
        """Child slots allocated so far: ``alphabet_size`` per node, root included."""
        return self.node_count

    def __contains__(self, word: str) -> bool:
        return self.contains_word(word)

    def __repr__(self) -> str:
        return f"Trie(alphabet_size={self.alphabet_size}, nodes_total={self.node_count})"

    # traversal

    def _indices(self, word: str) -> list[int]:
        """Child slot for each character of ``word``."""
        size = self.alphabet_size
        indices: list[int] = []
        for pos, ch in enumerate(word):
            idx = ord(ch) - BASE_CODE
            if not 0 <= idx < size:
                raise InvalidCharacter(word, pos, size)
            indices.append(idx)
        return indices

    def _walk(self, word: str) -> TrieNode | None:
        """Node reached by ``word``, or None once a slot is missing."""
        size = self.alphabet_size
        node: TrieNode | None = self.root
        for pos, ch in enumerate(word):
            idx = ord(ch) - BASE_CODE
            if not 0 <= idx < size:
                raise InvalidCharacter(word, pos, size)
            node = node.children[idx]
            if node is None:
                return None
        return node
