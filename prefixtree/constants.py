"""Alphabet configuration for the prefix tree."""

from __future__ import annotations

# Child slot i holds the letter chr(ord(BASE_CHAR) + i).
BASE_CHAR = "a"
BASE_CODE = ord(BASE_CHAR)

# 26 covers a-z; 32 also admits the six code points after "z".
SUPPORTED_ALPHABET_SIZES: tuple[int, ...] = (26, 32)
DEFAULT_ALPHABET_SIZE = 26
