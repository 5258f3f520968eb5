"""Command-line tool: load a word list and query the resulting trie."""

from __future__ import annotations

import argparse
import logging
import time

from prefixtree.constants import DEFAULT_ALPHABET_SIZE, SUPPORTED_ALPHABET_SIZES
from prefixtree.trie import InvalidCharacter, Trie
from prefixtree.wordlist import load_word_list

log = logging.getLogger("prefixtree")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prefixtree",
        description="Load a word list into a prefix trie and run word / prefix queries",
    )
    parser.add_argument("wordlist", type=str,
                        help="Path to a word list file (one word per line)")
    parser.add_argument("--alphabet-size", type=int, default=DEFAULT_ALPHABET_SIZE,
                        choices=SUPPORTED_ALPHABET_SIZES,
                        help="Child slots per node (default: %(default)s)")
    parser.add_argument("--word", action="append", default=[], metavar="WORD",
                        help="Check whether WORD was inserted (repeatable)")
    parser.add_argument("--prefix", action="append", default=[], metavar="PREFIX",
                        help="Check whether PREFIX starts any inserted word (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def run_queries(trie: Trie, words: list[str], prefixes: list[str]) -> None:
    """Print one yes/no line per query."""
    for word in words:
        answer = "yes" if trie.contains_word(word) else "no"
        print(f"  word   {word!r:<20} {answer}")
    for prefix in prefixes:
        answer = "yes" if trie.contains_prefix(prefix) else "no"
        print(f"  prefix {prefix!r:<20} {answer}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    trie = Trie(args.alphabet_size)

    t0 = time.perf_counter()
    try:
        count = load_word_list(args.wordlist, trie)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Cannot read word list %s: %s", args.wordlist, exc)
        return 1
    elapsed = time.perf_counter() - t0

    print(f"Loaded {count:,} words in {elapsed:.2f}s.")
    print(f"Nodes total: {trie.nodes_total():,}")

    try:
        run_queries(trie, args.word, args.prefix)
    except InvalidCharacter as exc:
        log.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
