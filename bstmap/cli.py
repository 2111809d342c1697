"""Command that fills a map with words and prints them in order."""

from __future__ import annotations

from typing import Optional, Sequence

from bstmap.treemap import TreeMap

WORDS = ("saco", "cese", "case", "cosa", "casa", "cesa", "cose", "seco", "saca")


def lower_than_string(key1: str, key2: str) -> bool:
    """Order strings lexicographically."""
    return key1 < key2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Insert the sample words and print their values in key order."""
    word_map = TreeMap(lower_than_string)
    for word in WORDS:
        word_map.insert(word, word)

    pair = word_map.first()
    while pair is not None:
        print(pair.value)
        pair = word_map.next()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())