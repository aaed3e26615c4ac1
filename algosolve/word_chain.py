"""Grow a word one letter at a time through a dictionary, as far as it goes."""

from __future__ import annotations

import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def _is_subsequence(short: str, long: str) -> bool:
    remaining = iter(long)
    return all(char in remaining for char in short)


def longest_chain(key: str, words: Iterable[str]) -> str:
    """Return the longest word reachable from ``key`` by inserting one letter per step.

    Every intermediate word must be in ``words``. Among equally long results
    the first one found, in dictionary order, is returned; ``key`` itself is
    returned when it cannot be extended.
    """
    by_length: dict[int, list[str]] = defaultdict(list)
    for word in dict.fromkeys(words):
        by_length[len(word)].append(word)

    answer = key
    level = [key]
    while level:
        answer = level[0]
        candidates = by_length.get(len(answer) + 1, [])
        found: dict[str, None] = {}
        for parent in level:
            for word in candidates:
                if _is_subsequence(parent, word):
                    found[word] = None
        level = list(found)
    return answer


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n``, the starting word and ``n`` dictionary words; print the result."""
    if argv is None:
        argv = sys.argv[1:]
    tokens = iter(_read_text(argv).split())
    n = int(next(tokens))
    key = next(tokens)
    print(longest_chain(key, islice(tokens, n)))
    return 0