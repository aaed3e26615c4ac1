"""Greedy selection of scored tasks within a time limit."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from pathlib import Path


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def max_score(time_limit: int, items: Iterable[tuple[int, int]]) -> int:
    """Take tasks by highest score first (shorter first on ties) while time lasts.

    Each item is a ``(time, score)`` pair; a task that no longer fits is skipped.
    """
    ordered = sorted(items, key=lambda item: (-item[1], item[0]))
    left = time_limit
    result = 0
    for time, score in ordered:
        if time > left:
            continue
        left -= time
        result += score
        if left < 0:
            break
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and the limit, then ``n`` pairs, and print the greedy score."""
    if argv is None:
        argv = sys.argv[1:]
    values = iter(int(token) for token in _read_text(argv).split())
    n = next(values)
    time_limit = next(values)
    pairs = list(zip(values, values))[:n]
    print(max_score(time_limit, pairs))
    return 0