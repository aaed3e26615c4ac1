"""0/1 knapsack: the greatest total value within a weight capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def max_value(capacity: int, items: Iterable[tuple[int, int]]) -> int:
    """Return the best total value of ``(weight, value)`` items, each used at most once."""
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in items:
        if weight < 0:
            raise ValueError("weights must be non-negative")
        # Largest capacities first, so each item is counted only once.
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and the capacity, then ``n`` weight/value pairs; print the best value."""
    if argv is None:
        argv = sys.argv[1:]
    numbers = iter(int(token) for token in _read_text(argv).split())
    n = next(numbers)
    capacity = next(numbers)
    items = list(islice(zip(numbers, numbers), n))
    print(max_value(capacity, items))
    return 0