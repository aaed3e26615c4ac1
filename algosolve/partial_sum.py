"""Length of the shortest contiguous run whose sum reaches a target."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def shortest_subarray(values: Iterable[int], target: int) -> int:
    """Return the length of the shortest run with sum >= ``target``, or 0 if none.

    The values must be non-negative; the sliding window relies on it.
    """
    values = list(values)
    if any(value < 0 for value in values):
        raise ValueError("values must be non-negative")

    best: int | None = None
    total = 0
    left = 0
    for right, value in enumerate(values):
        total += value
        while left <= right and total >= target:
            length = right - left + 1
            if best is None or length < best:
                best = length
            total -= values[left]
            left += 1
    return best or 0


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n`` and the target, then ``n`` values, and print the shortest length."""
    if argv is None:
        argv = sys.argv[1:]
    numbers = iter(int(token) for token in _read_text(argv).split())
    n = next(numbers)
    target = next(numbers)
    print(shortest_subarray(islice(numbers, n), target))
    return 0