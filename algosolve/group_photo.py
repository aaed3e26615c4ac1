"""Count seatings of eight friends in a row that satisfy distance conditions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from itertools import permutations

FRIENDS = "ACFJMNRT"


@dataclass(frozen=True)
class _Condition:
    first: str
    second: str
    op: str
    distance: int

    @classmethod
    def parse(cls, text: str) -> "_Condition":
        if len(text) < 5 or not text[4].isdigit():
            raise ValueError(f"malformed condition: {text!r}")
        return cls(text[0], text[2], text[3], int(text[4]))

    def holds(self, positions: Mapping[str, int]) -> bool:
        gap = abs(positions.get(self.first, -1) - positions.get(self.second, -1)) - 1
        if self.op == "=":
            return gap == self.distance
        if self.op == ">":
            return gap > self.distance
        if self.op == "<":
            return gap < self.distance
        return True


def count_arrangements(n: int, data: Iterable[str]) -> int:
    """Return how many orderings of the friends meet every condition.

    Each condition looks like ``"N~F=0"``: the number of people standing
    between the two friends must be equal to, greater than or less than the
    digit.  ``n`` is the number of conditions and is not otherwise needed.
    """
    conditions = [_Condition.parse(text) for text in data]
    total = 0
    for order in permutations(FRIENDS):
        positions = {friend: index for index, friend in enumerate(order)}
        if all(condition.holds(positions) for condition in conditions):
            total += 1
    return total