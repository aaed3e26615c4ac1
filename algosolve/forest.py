"""Count the trees in an undirected graph, one test case at a time."""

from __future__ import annotations

import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import islice
from pathlib import Path

_ROOT_PARENT = 0


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def _is_acyclic_from(graph: dict[int, list[int]], root: int, visited: set[int]) -> bool:
    """Walk depth-first from ``root``; stop as soon as a cycle shows up."""
    visited.add(root)
    stack = [(root, _ROOT_PARENT, iter(graph[root]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for nxt in neighbours:
            if nxt == parent:
                continue
            if nxt in visited:
                return False
            visited.add(nxt)
            stack.append((nxt, node, iter(graph[nxt])))
            break
        else:
            stack.pop()
    return True


def count_trees(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return how many connected components of vertices 1..n are trees."""
    graph: dict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        graph[a].append(b)
        graph[b].append(a)

    visited: set[int] = set()
    count = 0
    for vertex in range(1, n + 1):
        if vertex not in visited and _is_acyclic_from(graph, vertex, visited):
            count += 1
    return count


def describe_case(case: int, count: int) -> str:
    """Format the verdict line for one test case."""
    prefix = f"Case {case}: "
    if count > 1:
        return f"{prefix}A forest of {count} trees."
    if count == 1:
        return f"{prefix}There is one tree."
    return f"{prefix}No trees."


def main(argv: Sequence[str] | None = None) -> int:
    """Read cases until ``0 0`` and print one verdict per case."""
    if argv is None:
        argv = sys.argv[1:]
    values = (int(token) for token in _read_text(argv).split())
    for case, (n, m) in enumerate(zip(values, values), start=1):
        if n == 0 and m == 0:
            break
        edges = list(islice(zip(values, values), m))
        print(describe_case(case, count_trees(n, edges)))
    return 0