"""Repeatedly remove an explosive substring from a text."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

EMPTY_RESULT = "FRULA"


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def explode(text: str, bomb: str) -> str:
    """Return what is left after every occurrence of ``bomb`` has chain-exploded."""
    if not bomb:
        return text
    size = len(bomb)
    tail = list(bomb)
    stack: list[str] = []
    for char in text:
        stack.append(char)
        if len(stack) >= size and stack[-size:] == tail:
            del stack[-size:]
    return "".join(stack)


def main(argv: Sequence[str] | None = None) -> int:
    """Read the text and the bomb, then print what is left or FRULA."""
    if argv is None:
        argv = sys.argv[1:]
    tokens = _read_text(argv).split()
    if len(tokens) < 2:
        raise ValueError("expected a text and a bomb string")
    print(explode(tokens[0], tokens[1]) or EMPTY_RESULT)
    return 0