"""Longest substring of a string that is not a palindrome."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same backwards."""
    return text == text[::-1]


def all_same(text: str) -> bool:
    """Return True if every character of ``text`` is the same one."""
    return len(set(text)) <= 1


def longest_non_palindrome(text: str) -> int:
    """Return the length of the longest non-palindromic substring, or -1 if none."""
    if not is_palindrome(text):
        return len(text)
    if all_same(text):
        return -1
    return len(text) - 1


def main(argv: Sequence[str] | None = None) -> int:
    """Read one word and print the length of its longest non-palindrome."""
    if argv is None:
        argv = sys.argv[1:]
    tokens = _read_text(argv).split()
    if not tokens:
        raise ValueError("no word given")
    print(longest_non_palindrome(tokens[0]))
    return 0