"""Expand abbreviated IPv6 addresses to their full 39-character form."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

GROUP_COUNT = 8
GROUP_WIDTH = 4
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def _groups(text: str) -> list[str]:
    if not text:
        return []
    groups = text.split(":")
    for group in groups:
        if not 1 <= len(group) <= GROUP_WIDTH or not set(group) <= _HEX_DIGITS:
            raise ValueError(f"invalid IPv6 group: {group!r}")
    return [group.zfill(GROUP_WIDTH) for group in groups]


def expand_ipv6(address: str) -> str:
    """Return ``address`` with every group zero-padded and ``::`` filled in."""
    halves = address.split("::")
    if len(halves) > 2:
        raise ValueError(f"more than one '::' in {address!r}")

    head = _groups(halves[0])
    if len(halves) == 2:
        tail = _groups(halves[1])
        missing = GROUP_COUNT - len(head) - len(tail)
        if missing < 0:
            raise ValueError(f"too many groups in {address!r}")
        groups = head + ["0" * GROUP_WIDTH] * missing + tail
    else:
        groups = head
        if len(groups) != GROUP_COUNT:
            raise ValueError(f"expected {GROUP_COUNT} groups in {address!r}")
    return ":".join(groups)


def main(argv: Sequence[str] | None = None) -> int:
    """Read one address and print its full form."""
    if argv is None:
        argv = sys.argv[1:]
    tokens = _read_text(argv).split()
    if not tokens:
        raise ValueError("no address given")
    print(expand_ipv6(tokens[0]))
    return 0