"""Lay out words into 80-column lines, honouring <br> and <hr> tags."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

LINE_WIDTH = 80
BREAK = "<br>"
RULE = "<hr>"
RULE_LINE = "-" * LINE_WIDTH


def _read_text(argv: Sequence[str]) -> str:
    if argv:
        return Path(argv[0]).read_text()
    return sys.stdin.read()


def wrap_words(words: Iterable[str]) -> Iterator[str]:
    """Yield output lines; the last one is the unfinished line, possibly empty."""
    line = ""
    for word in words:
        if word == BREAK:
            yield line
            line = ""
        elif word == RULE:
            if line:
                yield line
                line = ""
            yield RULE_LINE
        elif len(line) + len(word) >= LINE_WIDTH:
            yield line
            line = word
        elif line:
            line = f"{line} {word}"
        else:
            line = word
    yield line


def render_html(words: Iterable[str]) -> str:
    """Return the laid-out text for ``words``."""
    return "\n".join(wrap_words(words))


def main(argv: Sequence[str] | None = None) -> int:
    """Read whitespace-separated words and print the laid-out text."""
    if argv is None:
        argv = sys.argv[1:]
    sys.stdout.write(render_html(_read_text(argv).split()))
    return 0