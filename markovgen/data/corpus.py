"""Splitting raw text into word batches."""

import re
from typing import Iterable, Iterator, List


SEPARATORS = re.compile(r'[ \t\n\r]+')


def split_words(line: str) -> List[str]:
    """Split a line on spaces, tabs and line breaks, dropping empty tokens."""
    return [w for w in SEPARATORS.split(line) if w]


def iter_batches(lines: Iterable[str]) -> Iterator[List[str]]:
    """Yield the words of each non-blank line as one batch."""
    for line in lines:
        words = split_words(line)
        if words:
            yield words
