"""
Article reference parsing.

    "Art. 67"        -> {67}
    "Art. 67(c)"     -> {67}
    "Art. 55-73"     -> {55, ..., 73}
    "NIS2 Art. 21(2)(d)" -> {21}
    "§ 4(2)(5)"      -> {4}
    "Sections 9-10 SIA 2018" -> {9, 10}
"""

from __future__ import annotations

import re

_ARTICLE_RE = re.compile(
    r"(?:\bArt\.?|\bSections?|§)\s*(\d+)(?:\([^)]*\))*(?:\s*[-–]\s*(\d+))?",
    re.IGNORECASE,
)


def article_numbers(reference: str) -> frozenset[int]:
    """Return every article number a reference covers (ranges expanded)."""
    numbers: set[int] = set()
    for match in _ARTICLE_RE.finditer(reference):
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if end < start:
            start, end = end, start
        numbers.update(range(start, end + 1))
    return frozenset(numbers)
