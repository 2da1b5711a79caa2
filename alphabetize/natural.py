"""Natural ("img2 before img10") ordering of strings."""

from __future__ import annotations

import re
from typing import List, Tuple, Union

_DIGIT_SPLIT_RE = re.compile(r"([0-9]+)")

NaturalPart = Union[str, Tuple[int, str, int]]


def natural_key(text: str) -> List[NaturalPart]:
    """Generate a key that orders digit runs by value.

    The parts alternate between non-digit text (compared by code point) and
    digit runs. A digit run becomes ``(significant length, significant digits,
    length)``: ordering by value without converting to ``int``, then ``"7"``
    before ``"007"`` when the values tie.

    Example:
        >>> sorted(["img10", "img2", "img1"], key=natural_key)
        ['img1', 'img2', 'img10']
    """
    parts: List[NaturalPart] = []
    for index, fragment in enumerate(_DIGIT_SPLIT_RE.split(text)):
        # re.split with a capture group puts the digit runs at odd indexes
        if index % 2:
            stripped = fragment.lstrip("0")
            parts.append((len(stripped), stripped, len(fragment)))
        else:
            parts.append(fragment)
    return parts


def natural_compare(a: str, b: str) -> int:
    """Return -1, 0 or 1 as ``a`` sorts before, with, or after ``b``."""
    key_a, key_b = natural_key(a), natural_key(b)
    return (key_a > key_b) - (key_a < key_b)
