from __future__ import annotations

import re
from typing import Dict, Optional

_ROMAN_VALUE_MAP: Dict[str, int] = {
    "M": 1000,
    "D": 500,
    "C": 100,
    "L": 50,
    "X": 10,
    "V": 5,
    "I": 1,
}

# Well-formed numerals only: thousands, then hundreds, tens and ones groups.
ROMAN_PATTERN = (
    r"(?=[mdclxvi])"
    r"m*"
    r"(?:cm|cd|d?c{0,3})"
    r"(?:xc|xl|l?x{0,3})"
    r"(?:ix|iv|v?i{0,3})"
)

_ROMAN_TOKEN_RE = re.compile(ROMAN_PATTERN, re.IGNORECASE)


def is_roman_numeral(token: str) -> bool:
    return bool(token) and _ROMAN_TOKEN_RE.fullmatch(token) is not None


def roman_to_int(token: str) -> Optional[int]:
    """Decode a roman numeral, or return ``None`` if it is not well formed.

    Letters are read right to left; a letter worth less than the one read
    just before it is subtracted, everything else is added.
    """
    if not is_roman_numeral(token):
        return None
    total = 0
    prev = 0
    for char in reversed(token.upper()):
        value = _ROMAN_VALUE_MAP[char]
        if value < prev:
            total -= value
        else:
            total += value
        prev = value
    return total
