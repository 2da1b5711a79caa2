from __future__ import annotations

import re
from typing import Dict, List

from num2words import num2words

_DIGITS_RE = re.compile(r"[0-9]+")
_WORD_SPLIT_RE = re.compile(r"[\s,\-]+")

# Keyed by the number of digits that follow the leading group.
_MAGNITUDE_WORDS: Dict[int, str] = {
    3: "thousand",
    6: "million",
    9: "billion",
    12: "trillion",
}


class TranslationError(ValueError):
    """Raised when a digit string cannot be turned into words."""

    def __init__(self, message: str, digits: str) -> None:
        super().__init__(message)
        self.digits = digits


class InvalidDigits(TranslationError):
    """Raised when the input is not a non-empty run of ASCII digits."""

    def __init__(self, digits: str) -> None:
        super().__init__(f"Not a digit run: {digits!r}", digits)


class UnsupportedMagnitude(TranslationError):
    """Raised when a number needs a magnitude word above trillion."""

    def __init__(self, digits: str) -> None:
        super().__init__(f"No magnitude word for {len(digits)} digits: {digits!r}", digits)


def _is_all_zero(digits: str) -> bool:
    return digits.strip("0") == ""


def _group_to_words(value: int) -> List[str]:
    """Spell 1..999 as bare words: no hyphens, commas or "and"."""
    words = num2words(value, lang="en")
    return [word for word in _WORD_SPLIT_RE.split(words) if word and word != "and"]


def _spell_parts(digits: str) -> List[str]:
    if _is_all_zero(digits):
        return []
    if len(digits) <= 3:
        return _group_to_words(int(digits))

    lead_length = len(digits) % 3 or 3
    lead, rest = digits[:lead_length], digits[lead_length:]
    parts: List[str] = []
    if not _is_all_zero(lead):
        magnitude = _MAGNITUDE_WORDS.get(len(rest))
        if magnitude is None:
            raise UnsupportedMagnitude(digits)
        parts.extend(_spell_parts(lead))
        parts.append(magnitude)
    parts.extend(_spell_parts(rest))
    return parts


def spell(digits: str) -> str:
    """Spell an unsigned decimal digit string as lowercase English words.

    Words are joined by single spaces. A run made only of zeros (``"0"``,
    ``"000"``) spells to the empty string, so it contributes nothing to a
    sort key. Leading zeros never change the result.

    Raises :class:`InvalidDigits` for anything but ASCII digits and
    :class:`UnsupportedMagnitude` past the trillions.
    """
    if not isinstance(digits, str) or not _DIGITS_RE.fullmatch(digits):
        raise InvalidDigits(str(digits))
    return " ".join(_spell_parts(digits.lstrip("0") or "0"))


def spell_year(token: str) -> str:
    """Read a four digit token the way a year is spoken aloud.

    ``1984`` -> "nineteen eighty four", ``1900`` -> "nineteen hundred".
    Tokens shaped like ``x00y`` (``1000``, ``2009``) are not read as years
    and fall back to the ordinary cardinal.
    """
    if not isinstance(token, str) or len(token) != 4 or not _DIGITS_RE.fullmatch(token):
        raise InvalidDigits(str(token))

    if token[1] == "0" and token[2] == "0":
        return spell(token)

    century, tail = token[:2], token[2:]
    if tail == "00":
        return " ".join(part for part in (spell(century), "hundred") if part)
    return " ".join(part for part in (spell(century), spell(tail)) if part)
