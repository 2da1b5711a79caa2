"""Sort-key normalization.

``normalize`` turns a title, heading or filename into the string that is
actually compared. The stages run in a fixed order, each one feeding the
next:

1. lowercase, turn parentheses into spaces, drop everything that is not a
   letter, a digit or a space
2. drop a leading "the " / "a " (``ignore_initial_article``)
3. spell bare four digit runs as spoken years (``years``)
4. replace roman numeral tokens by their decimal value (``roman_numerals``)
5. rewrite each digit run according to where it sits in the string
6. remove spaces (letter by letter) or turn them into ``A`` (word by word)

Keys are only meaningful when both sides were built with the same options.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import Callable, Dict

from alphabetize.options import NumberSort, Options, SortMode
from alphabetize.roman import ROMAN_PATTERN, roman_to_int
from alphabetize.spelling import TranslationError, spell, spell_year

logger = logging.getLogger(__name__)


class NumberPosition(Enum):
    INITIAL = "initial"
    INTERNAL = "internal"
    TERMINAL = "terminal"


_PARENTHESES_RE = re.compile(r"[()]")
# ASCII letters and digits, space, and the Latin-1 letters (no × or ÷).
_DISALLOWED_CHARS_RE = re.compile("[^a-z0-9 À-ÖØ-öø-ÿ]")
_INITIAL_ARTICLES = ("the ", "a ")
_YEAR_RE = re.compile(r"(?<![0-9])[0-9]{4}(?![0-9])")
_ROMAN_RE = re.compile(rf"(?<!\S){ROMAN_PATTERN}(?!\S)", re.IGNORECASE)
_DIGIT_RUN_RE = re.compile(r"[0-9]+")

# Word separator for word-by-word keys; sorts below every lowercase letter.
WORD_SEPARATOR = "A"

_INDEX_LETTERS: Dict[str, str] = {str(digit): chr(ord("A") + digit - 1) for digit in range(1, 10)}


def _fold_case_and_charset(text: str) -> str:
    text = _PARENTHESES_RE.sub(" ", text.lower())
    return _DISALLOWED_CHARS_RE.sub("", text)


def _strip_initial_article(text: str) -> str:
    for article in _INITIAL_ARTICLES:
        if text.startswith(article):
            return text[len(article):]
    return text


def _translate_run(run: str, translate: Callable[[str], str]) -> str:
    try:
        return translate(run)
    except TranslationError as exc:
        logger.debug("Keeping digit run %r as digits: %s", run, exc)
        return run


def _substitute_years(text: str) -> str:
    return _YEAR_RE.sub(lambda match: _translate_run(match.group(0), spell_year), text)


def _substitute_roman_numerals(text: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        value = roman_to_int(match.group(0))
        return match.group(0) if value is None else str(value)

    return _ROMAN_RE.sub(_replace, text)


def number_position(start: int, end: int, length: int) -> NumberPosition:
    """Classify a digit run spanning ``text[start:end]`` of a ``length`` string."""
    if start == 0:
        return NumberPosition.INITIAL
    if end == length:
        return NumberPosition.TERMINAL
    return NumberPosition.INTERNAL


def _index_prefix(run: str) -> str:
    return _INDEX_LETTERS.get(run[0], "") + run


def _apply_number_sort(run: str, number_sort: NumberSort) -> str:
    if number_sort is NumberSort.NUMBER_NAME:
        return _translate_run(run, spell)
    if number_sort is NumberSort.NUMERICAL_INDEX:
        return _index_prefix(run)
    return run


def _transform_numbers(options: Options, text: str) -> str:
    rules = {
        NumberPosition.INITIAL: options.initial_number_sort,
        NumberPosition.INTERNAL: options.internal_number_sort,
        NumberPosition.TERMINAL: options.terminal_number_sort,
    }
    length = len(text)

    def _replace(match: re.Match[str]) -> str:
        position = number_position(match.start(), match.end(), length)
        return _apply_number_sort(match.group(0), rules[position])

    return _DIGIT_RUN_RE.sub(_replace, text)


def _fold_sort_mode(options: Options, text: str) -> str:
    if options.sort_mode is SortMode.LETTER_BY_LETTER:
        return text.replace(" ", "")
    return text.replace(" ", WORD_SEPARATOR)


def normalize(options: Options, text: str) -> str:
    """Return the canonical sort key of ``text`` under ``options``."""
    key = _fold_case_and_charset(text)
    if options.ignore_initial_article:
        key = _strip_initial_article(key)
    if options.years:
        key = _substitute_years(key)
    if options.roman_numerals:
        key = _substitute_roman_numerals(key)
    key = _transform_numbers(options, key)
    return _fold_sort_mode(options, key)
