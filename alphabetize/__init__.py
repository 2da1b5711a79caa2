"""Human-style alphabetical ordering for English titles, headings and filenames."""

from alphabetize.natural import natural_compare, natural_key
from alphabetize.normalization import normalize
from alphabetize.options import (
    BOOK_INDEX,
    NATURAL,
    PRESETS,
    NumberSort,
    Options,
    SortMode,
    apply_overrides,
    get_preset,
    options_from_settings,
)
from alphabetize.roman import roman_to_int
from alphabetize.sorting import Order, compare, compare_keys, sort_all, sort_key
from alphabetize.spelling import (
    InvalidDigits,
    TranslationError,
    UnsupportedMagnitude,
    spell,
    spell_year,
)

__all__ = [
    # pipeline
    "normalize",
    # comparison and sorting
    "Order",
    "compare",
    "compare_keys",
    "sort_all",
    "sort_key",
    # options
    "Options",
    "SortMode",
    "NumberSort",
    "BOOK_INDEX",
    "NATURAL",
    "PRESETS",
    "get_preset",
    "options_from_settings",
    "apply_overrides",
    # numbers
    "spell",
    "spell_year",
    "roman_to_int",
    "natural_key",
    "natural_compare",
    # errors
    "TranslationError",
    "InvalidDigits",
    "UnsupportedMagnitude",
]
