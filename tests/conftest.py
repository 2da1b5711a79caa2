from __future__ import annotations

import pytest

from alphabetize.options import NumberSort, Options, SortMode


@pytest.fixture
def letter_by_letter() -> Options:
    return Options(sort_mode=SortMode.LETTER_BY_LETTER)


@pytest.fixture
def digits_kept() -> Options:
    """Letter by letter, every digit run left as digits."""
    return Options(
        sort_mode=SortMode.LETTER_BY_LETTER,
        initial_number_sort=NumberSort.NUMERICAL_VALUE,
        internal_number_sort=NumberSort.NUMERICAL_VALUE,
        terminal_number_sort=NumberSort.NUMERICAL_VALUE,
    )
