from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Iterable, List, Optional, Tuple, TypeVar

from alphabetize.natural import natural_key
from alphabetize.normalization import normalize
from alphabetize.options import Options

T = TypeVar("T")


class Order(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _code_point_key(key: str) -> str:
    return key


def _comparable(options: Options) -> Callable[[str], Any]:
    if options.uses_natural_order:
        return natural_key
    return _code_point_key


def compare_keys(options: Options, key_a: str, key_b: str) -> Order:
    """Compare two keys produced by :func:`normalize` with the same options.

    Keys that still carry literal digits (any ``NUMERICAL_VALUE`` position)
    are compared in natural order; everything else by code point.
    """
    comparable = _comparable(options)
    left, right = comparable(key_a), comparable(key_b)
    if left < right:
        return Order.LESS
    if left > right:
        return Order.GREATER
    return Order.EQUAL


def compare(options: Options, a: str, b: str) -> Order:
    return compare_keys(options, normalize(options, a), normalize(options, b))


def sort_key(options: Options) -> Callable[[str], Any]:
    """Return a ``key=`` function for :func:`sorted`, :func:`min` and friends."""
    comparable = _comparable(options)

    def _key(text: str) -> Any:
        return comparable(normalize(options, text))

    return _key


def sort_all(
    options: Options,
    items: Iterable[T],
    key: Optional[Callable[[T], str]] = None,
) -> List[T]:
    """Sort ``items`` in human alphabetical order.

    Each item is normalized exactly once; items with equal keys keep their
    input order. ``key`` extracts the text to sort by when the items are not
    strings themselves.
    """
    comparable = _comparable(options)
    decorated: List[Tuple[T, Any]] = []
    for item in items:
        text = key(item) if key is not None else item
        decorated.append((item, comparable(normalize(options, text))))
    decorated.sort(key=lambda pair: pair[1])
    return [item for item, _ in decorated]
