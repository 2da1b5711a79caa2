from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

logger = logging.getLogger(__name__)


class SortMode(str, Enum):
    LETTER_BY_LETTER = "letter_by_letter"
    WORD_BY_WORD = "word_by_word"


class NumberSort(str, Enum):
    NUMBER_NAME = "number_name"          # spell the digits out
    NUMERICAL_VALUE = "numerical_value"  # keep the digits, compare by magnitude
    NUMERICAL_INDEX = "numerical_index"  # bucket letter from the leading digit


@dataclass(frozen=True)
class Options:
    sort_mode: SortMode = SortMode.WORD_BY_WORD
    initial_number_sort: NumberSort = NumberSort.NUMBER_NAME
    internal_number_sort: NumberSort = NumberSort.NUMBER_NAME
    terminal_number_sort: NumberSort = NumberSort.NUMBER_NAME
    years: bool = False
    roman_numerals: bool = False
    ignore_initial_article: bool = False

    @property
    def uses_natural_order(self) -> bool:
        """Whether keys keep literal digits that must be compared by value."""
        return NumberSort.NUMERICAL_VALUE in (
            self.initial_number_sort,
            self.internal_number_sort,
            self.terminal_number_sort,
        )


BOOK_INDEX = Options(
    sort_mode=SortMode.WORD_BY_WORD,
    initial_number_sort=NumberSort.NUMERICAL_INDEX,
    internal_number_sort=NumberSort.NUMBER_NAME,
    terminal_number_sort=NumberSort.NUMERICAL_VALUE,
    years=False,
    roman_numerals=True,
    ignore_initial_article=True,
)

NATURAL = Options(
    sort_mode=SortMode.LETTER_BY_LETTER,
    initial_number_sort=NumberSort.NUMERICAL_VALUE,
    internal_number_sort=NumberSort.NUMERICAL_VALUE,
    terminal_number_sort=NumberSort.NUMERICAL_VALUE,
    years=False,
    roman_numerals=False,
    ignore_initial_article=False,
)

PRESETS: Dict[str, Options] = {
    "book_index": BOOK_INDEX,
    "natural": NATURAL,
}


def get_preset(name: str) -> Options:
    key = _canonical_name(name)
    if key not in PRESETS:
        available = ", ".join(PRESETS)
        raise ValueError(f"Unknown preset: {name!r} (available: {available})")
    return PRESETS[key]


# ---------- Settings mappings ----------

_SETTINGS_DEFAULTS: Dict[str, Any] = {
    "sort_mode": SortMode.WORD_BY_WORD,
    "initial_number_sort": NumberSort.NUMBER_NAME,
    "internal_number_sort": NumberSort.NUMBER_NAME,
    "terminal_number_sort": NumberSort.NUMBER_NAME,
    "years": False,
    "roman_numerals": False,
    "ignore_initial_article": False,
}

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")
_SEPARATOR_RE = re.compile(r"[\s\-]+")

_E = TypeVar("_E", bound=Enum)


def _canonical_name(value: str) -> str:
    text = _CAMEL_BOUNDARY_RE.sub("_", str(value).strip())
    return _SEPARATOR_RE.sub("_", text).lower()


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off"}:
            return False
    return None


def _parse_enum(value: Any, enum_type: Type[_E]) -> Optional[_E]:
    if isinstance(value, enum_type):
        return value
    if isinstance(value, str):
        key = _canonical_name(value)
        for member in enum_type:
            if key in (member.value, member.name.lower()):
                return member
    return None


def _coerce_setting(key: str, value: Any, current: Any) -> Any:
    default = _SETTINGS_DEFAULTS[key]
    if isinstance(default, bool):
        parsed = _parse_bool(value)
    else:
        parsed = _parse_enum(value, type(default))
    if parsed is None:
        logger.warning("Ignoring unrecognised value %r for setting '%s'; keeping %r", value, key, current)
        return current
    return parsed


def options_from_settings(
    settings: Mapping[str, Any],
    *,
    base: Optional[Options] = None,
) -> Options:
    """Build an :class:`Options` value from a plain settings mapping.

    A ``preset`` entry selects the starting point (otherwise ``base`` or the
    defaults). Unknown keys are ignored and unparseable values keep the
    starting value.
    """
    start = base or Options()
    preset_name = settings.get("preset")
    if preset_name:
        try:
            start = get_preset(str(preset_name))
        except ValueError as exc:
            logger.warning("%s; using %s", exc, "the given base" if base else "defaults")
    return apply_overrides(start, settings)


def apply_overrides(base: Options, overrides: Mapping[str, Any]) -> Options:
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in _SETTINGS_DEFAULTS:
            continue
        changes[key] = _coerce_setting(key, value, getattr(base, key))
    if not changes:
        return base
    return replace(base, **changes)
