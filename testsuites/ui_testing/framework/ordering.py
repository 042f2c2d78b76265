"""
================================================================================
Ordering & Keyword Verification
================================================================================

Pure helpers behind the table checks of BasePage:
    - Converting element text to comparable values (text, price, date)
    - Checking a sequence is sorted ascending / descending
    - Checking every search result equals / contains a keyword

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Sequence

from .errors import ConversionError

# "Jan 05 2021"; periods are stripped first so "Jan. 05 2021" parses too
DATE_FORMAT = "%b %d %Y"
# "January 05 2021"
LONG_DATE_FORMAT = "%B %d %Y"
CURRENCY_CHARS = ("$", ",")


def to_text(raw: str) -> str:
    return raw


def to_float(raw: str) -> float:
    """
    Parse a displayed amount such as "$1,000.50".

    Raises:
        ConversionError: Text is not a number once currency symbols and
            thousands separators are removed
    """
    cleaned = raw
    for char in CURRENCY_CHARS:
        cleaned = cleaned.replace(char, "")
    try:
        return float(cleaned.strip())
    except ValueError as e:
        raise ConversionError(f"Cannot convert {raw!r} to a number") from e


def to_date(raw: str) -> datetime:
    """
    Parse a displayed date such as "Jan. 05 2021" or "January 05 2021".

    Raises:
        ConversionError: Text matches neither "MMM dd yyyy" nor "MMMM dd yyyy"
    """
    cleaned = raw.replace(".", "").strip()
    for date_format in (DATE_FORMAT, LONG_DATE_FORMAT):
        try:
            return datetime.strptime(cleaned, date_format)
        except ValueError:
            continue
    raise ConversionError(f"Cannot convert {raw!r} to a date")


class SortKind(str, Enum):
    """How element text is compared when checking sort order."""
    STRING = "string"
    FLOAT = "float"
    DATE = "date"

    @property
    def converter(self) -> Callable[[str], Any]:
        return _CONVERTERS[self]


_CONVERTERS = {
    SortKind.STRING: to_text,
    SortKind.FLOAT: to_float,
    SortKind.DATE: to_date,
}


def convert_all(texts: Iterable[str], kind: SortKind = SortKind.STRING) -> List[Any]:
    """Convert every text with the converter of `kind`."""
    return [kind.converter(text) for text in texts]


def is_sorted(
    values: Sequence[Any],
    descending: bool = False,
    key: Optional[Callable[[Any], Any]] = None,
) -> bool:
    """
    Check a sequence against a freshly sorted copy of itself.

    Duplicates are allowed; an empty sequence is sorted.

    Args:
        values: Comparable values in displayed order
        descending: Expect largest first
        key: Sort key deciding the order (e.g. `str.lower`); the values
            themselves when omitted

    Returns:
        True if the sorted copy equals the original element for element
    """
    expected = sorted(values, key=key)
    if descending:
        expected.reverse()
    return expected == list(values)


def all_equal(texts: Iterable[str], keyword: str) -> bool:
    """Every text (trimmed) equals the keyword. Vacuously true for no texts."""
    return all(text.strip() == keyword for text in texts)


def all_contain(texts: Iterable[str], keyword: str) -> bool:
    """Every text (trimmed) contains the keyword. Vacuously true for no texts."""
    return all(keyword in text.strip() for text in texts)


def all_in(texts: Iterable[str], expected: Iterable[str]) -> bool:
    """Every text equals one of the expected values."""
    allowed = set(expected)
    return all(text in allowed for text in texts)


__all__ = [
    "DATE_FORMAT",
    "LONG_DATE_FORMAT",
    "SortKind",
    "to_text",
    "to_float",
    "to_date",
    "convert_all",
    "is_sorted",
    "all_equal",
    "all_contain",
    "all_in",
]
