"""Date parsing, formatting and range utilities"""

import re
from datetime import date, timedelta
from typing import Iterator

from tool_rental.domain.exceptions import DateParseError

# MM/DD/YY, also tolerating single-digit month/day and a 4-digit year
_CHECKOUT_DATE_RE = re.compile(r"^\s*([0-9]{1,2})/([0-9]{1,2})/([0-9]{2}|[0-9]{4})\s*$")

DEFAULT_YEAR_PIVOT = 69


def expand_two_digit_year(yy: int, pivot: int = DEFAULT_YEAR_PIVOT) -> int:
    """
    Map a 2-digit year onto a century.

    Years below the pivot land in the 2000s, the rest in the 1900s.
    With the default pivot of 69 this matches time.strptime's %y:
    "15" -> 2015, "68" -> 2068, "69" -> 1969.
    """
    if not 0 <= yy <= 99:
        raise ValueError(f"two-digit year out of range: {yy}")
    return 2000 + yy if yy < pivot else 1900 + yy


def parse_checkout_date(value: str, pivot: int = DEFAULT_YEAR_PIVOT) -> date:
    """
    Parse a checkout date in MM/DD/YY form.

    A 4-digit year (MM/DD/YYYY) is taken literally.

    Raises:
        DateParseError: If the string does not match the format or names
            a day that does not exist (e.g. 02/30/21)
    """
    if not isinstance(value, str):
        raise DateParseError(f"Unparseable checkout date: {value!r}")

    match = _CHECKOUT_DATE_RE.match(value)
    if not match:
        raise DateParseError(f"Unparseable checkout date: {value!r} (expected MM/DD/YY)")

    month, day, year_text = match.groups()
    year = int(year_text)
    if len(year_text) == 2:
        year = expand_two_digit_year(year, pivot)

    try:
        return date(year, int(month), int(day))
    except ValueError as e:
        raise DateParseError(f"Invalid checkout date: {value!r} ({e})") from e


def format_date(value: date, fmt: str = "%m/%d/%y") -> str:
    """Format a date for the printed agreement (MM/DD/YY by default)"""
    return value.strftime(fmt)


def generate_date_range(start: date, days: int) -> Iterator[date]:
    """Yield the `days` consecutive dates starting at (and including) start"""
    for i in range(days):
        yield start + timedelta(days=i)


def add_calendar_days(from_date: date, days: int) -> date:
    """
    Add calendar days to a date, weekends and holidays included.

    Raises:
        OverflowError: If the result falls past date.max
    """
    return from_date + timedelta(days=days)
