"""
Parsing of Todoist's free-text DATE column

Todoist exports dates the way they were typed or displayed, e.g. "15 June 2024",
"Jun 15", "3 Mai" or "every monday". Only single calendar dates are converted;
everything else is reported as a failure and handled as a recurring date.
"""
import re
from datetime import date, datetime
from typing import List, Optional

from config import MONTH_NAMES, MONTH_PREFIX_LENGTHS
from models import DateParseResult, UnsupportedDateLanguageError

_YEAR_PATTERN = re.compile(r'^[0-9]{4}$')
_DAY_PATTERN = re.compile(r'^[0-9]{1,2}$')


def get_month_names(date_lang: str) -> List[str]:
    """Month vocabulary for a DATE_LANG code, raises for unknown codes"""
    if date_lang not in MONTH_NAMES:
        raise UnsupportedDateLanguageError(date_lang)
    return MONTH_NAMES[date_lang]


def find_month(token: str, month_names: List[str]) -> int:
    """
    Look up a month token: full name first, then 4- and 3-letter prefixes

    Returns:
        0-based month index, or -1 if the token is not a month
    """
    if token.endswith('.'):
        token = token[:-1]

    if token in month_names:
        return month_names.index(token)

    for length in MONTH_PREFIX_LENGTHS:
        prefixes = [name[:length] for name in month_names]
        if token in prefixes:
            return prefixes.index(token)

    return -1


def parse_date(date_str: str, date_lang: str, today: Optional[date] = None) -> DateParseResult:
    """
    Parse an absolute date like "15 June 2024" or "Mai 3"

    Args:
        date_str: Content of the DATE column
        date_lang: Content of the DATE_LANG column ("de" or "en")
        today: Reference day supplying the year when none is given (defaults to now)

    Returns:
        DateParseResult with a timezone-aware local midnight on success

    Raises:
        UnsupportedDateLanguageError: date_lang has no month vocabulary
    """
    month_names = get_month_names(date_lang)

    day = 0
    month = -1
    year = 0

    # the token order differs between languages, so classify each token on its own
    for token in date_str.split():
        month_index = find_month(token, month_names)
        if month_index >= 0:
            month = month_index
            continue

        if _YEAR_PATTERN.match(token):
            year = int(token)
            continue

        if _DAY_PATTERN.match(token):
            day = int(token)
            continue

        return DateParseResult.failure(f"Invalid date part: {token}")

    # day 0 counts as missing
    if not day or month < 0:
        return DateParseResult.failure(
            f"Could not parse date string: {date_str} day: {day} month: {month} year: {year}"
        )

    if not year:
        year = (today or datetime.now()).year

    # astimezone() also fails for days at the very edge of the datetime range (year 1)
    try:
        parsed = datetime(year, month + 1, day).astimezone()
    except (ValueError, OverflowError) as e:
        return DateParseResult.failure(f"Invalid calendar date: {date_str} ({e})")

    return DateParseResult.success(parsed)
