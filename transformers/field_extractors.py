"""
Field extraction utilities for Todoist CSV records
"""
import math
import re
from typing import Dict, Optional

from config import ROW_TYPE_SECTION, ROW_TYPE_TASK
from models import Number, RowKind

# Leading integer, same reading as JavaScript parseInt: "3" -> 3, " 2" -> 2, "4x" -> 4
_LEADING_INT_PATTERN = re.compile(r'^\s*([+-]?\d+)')

_ROW_KINDS = {
    ROW_TYPE_TASK: RowKind.TASK,
    ROW_TYPE_SECTION: RowKind.SECTION,
}


def extract_int(value: Optional[str]) -> Number:
    """
    Read an integer column value

    Returns:
        The integer, or float('nan') when the cell does not start with a number.
        NaN compares unequal to everything, so indent/priority checks on it are all False.
    """
    if value is None:
        return math.nan
    match = _LEADING_INT_PATTERN.match(value)
    if not match:
        return math.nan
    return int(match.group(1))


def extract_text(record: Dict[str, str], column: str) -> str:
    """Get a text column, empty string when the column is missing"""
    value = record.get(column)
    return value if value is not None else ''


def extract_row_kind(record: Dict[str, str]) -> Optional[RowKind]:
    """Map the TYPE column to a RowKind, None for anything else (e.g. notes)"""
    return _ROW_KINDS.get(extract_text(record, 'TYPE').strip().lower())
