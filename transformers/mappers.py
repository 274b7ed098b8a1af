"""
Mapping functions for transforming Todoist fields to Reminders fields
"""
from typing import Optional

from config import (
    ANNOTATION_LABELS,
    MANUAL_ADJUSTMENT_PREFIX,
    PRIORITY_FLAGS,
    TAG_INDENTATION,
    TAG_RECURRING_DATE,
    TAG_SECTION,
)
from models import Number


def map_priority(priority: Number) -> Optional[str]:
    """Todoist priority 1-3 -> prio1-prio3; 4, empty or anything else -> no flag"""
    return PRIORITY_FLAGS.get(priority)


def format_annotation(tag: str, detail) -> str:
    """Build a note line such as: NEED MANUAL ADJUSTMENT: SECTION: Groceries"""
    return f"{MANUAL_ADJUSTMENT_PREFIX}{ANNOTATION_LABELS[tag]}: {detail}"


def section_note(section: str) -> str:
    return format_annotation(TAG_SECTION, section)


def recurring_date_note(date_str: str) -> str:
    return format_annotation(TAG_RECURRING_DATE, date_str)


def indentation_note(indent: Number) -> str:
    return format_annotation(TAG_INDENTATION, indent)
