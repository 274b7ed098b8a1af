"""
Turn decoded CSV records into typed Todoist rows
"""
from typing import Dict, Iterable, List, Optional, Tuple

from models import TodoistRow
from utils import logger
from transformers.field_extractors import extract_int, extract_row_kind, extract_text


def build_row(record: Dict[str, str]) -> Optional[TodoistRow]:
    """
    Build a TodoistRow field by field from one decoded CSV record

    Args:
        record: Column name -> raw cell text

    Returns:
        The row, or None when TYPE is neither task nor section
    """
    kind = extract_row_kind(record)
    if kind is None:
        return None

    return TodoistRow(
        kind=kind,
        content=extract_text(record, 'CONTENT'),
        description=extract_text(record, 'DESCRIPTION'),
        priority=extract_int(record.get('PRIORITY')),
        indent=extract_int(record.get('INDENT')),
        responsible=extract_text(record, 'RESPONSIBLE'),
        date=extract_text(record, 'DATE'),
        date_lang=extract_text(record, 'DATE_LANG'),
        timezone=extract_text(record, 'TIMEZONE'),
    )


def parse_rows(records: Iterable[Tuple[int, Dict[str, str]]]) -> List[TodoistRow]:
    """
    Parse decoded records into rows, keeping export order

    Args:
        records: (line number, record) pairs as produced by the CSV decoder

    Returns:
        Ordered list of section and task rows
    """
    rows = []
    for line_number, record in records:
        row = build_row(record)
        if row is None:
            logger.debug(f"  Ignoring line {line_number} with TYPE '{extract_text(record, 'TYPE')}'")
            continue
        rows.append(row)
    return rows
