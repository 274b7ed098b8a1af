"""
Data transformation modules for converting Todoist rows to Reminders format
"""
from .field_extractors import (
    extract_int,
    extract_text,
    extract_row_kind
)
from .row_parser import (
    build_row,
    parse_rows
)
from .date_parser import (
    parse_date
)
from .mappers import (
    map_priority,
    format_annotation
)
from .data_transformer import transform_task, transform_rows

__all__ = [
    'extract_int',
    'extract_text',
    'extract_row_kind',
    'build_row',
    'parse_rows',
    'parse_date',
    'map_priority',
    'format_annotation',
    'transform_task',
    'transform_rows'
]
