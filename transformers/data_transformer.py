"""
Main data transformation logic for converting Todoist rows to Reminders tasks

Output fields match what the Apple Shortcuts import shortcut reads:
- title, description, date (ISO 8601), prio1/prio2/prio3, parent (title of the
  parent task), tags

Reminders has no sections, no recurring-date import and only one level of
subtasks. Tasks losing one of those get a tag plus a
"NEED MANUAL ADJUSTMENT: ..." line in their description so they can be fixed
by hand after the import.
"""
from datetime import date
from typing import List, Optional

from config import MAX_INDENT, TAG_INDENTATION, TAG_RECURRING_DATE, TAG_SECTION
from models import ReminderTask, RowKind, TodoistRow
from utils import logger
from transformers.date_parser import parse_date
from transformers.mappers import indentation_note, map_priority, recurring_date_note, section_note


def transform_task(row: TodoistRow, current_section: Optional[str], last_root_title: str,
                   today: Optional[date] = None) -> ReminderTask:
    """
    Convert a single task row

    Args:
        row: Task row
        current_section: Name of the section the row is in, None before the first section
        last_root_title: Title of the most recent indent-1 task
        today: Reference day for dates without a year

    Returns:
        The converted task

    Raises:
        UnsupportedDateLanguageError: the row has a date in an unknown DATE_LANG
    """
    task = ReminderTask(title=row.content, description=row.description)

    task.priority_flag = map_priority(row.priority)

    # Each note is prepended: with all three, the description starts with
    # INDENTATION, then RECURRING_DATE, then SECTION, then the task's own description.
    if current_section is not None and row.indent == 1:
        task.add_annotation(TAG_SECTION, section_note(current_section))

    if row.date != '':
        result = parse_date(row.date, row.date_lang, today)
        if result.ok:
            task.date = result.value.isoformat()
        else:
            logger.debug(f"    Date '{row.date}' treated as recurring: {result.reason}")
            task.add_annotation(TAG_RECURRING_DATE, recurring_date_note(row.date))

    if row.indent >= 2:
        task.parent = last_root_title
    if row.indent > MAX_INDENT:
        task.add_annotation(TAG_INDENTATION, indentation_note(row.indent))

    return task


def transform_rows(rows: List[TodoistRow], today: Optional[date] = None) -> List[ReminderTask]:
    """
    Transform the rows of one Todoist backup into Reminders tasks

    Sections produce no task; they only set the section for the rows after them.
    An indent-1 task becomes the parent of all following tasks with indent >= 2.

    Args:
        rows: Rows in export order
        today: Reference day for dates without a year

    Returns:
        One task per task row, in export order
    """
    current_section = None
    last_root_title = ''
    tasks = []

    for row in rows:
        if row.kind is RowKind.SECTION:
            current_section = row.content
            logger.debug(f"  Section: {current_section}")
            continue

        task = transform_task(row, current_section, last_root_title, today)
        if row.indent == 1:
            last_root_title = task.title
        tasks.append(task)

    logger.info(f"✓ Transformed {len(tasks)} tasks from {len(rows)} rows")
    return tasks
