"""
Data models for rows, converted tasks and conversion tracking
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional, Union

from utils import logger

# Integer column value, or float('nan') when the cell is not a number
Number = Union[int, float]


class ConversionError(Exception):
    """Base class for errors raised while converting a Todoist backup"""


class UnsupportedDateLanguageError(ConversionError):
    """DATE_LANG names a language without a month vocabulary"""

    def __init__(self, date_lang: str):
        self.date_lang = date_lang
        super().__init__(f'Date language "{date_lang}" not supported!')


class RowDecodeError(ConversionError):
    """A CSV line could not be turned into a row"""

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        super().__init__(f'line {line_number}: {message}')


class RowKind(Enum):
    SECTION = 'section'
    TASK = 'task'


@dataclass(frozen=True)
class TodoistRow:
    """One line of a Todoist CSV backup"""
    kind: RowKind
    content: str
    description: str = ''
    priority: Number = 4
    indent: Number = 1
    responsible: str = ''
    date: str = ''
    date_lang: str = ''
    timezone: str = ''


@dataclass(frozen=True)
class DateParseResult:
    """Outcome of reading a free-text date: a value, or the reason it was not readable"""
    value: Optional[datetime] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    @classmethod
    def success(cls, value: datetime) -> 'DateParseResult':
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> 'DateParseResult':
        return cls(reason=reason)


@dataclass
class ReminderTask:
    """A task in the format read by the Reminders import shortcut"""
    title: str
    description: str = ''
    date: Optional[str] = None
    priority_flag: Optional[str] = None
    parent: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def add_annotation(self, tag: str, note: str):
        """Tag the task and put a note line in front of its description"""
        self.tags.append(tag)
        self.description = note + '\n' + self.description

    def to_dict(self) -> Dict:
        """Serializable form; absent optional fields are left out entirely"""
        data = {'title': self.title}
        if self.description:
            data['description'] = self.description
        if self.date:
            data['date'] = self.date
        if self.priority_flag:
            data[self.priority_flag] = True
        if self.parent is not None:
            data['parent'] = self.parent
        if self.tags:
            data['tags'] = list(self.tags)
        return data


@dataclass
class ConversionSummary:
    """Track conversion statistics"""
    total_files: int = 0
    succeeded: int = 0
    failed: int = 0
    tasks_written: int = 0
    rows_skipped: int = 0
    annotations: Dict[str, int] = None
    errors: List[str] = None

    def __post_init__(self):
        if self.annotations is None:
            self.annotations = {}
        if self.errors is None:
            self.errors = []

    def add_success(self, task_count: int):
        self.total_files += 1
        self.succeeded += 1
        self.tasks_written += task_count

    def add_failure(self, error_msg: str):
        self.total_files += 1
        self.failed += 1
        self.errors.append(error_msg)

    def add_skipped_row(self):
        self.rows_skipped += 1

    def count_tags(self, tasks: List[ReminderTask]):
        for task in tasks:
            for tag in task.tags:
                self.annotations[tag] = self.annotations.get(tag, 0) + 1

    def print_summary(self):
        """Print conversion summary report"""
        logger.info("\n" + "="*60)
        logger.info("CONVERSION SUMMARY")
        logger.info("="*60)
        logger.info(f"Total Files Attempted: {self.total_files}")
        logger.info(f"Succeeded: {self.succeeded}")
        logger.info(f"Failed: {self.failed}")
        logger.info(f"Tasks Written: {self.tasks_written}")
        if self.rows_skipped:
            logger.info(f"Rows Skipped (decode errors): {self.rows_skipped}")
        if self.annotations:
            logger.info("\nTasks needing manual adjustment:")
            for tag, count in sorted(self.annotations.items()):
                logger.info(f"  {tag}: {count}")
        if self.errors:
            logger.info(f"\nErrors ({len(self.errors)}):")
            for i, error in enumerate(self.errors, 1):
                logger.info(f"  {i}. {error}")
        logger.info("="*60 + "\n")
