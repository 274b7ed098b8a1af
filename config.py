"""
Configuration and constants for Todoist to Apple Reminders conversion
"""
import os
import logging
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off')


# File discovery configuration
INPUT_EXTENSION = '.csv'  # Todoist backup files (one per project)
OUTPUT_EXTENSION = '.json'  # Files read by the Apple Shortcuts import shortcut
FILE_ENCODING = 'utf-8'

# Output formatting
# Unset = compact JSON (one line per file), otherwise indent width for pretty printing
_json_indent = os.getenv('TODOIST_JSON_INDENT')
JSON_INDENT = int(_json_indent) if _json_indent and _json_indent.strip().isdigit() else None

# Logging configuration
# Console log level: DEBUG, INFO, WARNING, ERROR, CRITICAL
CONSOLE_LOG_LEVEL = getattr(logging, os.getenv('TODOIST_CONSOLE_LOG_LEVEL', 'INFO').upper(), logging.INFO)
LOG_DIR = os.getenv('TODOIST_LOG_DIR', 'logs')
LOG_TO_FILE = _env_flag('TODOIST_LOG_TO_FILE', True)

# Columns of a Todoist CSV backup
CSV_COLUMNS = [
    'TYPE',
    'CONTENT',
    'DESCRIPTION',
    'PRIORITY',
    'INDENT',
    'RESPONSIBLE',
    'DATE',
    'DATE_LANG',
    'TIMEZONE',
]

ROW_TYPE_TASK = 'task'
ROW_TYPE_SECTION = 'section'

# Month vocabularies used to read the free-text DATE column, keyed by DATE_LANG
MONTH_NAMES = {
    'de': ['Januar', 'Februar', 'März', 'April', 'Mai', 'Juni',
           'Juli', 'August', 'September', 'Oktober', 'November', 'Dezember'],
    'en': ['January', 'February', 'March', 'April', 'May', 'June',
           'July', 'August', 'September', 'October', 'November', 'December'],
}

# Abbreviated month forms are the first N characters of the full name, tried in this order
MONTH_PREFIX_LENGTHS = (4, 3)

# Todoist priority (1 = highest, 4 = default) to Reminders priority flag
PRIORITY_FLAGS = {
    1: 'prio1',
    2: 'prio2',
    3: 'prio3',
}

# Apple Reminders only supports one level of subtasks
MAX_INDENT = 2

# Manual adjustment annotations
MANUAL_ADJUSTMENT_PREFIX = 'NEED MANUAL ADJUSTMENT: '
TAG_SECTION = 'export_SECTION'
TAG_RECURRING_DATE = 'export_RECURRING_DATE'
TAG_INDENTATION = 'export_INDENTATION'

# Annotation label per tag, used as "NEED MANUAL ADJUSTMENT: <LABEL>: <detail>"
ANNOTATION_LABELS = {
    TAG_SECTION: 'SECTION',
    TAG_RECURRING_DATE: 'RECURRING_DATE',
    TAG_INDENTATION: 'INDENTATION',
}
