"""
Utility functions for logging and file discovery
"""
import sys
import os
import logging
from datetime import datetime
from typing import List

from config import CONSOLE_LOG_LEVEL, LOG_DIR, LOG_TO_FILE

# Configure Windows console for UTF-8 encoding to handle special characters
if sys.platform == 'win32':
    if hasattr(sys.stdout, 'reconfigure'):
        sys.stdout.reconfigure(encoding='utf-8')
    if hasattr(sys.stderr, 'reconfigure'):
        sys.stderr.reconfigure(encoding='utf-8')

handlers = []

# Create formatter
formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

if LOG_TO_FILE:
    # Create logs directory if it doesn't exist
    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    # Configure logging with UTF-8 encoding to handle umlauts in task titles
    log_filename = os.path.join(LOG_DIR, f'conversion_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log')

    # Create file handler with DEBUG level
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    handlers.append(file_handler)

# Create console handler with level from config
console_handler = logging.StreamHandler()
console_handler.setLevel(CONSOLE_LOG_LEVEL)
console_handler.setFormatter(formatter)
handlers.append(console_handler)

# Configure root logger with DEBUG level (so file handler captures all levels)
logging.basicConfig(
    level=logging.DEBUG,
    handlers=handlers
)
logger = logging.getLogger(__name__)


def list_files_with_extension(directory: str, extension: str) -> List[str]:
    """
    List file names in a directory that end with the given extension

    Args:
        directory: Directory to scan (not recursive)
        extension: Extension including the dot, e.g. ".csv" (case-sensitive)

    Returns:
        Sorted list of matching file names (names only, not paths)
    """
    return sorted(
        name for name in os.listdir(directory)
        if name.endswith(extension) and os.path.isfile(os.path.join(directory, name))
    )


def replace_extension(file_name: str, old_extension: str, new_extension: str) -> str:
    """Swap a trailing extension, e.g. Inbox.csv -> Inbox.json"""
    if file_name.endswith(old_extension):
        return file_name[:-len(old_extension)] + new_extension
    return file_name + new_extension
