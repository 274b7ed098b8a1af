"""
Writing converted tasks as JSON files for the Reminders import shortcut
"""
import json
import os
from typing import List

from config import FILE_ENCODING, INPUT_EXTENSION, JSON_INDENT, OUTPUT_EXTENSION
from models import ReminderTask
from utils import logger, replace_extension


def serialize_tasks(tasks: List[ReminderTask], indent=JSON_INDENT) -> str:
    """JSON array of task objects, optional fields left out when not set"""
    return json.dumps([task.to_dict() for task in tasks], ensure_ascii=False, indent=indent)


def target_file_name(source_file_name: str) -> str:
    """Inbox.csv -> Inbox.json"""
    return replace_extension(source_file_name, INPUT_EXTENSION, OUTPUT_EXTENSION)


def write_reminders_file(tasks: List[ReminderTask], target_dir: str, source_file_name: str) -> str:
    """
    Write the tasks of one backup next to the others in target_dir

    Args:
        tasks: Converted tasks
        target_dir: Existing output directory
        source_file_name: Name of the CSV the tasks came from

    Returns:
        Path of the written file
    """
    target_path = os.path.join(target_dir, target_file_name(source_file_name))
    content = serialize_tasks(tasks)

    with open(target_path, 'w', encoding=FILE_ENCODING) as f:
        f.write(content)

    logger.info(f"Written target {target_path}")
    return target_path
