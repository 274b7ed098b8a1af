"""
Import modules for writing Reminders import files
"""
from .reminders_importer import serialize_tasks, target_file_name, write_reminders_file

__all__ = ['serialize_tasks', 'target_file_name', 'write_reminders_file']
