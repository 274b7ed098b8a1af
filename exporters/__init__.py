"""
Export modules for reading Todoist backup data
"""
from .todoist_exporter import list_backup_files, decode_csv, read_backup_file

__all__ = ['list_backup_files', 'decode_csv', 'read_backup_file']
