"""
Reading Todoist CSV backups from disk
"""
import csv
import io
import os
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from config import CSV_COLUMNS, INPUT_EXTENSION
from models import RowDecodeError, TodoistRow
from utils import logger, list_files_with_extension
from transformers.row_parser import parse_rows

# utf-8-sig drops the byte order mark some spreadsheet tools add
INPUT_ENCODING = 'utf-8-sig'


def list_backup_files(src_dir: str) -> List[str]:
    """File names of the Todoist backups (*.csv) in src_dir"""
    return list_files_with_extension(src_dir, INPUT_EXTENSION)


def decode_csv(text: str, on_error: Optional[Callable[[RowDecodeError], None]] = None
               ) -> Iterator[Tuple[int, Dict[str, str]]]:
    """
    Decode CSV text with a header line into column -> value records

    Blank lines are skipped. A malformed line, or one with a different number
    of fields than the header, is reported through on_error and skipped; the
    lines after it are still decoded.

    Args:
        text: Whole file content
        on_error: Called with a RowDecodeError for every line that is skipped

    Yields:
        (line number, record) pairs
    """
    reader = csv.reader(io.StringIO(text, newline=''))
    header = None

    while True:
        try:
            values = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            if on_error:
                on_error(RowDecodeError(reader.line_num, str(e)))
            continue

        if not any(value.strip() for value in values):
            continue

        if header is None:
            header = [value.strip() for value in values]
            missing = [column for column in CSV_COLUMNS if column not in header]
            if missing:
                logger.warning(f"⚠ Header has no column(s) {', '.join(missing)}, treating them as empty")
            continue

        if len(values) != len(header):
            if on_error:
                on_error(RowDecodeError(
                    reader.line_num,
                    f"expected {len(header)} fields, found {len(values)}"
                ))
            continue

        yield reader.line_num, dict(zip(header, values))


def read_backup_file(path: str, on_error: Optional[Callable[[RowDecodeError], None]] = None
                     ) -> List[TodoistRow]:
    """
    Read one Todoist backup into rows

    Args:
        path: Path of the CSV file
        on_error: Called for every skipped line, defaults to logging a warning

    Returns:
        Ordered list of section and task rows
    """
    file_name = os.path.basename(path)

    def log_decode_error(error: RowDecodeError):
        logger.warning(f"⚠ Skipping malformed row in {file_name}, {error}")

    with open(path, 'r', encoding=INPUT_ENCODING, newline='') as f:
        text = f.read()

    rows = parse_rows(decode_csv(text, on_error or log_decode_error))
    logger.info(f"✓ Read {len(rows)} rows from {file_name}")
    return rows
