"""
Main entry point for Todoist to Apple Reminders conversion script

Reads Todoist CSV backups (one per project, Todoist Premium only) and writes
one JSON file per backup that the Apple Shortcuts import shortcut turns into
Reminders.
"""
import sys
import os
import argparse
from datetime import date
from typing import Dict, List, Optional

from models import ConversionSummary
from exporters import list_backup_files, read_backup_file
from transformers import transform_rows
from importers import write_reminders_file
from utils import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Convert Todoist CSV backups to JSON files for the Apple Reminders import shortcut',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py ~/Downloads/todoist_backup ./reminders_json

Every *.csv file in SRC_DIR is converted to a *.json file with the same name in TARGET_DIR.
Tasks tagged export_SECTION, export_RECURRING_DATE or export_INDENTATION need manual adjustment
after the import; the reason is noted at the top of their description.
        """
    )
    parser.add_argument(
        'src_dir',
        metavar='SRC_DIR',
        help='Directory with your Todoist CSV exports'
    )
    parser.add_argument(
        'target_dir',
        metavar='TARGET_DIR',
        help='Directory where the JSON files should be placed'
    )
    return parser


def convert_file(src_dir: str, target_dir: str, file_name: str, summary: ConversionSummary,
                 today: Optional[date] = None) -> Dict:
    """
    Convert a single Todoist backup

    Args:
        src_dir: Directory containing the backup
        target_dir: Directory receiving the JSON file
        file_name: Name of the CSV file in src_dir
        summary: Conversion summary tracker
        today: Reference day for dates without a year

    Returns:
        dict: Conversion result with 'success' (bool), 'file' and 'target' or 'error'
    """
    logger.info(f"\n{'#'*60}")
    logger.info(f"CONVERTING: {file_name}")
    logger.info(f"{'#'*60}")

    def count_skipped_row(error):
        logger.warning(f"⚠ Skipping malformed row in {file_name}, {error}")
        summary.add_skipped_row()

    try:
        rows = read_backup_file(os.path.join(src_dir, file_name), on_error=count_skipped_row)
        tasks = transform_rows(rows, today)
        target_path = write_reminders_file(tasks, target_dir, file_name)
    except Exception as e:
        logger.error(f"✗ Error converting {file_name}: {e}")
        summary.add_failure(f"{file_name}: {e}")
        return {'success': False, 'file': file_name, 'error': str(e)}

    summary.add_success(len(tasks))
    summary.count_tags(tasks)
    return {'success': True, 'file': file_name, 'target': target_path}


def convert_all(src_dir: str, target_dir: str, file_names: List[str], summary: ConversionSummary,
                today: Optional[date] = None) -> List[Dict]:
    """Convert every backup; a failing file does not stop the others"""
    all_results = []
    for idx, file_name in enumerate(file_names, 1):
        logger.info(f"File {idx}/{len(file_names)}")
        all_results.append(convert_file(src_dir, target_dir, file_name, summary, today))
    return all_results


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main execution function

    Returns:
        Process exit code: 0 when every file was converted, 1 when any file failed.
        Usage errors exit with status 2 through argparse.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not os.path.isdir(args.src_dir):
        parser.error('SRC_DIR does not exist')
    if not os.path.isdir(args.target_dir):
        parser.error('TARGET_DIR does not exist')

    file_names = list_backup_files(args.src_dir)
    if not file_names:
        parser.error('No CSV files found')

    logger.info("\n" + "="*60)
    logger.info("TODOIST TO REMINDERS CONVERSION")
    logger.info("="*60)
    logger.info(f"Source: {args.src_dir}")
    logger.info(f"Target: {args.target_dir}")
    logger.info(f"Found {len(file_names)} CSV file(s)")

    summary = ConversionSummary()
    all_results = convert_all(args.src_dir, args.target_dir, file_names, summary)

    summary.print_summary()

    if summary.failed:
        for result in all_results:
            if not result['success']:
                logger.error(f"✗ Not converted: {result['file']} ({result['error']})")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
