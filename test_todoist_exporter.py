#!/usr/bin/env python3
"""
Unit tests for reading Todoist CSV backups.

Run with: python -m pytest test_todoist_exporter.py -v
"""
import math
import os
import tempfile
import unittest

os.environ.setdefault('TODOIST_LOG_TO_FILE', 'false')

from models import RowKind
from exporters import decode_csv, list_backup_files, read_backup_file

HEADER = 'TYPE,CONTENT,DESCRIPTION,PRIORITY,INDENT,AUTHOR,RESPONSIBLE,DATE,DATE_LANG,TIMEZONE\n'


class TestDecodeCsv(unittest.TestCase):

    def test_records_keyed_by_header(self):
        text = HEADER + 'task,Milk,2 liters,1,1,Me,,15 June,en,Europe/Berlin\n'
        [(line_number, record)] = list(decode_csv(text))
        self.assertEqual(line_number, 2)
        self.assertEqual(record['CONTENT'], 'Milk')
        self.assertEqual(record['TIMEZONE'], 'Europe/Berlin')

    def test_blank_lines_skipped(self):
        text = HEADER + '\n,,,,,,,,,\ntask,A,,4,1,,,,en,\n\n'
        records = [record for _, record in decode_csv(text)]
        self.assertEqual([r['CONTENT'] for r in records], ['A'])

    def test_quoted_fields(self):
        text = HEADER + 'task,"Buy milk, eggs","line one\nline two",4,1,,,,en,\n'
        [(_, record)] = list(decode_csv(text))
        self.assertEqual(record['CONTENT'], 'Buy milk, eggs')
        self.assertEqual(record['DESCRIPTION'], 'line one\nline two')

    def test_field_count_mismatch_reported_and_skipped(self):
        errors = []
        text = HEADER + 'task,Broken,1\ntask,Fine,,4,1,,,,en,\n'
        records = [record for _, record in decode_csv(text, errors.append)]
        self.assertEqual([r['CONTENT'] for r in records], ['Fine'])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].line_number, 2)


class TestReadBackupFile(unittest.TestCase):

    def test_read_rows_in_order(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'Inbox.csv')
            with open(path, 'w', encoding='utf-8-sig') as f:
                f.write(HEADER)
                f.write('section,Groceries,,,,,,,,\n')
                f.write('task,Milk,,2,1,,,3 März,de,\n')
                f.write('task,Oat milk,,x,2,,,,de,\n')
            rows = read_backup_file(path)

        self.assertEqual([r.kind for r in rows], [RowKind.SECTION, RowKind.TASK, RowKind.TASK])
        self.assertEqual(rows[1].date, '3 März')
        self.assertEqual(rows[1].priority, 2)
        self.assertTrue(math.isnan(rows[2].priority))

    def test_list_backup_files(self):
        with tempfile.TemporaryDirectory() as tmp:
            for name in ('b.csv', 'a.csv', 'notes.txt', 'upper.CSV'):
                open(os.path.join(tmp, name), 'w').close()
            os.mkdir(os.path.join(tmp, 'dir.csv'))
            self.assertEqual(list_backup_files(tmp), ['a.csv', 'b.csv'])


if __name__ == '__main__':
    unittest.main()
