#!/usr/bin/env python3
"""
Unit tests for reading Todoist's free-text DATE column.

Run with: python -m pytest test_date_parser.py -v
"""
import os
import unittest
from datetime import date

os.environ.setdefault('TODOIST_LOG_TO_FILE', 'false')

from models import UnsupportedDateLanguageError
from transformers.date_parser import find_month, get_month_names, parse_date

TODAY = date(2026, 10, 17)


class TestFindMonth(unittest.TestCase):
    """Month token lookup."""

    def setUp(self):
        self.en = get_month_names('en')
        self.de = get_month_names('de')

    def test_full_name(self):
        self.assertEqual(find_month('June', self.en), 5)
        self.assertEqual(find_month('Dezember', self.de), 11)

    def test_umlaut_month(self):
        self.assertEqual(find_month('März', self.de), 2)

    def test_four_letter_prefix(self):
        self.assertEqual(find_month('Sept', self.en), 8)
        self.assertEqual(find_month('Janu', self.de), 0)

    def test_three_letter_prefix(self):
        self.assertEqual(find_month('Jun', self.en), 5)
        self.assertEqual(find_month('Okt', self.de), 9)

    def test_trailing_period_stripped(self):
        self.assertEqual(find_month('Okt.', self.de), 9)
        self.assertEqual(find_month('Feb.', self.en), 1)

    def test_case_sensitive(self):
        self.assertEqual(find_month('june', self.en), -1)

    def test_other_language_not_matched(self):
        self.assertEqual(find_month('Mai', self.en), -1)
        self.assertEqual(find_month('May', self.de), -1)


class TestParseDate(unittest.TestCase):
    """Absolute date parsing."""

    def test_day_month_year_english(self):
        result = parse_date('15 June 2024', 'en', TODAY)
        self.assertTrue(result.ok)
        self.assertIsNone(result.reason)
        self.assertEqual((result.value.year, result.value.month, result.value.day), (2024, 6, 15))

    def test_month_first(self):
        result = parse_date('Jun 15 2024', 'en', TODAY)
        self.assertEqual((result.value.year, result.value.month, result.value.day), (2024, 6, 15))

    def test_missing_year_uses_current_year(self):
        result = parse_date('3 Mai', 'de', TODAY)
        self.assertTrue(result.ok)
        self.assertEqual((result.value.year, result.value.month, result.value.day), (2026, 5, 3))

    def test_value_is_local_midnight_with_offset(self):
        result = parse_date('1 January 2025', 'en', TODAY)
        self.assertIsNotNone(result.value.tzinfo)
        self.assertEqual((result.value.hour, result.value.minute), (0, 0))
        self.assertTrue(result.value.isoformat().startswith('2025-01-01T00:00:00'))

    def test_extra_whitespace(self):
        result = parse_date('  15   June  ', 'en', TODAY)
        self.assertTrue(result.ok)

    def test_recurring_expression_fails(self):
        result = parse_date('jeden Monat', 'de', TODAY)
        self.assertFalse(result.ok)
        self.assertIsNone(result.value)
        self.assertIn('jeden', result.reason)

    def test_day_zero_treated_as_missing(self):
        result = parse_date('0 Mai', 'de', TODAY)
        self.assertFalse(result.ok)

    def test_month_without_day_fails(self):
        self.assertFalse(parse_date('June 2024', 'en', TODAY).ok)

    def test_day_without_month_fails(self):
        self.assertFalse(parse_date('15 2024', 'en', TODAY).ok)

    def test_day_with_period_is_not_a_day(self):
        self.assertFalse(parse_date('15. Mai', 'de', TODAY).ok)

    def test_impossible_calendar_day_fails(self):
        result = parse_date('31 Feb 2025', 'en', TODAY)
        self.assertFalse(result.ok)
        self.assertIn('Invalid calendar date', result.reason)

    def test_unsupported_language_raises(self):
        with self.assertRaises(UnsupportedDateLanguageError) as ctx:
            parse_date('15 juin', 'fr', TODAY)
        self.assertEqual(ctx.exception.date_lang, 'fr')

    def test_first_day_of_year_one_does_not_raise(self):
        # converting to local time can leave the datetime range; it must be a failure, not an error
        result = parse_date('1 January 0001', 'en', TODAY)
        if result.ok:
            self.assertEqual((result.value.year, result.value.month, result.value.day), (1, 1, 1))
        else:
            self.assertIn('Invalid calendar date', result.reason)


if __name__ == '__main__':
    unittest.main()
