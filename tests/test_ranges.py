"""
Test cases for page range parsing.
"""

import unittest

from pdf_extractor.exceptions import (
    DescendingRangeError,
    EmptyOrInvalidTermError,
    InvalidNumberError,
    MalformedRangeError,
    RangeLimitExceededError,
    RangeParseError,
)
from pdf_extractor.ranges import parse_page_range
from pdf_extractor.utils import describe_pages


class TestRangeParsing(unittest.TestCase):
    """Test cases for parse_page_range."""

    def test_mixed_terms(self):
        self.assertEqual(parse_page_range('1-3,5,7-9'), [1, 2, 3, 5, 7, 8, 9])

    def test_single_page(self):
        self.assertEqual(parse_page_range('4'), [4])

    def test_whitespace_is_trimmed(self):
        self.assertEqual(parse_page_range(' 1 - 3 ,  5 '), [1, 2, 3, 5])

    def test_single_page_range(self):
        self.assertEqual(parse_page_range('3-3'), [3])

    def test_order_and_duplicates_kept(self):
        """Terms are appended as encountered; nothing is sorted or merged."""
        self.assertEqual(parse_page_range('5,1-2,2'), [5, 1, 2, 2])

    def test_empty_expression(self):
        with self.assertRaises(EmptyOrInvalidTermError):
            parse_page_range('')
        with self.assertRaises(EmptyOrInvalidTermError):
            parse_page_range('   ')

    def test_empty_term(self):
        for expression in ('1,,2', '1,', ',3'):
            with self.subTest(expression=expression):
                with self.assertRaises(EmptyOrInvalidTermError):
                    parse_page_range(expression)

    def test_descending_range(self):
        with self.assertRaises(DescendingRangeError) as ctx:
            parse_page_range('3-1')
        self.assertEqual((ctx.exception.start, ctx.exception.end), (3, 1))
        self.assertIn('3 > 1', str(ctx.exception))

    def test_malformed_range(self):
        for expression in ('1-', '-3', '1-2-3', '-'):
            with self.subTest(expression=expression):
                with self.assertRaises(MalformedRangeError):
                    parse_page_range(expression)

    def test_invalid_number_in_range(self):
        with self.assertRaises(InvalidNumberError) as ctx:
            parse_page_range('a-3')
        self.assertEqual(ctx.exception.token, 'a')

    def test_invalid_single_page(self):
        with self.assertRaises(InvalidNumberError) as ctx:
            parse_page_range('x')
        self.assertEqual(ctx.exception.token, 'x')

    def test_zero_is_not_a_page(self):
        with self.assertRaises(InvalidNumberError):
            parse_page_range('0')
        with self.assertRaises(InvalidNumberError):
            parse_page_range('0-2')

    def test_non_ascii_digits_rejected(self):
        with self.assertRaises(InvalidNumberError):
            parse_page_range('²')

    def test_errors_share_base_class(self):
        for expression in ('', '3-1', 'x', '1-'):
            with self.subTest(expression=expression):
                with self.assertRaises(RangeParseError):
                    parse_page_range(expression)


class TestRangeLimit(unittest.TestCase):
    """Range expansion is bounded."""

    def test_huge_range_fails_fast(self):
        with self.assertRaises(RangeLimitExceededError) as ctx:
            parse_page_range('1-999999999')
        self.assertEqual(ctx.exception.limit, 10000)

    def test_explicit_limit(self):
        self.assertEqual(parse_page_range('1-5', max_pages=5), [1, 2, 3, 4, 5])
        with self.assertRaises(RangeLimitExceededError):
            parse_page_range('1-5,6', max_pages=5)

    def test_limit_counts_repeated_terms(self):
        with self.assertRaises(RangeLimitExceededError):
            parse_page_range('1-3,1-3', max_pages=5)

    def test_limit_from_environment(self):
        from unittest import mock

        from pdf_extractor.config import reload_config

        self.addCleanup(reload_config)
        with mock.patch.dict('os.environ', {'PDF_EXTRACTOR_MAX_PAGES': '3'}):
            reload_config()
            self.assertEqual(parse_page_range('1-3'), [1, 2, 3])
            with self.assertRaises(RangeLimitExceededError):
                parse_page_range('1-4')


class TestDescribePages(unittest.TestCase):

    def test_collapses_runs(self):
        self.assertEqual(describe_pages([1, 2, 3, 5, 7, 8, 9]), '1-3,5,7-9')

    def test_keeps_order(self):
        self.assertEqual(describe_pages([5, 1, 2]), '5,1-2')

    def test_empty(self):
        self.assertEqual(describe_pages([]), '')
