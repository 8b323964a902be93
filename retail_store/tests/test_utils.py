"""
Tests for the distance helper and prompt input parsing.
"""
import math
import unittest

from retail_store.exceptions import ValidationError
from retail_store.utils.geo_utils import calculate_distance
from retail_store.utils.validation import (
    parse_int,
    parse_positive_int,
    parse_non_negative_int,
    parse_coordinate,
    require_text
)


class TestGeoUtils(unittest.TestCase):

    def test_distance_is_euclidean(self):
        self.assertEqual(calculate_distance(0, 0, 3, 4), 5.0)
        self.assertAlmostEqual(calculate_distance(10, 10, 12, 12), math.sqrt(8))

    def test_distance_is_symmetric_and_zero_for_same_point(self):
        self.assertEqual(calculate_distance(1.5, 2.5, 1.5, 2.5), 0.0)
        self.assertEqual(calculate_distance(10, 20, 40, 60), calculate_distance(40, 60, 10, 20))

    def test_accepts_numeric_strings(self):
        # Text result sets hand back coordinates as strings
        self.assertEqual(calculate_distance('0', '0', '6', '8'), 10.0)


class TestValidation(unittest.TestCase):

    def test_parse_int(self):
        self.assertEqual(parse_int(' 42 '), 42)
        self.assertEqual(parse_int('-3'), -3)
        for bad in ('', 'abc', '4.5', None):
            with self.assertRaises(ValidationError):
                parse_int(bad)

    def test_parse_positive_int(self):
        self.assertEqual(parse_positive_int('7', 'amount'), 7)
        with self.assertRaises(ValidationError) as ctx:
            parse_positive_int('0', 'amount')
        self.assertIn('Amount', str(ctx.exception))

    def test_parse_non_negative_int(self):
        self.assertEqual(parse_non_negative_int('0'), 0)
        with self.assertRaises(ValidationError):
            parse_non_negative_int('-1')

    def test_parse_coordinate(self):
        self.assertEqual(parse_coordinate('45.25', 'latitude'), 45.25)
        with self.assertRaises(ValidationError) as ctx:
            parse_coordinate('north', 'latitude')
        self.assertIn('latitude', str(ctx.exception))

    def test_require_text(self):
        self.assertEqual(require_text('  bob '), 'bob')
        with self.assertRaises(ValidationError):
            require_text('   ', 'name')


if __name__ == '__main__':
    unittest.main()
