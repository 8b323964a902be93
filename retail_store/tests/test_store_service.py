"""
Tests for store lookups and the nearby-store rule.
"""
import io
import math
import unittest
from unittest.mock import patch

from retail_store.exceptions import AuthorizationError, NotFoundError
from retail_store.services.store_service import StoreService
from retail_store.tests.base import SQLiteTestCase, RULES, USERS, STORES, ALICE, BOB, DAVE, ERIN
from retail_store.utils.geo_utils import calculate_distance


class TestStoreService(SQLiteTestCase):

    def setUp(self):
        super().setUp()
        self.service = StoreService(self.db, RULES)

    def test_nearby_stores_strictly_inside_radius(self):
        stores = self.service.get_nearby_stores(ALICE)

        self.assertEqual([row[0] for row in stores], ['1', '2'])
        self.assertAlmostEqual(float(stores[0][2]), math.sqrt(8))
        self.assertAlmostEqual(float(stores[1][2]), math.sqrt(800))

    def test_store_at_exactly_the_radius_is_not_nearby(self):
        # Edge is exactly 30 away from alice
        self.assertFalse(self.service.is_store_nearby(ALICE, 3))

    def test_is_store_nearby(self):
        self.assertTrue(self.service.is_store_nearby(ALICE, 1))
        self.assertFalse(self.service.is_store_nearby(ALICE, 4))
        self.assertFalse(self.service.is_store_nearby(ALICE, 99))

    def test_user_far_from_everything(self):
        self.assertEqual(self.service.get_nearby_stores(DAVE), [])
        self.assertFalse(self.service.is_store_nearby(DAVE, 4))

    def test_far_user_is_outside_every_store_radius(self):
        dave = USERS[3]
        for store in STORES:
            self.assertGreaterEqual(
                calculate_distance(dave[3], dave[4], store[2], store[3]), RULES['nearby_radius']
            )

    def test_radius_comes_from_rules(self):
        service = StoreService(self.db, dict(RULES, nearby_radius=5))

        self.assertEqual([row[0] for row in service.get_nearby_stores(ALICE)], ['1'])

    def test_view_stores_prints(self):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            count = self.service.view_stores(ALICE)

        self.assertEqual(count, 2)
        self.assertIn('Downtown', out.getvalue())
        self.assertNotIn('Edge', out.getvalue())

    def test_get_store(self):
        self.assertEqual(self.service.get_store(2), ['2', 'Uptown', '2'])
        with self.assertRaises(NotFoundError):
            self.service.get_store(99)

    def test_require_managed_store(self):
        self.assertEqual(self.service.require_managed_store(BOB, 1)[1], 'Downtown')
        with self.assertRaises(AuthorizationError):
            self.service.require_managed_store(ERIN, 1)
        with self.assertRaises(NotFoundError):
            self.service.require_managed_store(BOB, 99)

    def test_get_product_names(self):
        self.assertEqual(self.service.get_product_names(1), ['Egg', 'Pepsi'])
        self.assertEqual(self.service.get_product_names(99), [])


if __name__ == '__main__':
    unittest.main()
