"""
Tests for product listing, manager updates and the update log.
"""
import io
import unittest
from unittest.mock import patch

from retail_store.exceptions import AuthorizationError, NotFoundError, ValidationError
from retail_store.services.product_service import ProductService
from retail_store.tests.base import SQLiteTestCase, RULES, ALICE, BOB, CAROL, ERIN


class TestProductService(SQLiteTestCase):

    def setUp(self):
        super().setUp()
        self.service = ProductService(self.db, RULES)

    def test_get_products(self):
        self.assertEqual(self.service.get_products(1), [['Egg', '100', '3'], ['Pepsi', '50', '2']])
        self.assertEqual(self.service.get_products(99), [])

    def test_view_products_prints(self):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            count = self.service.view_products(2)

        self.assertEqual(count, 1)
        self.assertIn('Egg', out.getvalue())

    def test_get_product_units(self):
        self.assertEqual(self.service.get_product_units(3, 'Brisk'), 5)
        with self.assertRaises(NotFoundError):
            self.service.get_product_units(3, 'Egg')

    def test_manager_updates_own_store(self):
        self.service.update_product(BOB, 1, 'Pepsi', 75, 4)

        self.assertEqual(self.service.get_products(1)[1], ['Pepsi', '75', '4'])
        rows = self.db.execute_and_return("SELECT managerid, storeid, productname FROM productupdates")
        self.assertEqual(rows, [['2', '1', 'Pepsi']])

    def test_non_manager_cannot_update_products(self):
        for session in (ALICE, CAROL):
            with self.assertRaises(AuthorizationError):
                self.service.update_product(session, 1, 'Pepsi', 0, 0)

        self.assertEqual(self.units_of(1, 'Pepsi'), 50)
        self.assertEqual(self.count_rows('productupdates'), 0)

    def test_manager_cannot_update_another_managers_store(self):
        with self.assertRaises(AuthorizationError):
            self.service.update_product(ERIN, 1, 'Pepsi', 1, 1)

        self.assertEqual(self.units_of(1, 'Pepsi'), 50)

    def test_update_unknown_product(self):
        with self.assertRaises(NotFoundError):
            self.service.update_product(BOB, 1, 'Brisk', 1, 1)
        self.assertEqual(self.count_rows('productupdates'), 0)

    def test_update_rejects_negative_values(self):
        with self.assertRaises(ValidationError):
            self.service.update_product(BOB, 1, 'Egg', -1, 3)

    def test_recent_updates_for_manager_only_cover_own_stores(self):
        self.service.update_product(BOB, 1, 'Egg', 90, 3)
        self.service.update_product(ERIN, 3, 'Brisk', 9, 1)

        rows = self.service.get_recent_updates(BOB)

        self.assertEqual(len(rows), 1)
        self.assertEqual(rows[0][1:4], ['1', 'Egg', 'bob'])

    def test_recent_updates_for_admin_cover_all_stores(self):
        self.service.update_product(BOB, 1, 'Egg', 90, 3)
        self.service.update_product(ERIN, 3, 'Brisk', 9, 1)

        rows = self.service.get_recent_updates(CAROL)

        self.assertEqual([row[0] for row in rows], ['2', '1'])

    def test_recent_updates_are_limited(self):
        for units in range(8):
            self.service.update_product(BOB, 1, 'Egg', units, 3)

        self.assertEqual(len(self.service.get_recent_updates(BOB)), RULES['recent_limit'])

    def test_customer_cannot_view_updates(self):
        with self.assertRaises(AuthorizationError):
            self.service.view_recent_updates(ALICE)


if __name__ == '__main__':
    unittest.main()
