"""
Tests for account creation and log in.
"""
import unittest

from retail_store.exceptions import AuthenticationError, ValidationError
from retail_store.models import UserType
from retail_store.services.user_service import UserService
from retail_store.session import UserSession
from retail_store.tests.base import SQLiteTestCase, RULES


class TestUserService(SQLiteTestCase):

    def setUp(self):
        super().setUp()
        self.service = UserService(self.db, RULES)

    def test_resolve_user_type(self):
        self.assertIs(self.service.resolve_user_type('manager'), UserType.MANAGER)
        self.assertIs(self.service.resolve_user_type('admin'), UserType.ADMIN)
        self.assertIs(self.service.resolve_user_type('N'), UserType.CUSTOMER)
        self.assertIs(self.service.resolve_user_type(''), UserType.CUSTOMER)
        self.assertIs(self.service.resolve_user_type(None), UserType.CUSTOMER)

    def test_create_customer(self):
        user_type = self.service.create_user('frank', 'pw6', 11.5, 22.25, 'N')

        self.assertIs(user_type, UserType.CUSTOMER)
        rows = self.db.execute_and_return(
            "SELECT userid, latitude, longitude, type FROM users WHERE name = 'frank'"
        )
        self.assertEqual(rows[0][0], '6')
        self.assertEqual(float(rows[0][1]), 11.5)
        self.assertEqual(float(rows[0][2]), 22.25)
        self.assertEqual(rows[0][3], 'customer')

    def test_create_manager_with_access_code(self):
        self.assertIs(self.service.create_user('gina', 'pw7', 1, 1, 'manager'), UserType.MANAGER)

        session = self.service.log_in('gina', 'pw7')
        self.assertTrue(session.is_manager)

    def test_create_user_requires_name_and_password(self):
        with self.assertRaises(ValidationError):
            self.service.create_user('  ', 'pw', 1, 1)
        with self.assertRaises(ValidationError):
            self.service.create_user('henry', '', 1, 1)
        self.assertEqual(self.count_rows('users'), 5)

    def test_log_in(self):
        session = self.service.log_in('bob', 'pw2')

        self.assertEqual(session, UserSession(2, 'bob', UserType.MANAGER))

    def test_log_in_with_mismatched_password_returns_no_user(self):
        with self.assertRaises(AuthenticationError):
            self.service.log_in('bob', 'pw1')

    def test_log_in_unknown_user(self):
        with self.assertRaises(AuthenticationError):
            self.service.log_in('zoe', 'pw2')

    def test_log_in_normalizes_padded_type(self):
        self.db.execute_update("UPDATE users SET type = 'Admin   ' WHERE userid = 1")

        session = self.service.log_in('alice', 'pw1')

        self.assertTrue(session.is_admin)


class TestUserType(unittest.TestCase):

    def test_from_string(self):
        self.assertIs(UserType.from_string('manager'), UserType.MANAGER)
        self.assertIs(UserType.from_string(' Customer '), UserType.CUSTOMER)
        self.assertEqual(str(UserType.ADMIN), 'admin')

    def test_from_string_rejects_unknown(self):
        with self.assertRaises(ValueError):
            UserType.from_string('owner')


if __name__ == '__main__':
    unittest.main()
