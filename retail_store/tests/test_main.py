"""
Tests for the command-line entry point.
"""
import io
import unittest
from unittest.mock import patch

from retail_store import main as main_module
from retail_store.exceptions import DatabaseError


class TestMain(unittest.TestCase):

    def test_wrong_argument_count_prints_usage(self):
        with patch('sys.stderr', new_callable=io.StringIO) as err:
            with self.assertRaises(SystemExit) as ctx:
                main_module.main(['retail', '5432'])

        self.assertNotEqual(ctx.exception.code, 0)
        self.assertIn('usage:', err.getvalue())

    def test_parser_options(self):
        args = main_module.build_parser().parse_args(
            ['retail', '5432', 'me', '--host', 'db', '--password', 'pw']
        )

        self.assertEqual((args.dbname, args.port, args.user), ('retail', '5432', 'me'))
        self.assertEqual((args.host, args.password), ('db', 'pw'))

    @patch('retail_store.main.RetailCLI')
    @patch('retail_store.main.db')
    def test_connection_failure_is_fatal(self, mock_db, mock_cli):
        mock_db.initialize.side_effect = DatabaseError("Unable to Connect to Database: refused")

        with patch('sys.stdout', new_callable=io.StringIO) as out:
            with self.assertRaises(SystemExit) as ctx:
                main_module.main(['retail', '5432', 'me'])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn('Make sure you started postgres', out.getvalue())
        mock_cli.assert_not_called()

    @patch('retail_store.main.RetailCLI')
    @patch('retail_store.main.db')
    def test_runs_menu_and_disconnects(self, mock_db, mock_cli):
        with patch('sys.stdout', new_callable=io.StringIO) as out:
            main_module.main(['retail', '5432', 'me'])

        mock_db.initialize.assert_called_once_with('retail', '5432', 'me', password=None, host=None)
        mock_cli.return_value.run.assert_called_once_with()
        mock_db.cleanup.assert_called_once_with()
        self.assertIn('Bye !', out.getvalue())

    @patch('retail_store.main.RetailCLI')
    @patch('retail_store.main.db')
    def test_end_of_input_still_disconnects(self, mock_db, mock_cli):
        mock_cli.return_value.run.side_effect = EOFError

        with patch('sys.stdout', new_callable=io.StringIO) as out:
            main_module.main(['retail', '5432', 'me'])

        mock_db.cleanup.assert_called_once_with()
        self.assertIn('Disconnecting from database...', out.getvalue())


if __name__ == '__main__':
    unittest.main()
