import importlib
import io
import os
import shutil
import tempfile
import unittest
import sys
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
import main


class MainTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def run_main(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_inventory_only(self):
        code, out, _ = self.run_main('--no-history')
        self.assertEqual(code, 0)
        self.assertIn('Semen Tiga Roda 50kg', out)
        self.assertIn('Rp 65.000', out)
        self.assertNotIn('Revenue today', out)

    def test_buy_restock_and_exports(self):
        charts = os.path.join(self.tmpdir, 'dash.png')
        receipts = os.path.join(self.tmpdir, 'receipts')
        code, out, _ = self.run_main(
            '--seed', '4', '--buy', 'P001:3', '--buy', 'P004',
            '--password', 'admin123', '--restock', 'P002', '10',
            '--charts', charts, '--receipt-dir', receipts,
        )
        self.assertEqual(code, 0)
        self.assertIn('Cart: 4 item(s)', out)
        self.assertIn('Revenue today', out)
        self.assertIn(' 147 sak', out)
        self.assertIn(' 18 pail', out)
        self.assertTrue(os.path.exists(charts))
        self.assertEqual(len(os.listdir(receipts)), 1)

    def test_restock_without_login_is_denied(self):
        code, out, err = self.run_main('--no-history', '--restock', 'P001', '5')
        self.assertEqual(code, 0)
        self.assertIn('Login Diperlukan', err)
        self.assertIn(' 150 sak', out)
        self.assertNotIn('Revenue today', out)

    def test_logging_is_configured_by_main_only(self):
        with mock.patch('logging.basicConfig') as basic:
            importlib.reload(config)
            basic.assert_not_called()
            self.run_main('--no-history')
        basic.assert_called_once()
        self.assertEqual(basic.call_args.kwargs['format'], config.LOG_FORMAT)

    def test_parse_line(self):
        self.assertEqual(main._parse_line('P001:3'), ('P001', 3))
        self.assertEqual(main._parse_line('P004'), ('P004', 1))


if __name__ == '__main__':
    unittest.main()
