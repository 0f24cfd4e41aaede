import os
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from datetime import date

from formatting import format_rupiah, format_signed_rupiah, format_weight, weekday_label


class FormattingTests(unittest.TestCase):
    def test_rupiah(self):
        self.assertEqual(format_rupiah(65000), 'Rp 65.000')
        self.assertEqual(format_rupiah(1800000), 'Rp 1.800.000')
        self.assertEqual(format_rupiah(850), 'Rp 850')
        self.assertEqual(format_rupiah(0), 'Rp 0')

    def test_signed_rupiah(self):
        self.assertEqual(format_signed_rupiah(195000), '+Rp 195.000')
        self.assertEqual(format_signed_rupiah(-455000), '-Rp 455.000')

    def test_weight(self):
        self.assertEqual(format_weight(157.44), '157.4 kg')
        self.assertEqual(format_weight(50), '50.0 kg')

    def test_weekday(self):
        self.assertEqual(weekday_label(date(2026, 10, 18)), 'Min')
        self.assertEqual(weekday_label(date(2026, 10, 23)), 'Jum')


if __name__ == '__main__':
    unittest.main()
