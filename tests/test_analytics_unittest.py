import os
import random
import unittest
import sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from datetime import date, datetime, timedelta

import analytics
from database import SessionDatabase
from inserting import initial_products, seed
from models import Transaction, TransactionType

TODAY = date(2026, 10, 19)  # a Monday


def trx(tid, when, total, kind=TransactionType.OUT, qty=1):
    return Transaction(tid, 'P001', 'Semen Tiga Roda 50kg', kind, qty, total, when)


class AnalyticsTests(unittest.TestCase):
    def setUp(self):
        at = lambda days_ago, hour=10: datetime(2026, 10, 19, hour) - timedelta(days=days_ago)
        self.db = SessionDatabase(initial_products(), [
            trx('a', at(40), 100000),           # 2026-09-09
            trx('b', at(6, 8), 65000),           # first day of the window
            trx('c', at(7), 999999),             # just outside the window
            trx('d', at(2), 50000),
            trx('e', at(2, 23), 25000),
            trx('f', at(2), -455000, TransactionType.IN),
            trx('g', at(0, 0), 130000),
            trx('h', at(0, 23), 70000),
            trx('i', at(0), -10000, TransactionType.IN),
        ])

    def test_daily_series(self):
        daily = analytics.daily_revenue(self.db, today=TODAY)
        self.assertEqual(len(daily), 7)
        self.assertEqual(daily[0].day, date(2026, 10, 13))
        self.assertEqual(daily[-1].day, TODAY)
        self.assertEqual([d.revenue for d in daily], [65000, 0, 0, 0, 75000, 0, 200000])
        self.assertEqual(daily[-1].label, 'Sen')
        self.assertEqual(daily[0].label, 'Sel')

    def test_daily_series_empty_ledger(self):
        db = SessionDatabase(initial_products())
        daily = analytics.daily_revenue(db, today=TODAY)
        self.assertEqual(len(daily), 7)
        self.assertTrue(all(d.revenue == 0 for d in daily))

    def test_monthly_series(self):
        monthly = analytics.monthly_revenue(self.db)
        self.assertEqual([m.month for m in monthly], ['2026-09', '2026-10'])
        self.assertEqual(monthly[0].revenue, 100000)
        self.assertEqual(monthly[1].revenue, 65000 + 999999 + 75000 + 200000)

    def test_monthly_skips_months_without_revenue(self):
        db = SessionDatabase(initial_products(), [
            trx('x', datetime(2026, 7, 1), -7000, TransactionType.IN),
            trx('z', datetime(2026, 6, 1), 0),
            trx('y', datetime(2026, 8, 1), 5000),
        ])
        self.assertEqual([m.month for m in analytics.monthly_revenue(db)], ['2026-08'])

    def test_today(self):
        self.assertEqual(analytics.todays_revenue(self.db, today=TODAY), 200000)
        self.assertEqual(analytics.todays_transaction_count(self.db, today=TODAY), 2)
        self.assertEqual(analytics.todays_revenue(self.db, today=date(2026, 1, 1)), 0)

    def test_low_stock(self):
        # seed has P002 (8) and P005 (5) below 10
        self.assertEqual(analytics.low_stock_count(self.db), 2)
        self.db.products['P001'].stock = 10
        self.assertEqual(analytics.low_stock_count(self.db), 2)
        self.db.products['P001'].stock = 9
        self.assertEqual([p.id for p in analytics.low_stock_products(self.db)], ['P001', 'P002', 'P005'])

    def test_dashboard_is_read_only(self):
        stocks = {pid: p.stock for pid, p in self.db.products.items()}
        ledger = list(self.db.transactions)
        dash = analytics.dashboard(self.db, today=TODAY, recent_limit=3)
        self.assertEqual(dash.revenue_today, 200000)
        self.assertEqual(dash.transactions_today, 2)
        self.assertEqual(dash.low_stock_count, 2)
        self.assertEqual([t.id for t in dash.recent], ['i', 'h', 'g'])
        self.assertEqual(stocks, {pid: p.stock for pid, p in self.db.products.items()})
        self.assertEqual(ledger, self.db.transactions)

    def test_seeded_history_properties(self):
        db = seed(rng=random.Random(3))
        daily = analytics.daily_revenue(db)
        self.assertEqual(len(daily), 7)
        self.assertTrue(all(d.revenue >= 0 for d in daily))
        self.assertTrue(all(m.revenue > 0 for m in analytics.monthly_revenue(db)))


if __name__ == '__main__':
    unittest.main()
