"""Dashboard figures derived from the catalog and the ledger.

Everything here is a pure read over `SessionDatabase`; nothing is cached and
nothing is written back. Dates are compared on their calendar day in local
time, matching the naive timestamps the ledger stores.
"""

from collections import OrderedDict
from datetime import date, timedelta

from config import DAILY_WINDOW_DAYS, LOW_STOCK_THRESHOLD, RECENT_TRANSACTIONS_LIMIT
from formatting import weekday_label
from models import TransactionType
from transactions import recent_transactions


class DailyStat:
    def __init__(self, day, label, revenue):
        self.day = day
        self.label = label
        self.revenue = revenue

    def __repr__(self):
        return f"DailyStat({self.day.isoformat()}, {self.label!r}, {self.revenue})"


class MonthlyStat:
    def __init__(self, month, revenue):
        self.month = month  # "YYYY-MM"
        self.revenue = revenue

    def __repr__(self):
        return f"MonthlyStat({self.month!r}, {self.revenue})"


def _sales(transactions):
    return (t for t in transactions if t.type == TransactionType.OUT)


def _today(today):
    return today or date.today()


def daily_revenue(db, today=None, days=DAILY_WINDOW_DAYS):
    today = _today(today)
    window = [today - timedelta(days=days - 1 - i) for i in range(days)]
    totals = OrderedDict((d, 0) for d in window)

    for t in _sales(db.transactions):
        d = t.timestamp.date()
        if d in totals:
            totals[d] += t.total_price

    return [DailyStat(d, weekday_label(d), revenue) for d, revenue in totals.items()]


def monthly_revenue(db):
    totals = {}
    for t in _sales(db.transactions):
        key = t.timestamp.strftime("%Y-%m")
        totals[key] = totals.get(key, 0) + t.total_price
    return [MonthlyStat(k, totals[k]) for k in sorted(totals) if totals[k]]


def todays_revenue(db, today=None):
    today = _today(today)
    return sum(t.total_price for t in _sales(db.transactions) if t.timestamp.date() == today)


def todays_transaction_count(db, today=None):
    today = _today(today)
    return sum(1 for t in _sales(db.transactions) if t.timestamp.date() == today)


def low_stock_products(db, threshold=LOW_STOCK_THRESHOLD):
    return [p for p in db.products.values() if p.stock < threshold]


def low_stock_count(db, threshold=LOW_STOCK_THRESHOLD):
    return len(low_stock_products(db, threshold))


class Dashboard:
    def __init__(self, today, daily, monthly, revenue_today, transactions_today,
                 low_stock, recent):
        self.today = today
        self.daily = daily
        self.monthly = monthly
        self.revenue_today = revenue_today
        self.transactions_today = transactions_today
        self.low_stock = low_stock
        self.recent = recent

    @property
    def low_stock_count(self):
        return len(self.low_stock)


def dashboard(db, today=None, recent_limit=RECENT_TRANSACTIONS_LIMIT):
    today = _today(today)
    return Dashboard(
        today=today,
        daily=daily_revenue(db, today),
        monthly=monthly_revenue(db),
        revenue_today=todays_revenue(db, today),
        transactions_today=todays_transaction_count(db, today),
        low_stock=low_stock_products(db),
        recent=recent_transactions(db, recent_limit),
    )
