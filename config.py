"""Global settings for the material store session."""

import os

# Stock below this many units is flagged for replenishment
LOW_STOCK_THRESHOLD = 10

# Restocks are booked at 70% of the retail price
RESTOCK_COST_RATIO = 0.7

# Shipping estimate: one rate step for every started 50 kg
SHIPPING_WEIGHT_STEP_KG = 50
SHIPPING_RATE_PER_STEP = 50000

# Products heavier than this ship by cargo truck
CARGO_WEIGHT_KG = 50

DAILY_WINDOW_DAYS = 7
RECENT_TRANSACTIONS_LIMIT = 20

# Synthetic history generated at startup
MOCK_TRANSACTION_COUNT = 50
MOCK_HISTORY_DAYS = 30
MOCK_OUT_PROBABILITY = 0.7
MOCK_MAX_QUANTITY = 10

# Admin gate. Not a security boundary, only a demo credential.
ADMIN_PASSWORD = os.environ.get("MATERIAL_STORE_ADMIN_PASSWORD", "admin123")

CURRENCY_PREFIX = "Rp"

# id-ID short weekday names, indexed by date.weekday() (Monday = 0)
WEEKDAY_LABELS = ("Sen", "Sel", "Rab", "Kam", "Jum", "Sab", "Min")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
