import logging
import random
from datetime import datetime, timedelta

from config import (
    MOCK_HISTORY_DAYS,
    MOCK_MAX_QUANTITY,
    MOCK_OUT_PROBABILITY,
    MOCK_TRANSACTION_COUNT,
)
from database import SessionDatabase
from models import Category, Product, Transaction, TransactionType
from transactions import RESTOCK_PREFIX, SALE_PREFIX, restock_cost

LOGGER = logging.getLogger(__name__)

# (id, name, category, price, stock, unit, weight_kg, image)
INITIAL_PRODUCTS = [
    ("P001", "Semen Tiga Roda 50kg", Category.CEMENT, 65000, 150, "sak", 50,
     "https://picsum.photos/id/201/300/300"),
    # low stock on purpose
    ("P002", "Cat Tembok Dulux 25kg", Category.PAINT, 1250000, 8, "pail", 25,
     "https://picsum.photos/id/202/300/300"),
    ("P003", "Besi Beton 10mm Full", Category.STEEL, 78000, 500, "btg", 7.4,
     "https://picsum.photos/id/203/300/300"),
    ("P004", "Bata Merah Jumbo", Category.BRICK, 850, 5000, "pcs", 1.5,
     "https://picsum.photos/id/204/300/300"),
    ("P005", "Pasir Muntilan 1 Rit", Category.OTHER, 1800000, 5, "rit", 1500,
     "https://picsum.photos/id/206/300/300"),
    ("P006", "Keramik Lantai 40x40 Putih", Category.OTHER, 65000, 200, "dus", 15,
     "https://picsum.photos/id/208/300/300"),
]


def initial_products():
    # fresh objects every call, sessions must not share stock
    return [Product(*row) for row in INITIAL_PRODUCTS]


def generate_mock_transactions(products, rng=None, now=None,
                               count=MOCK_TRANSACTION_COUNT, days=MOCK_HISTORY_DAYS):
    """Synthetic sales/restock history spread over the last `days` days.

    Product is picked uniformly, quantity is uniform in [1, 10] and 70% of the
    entries are sales. Stock levels are not touched. Sorted oldest first.
    """
    rng = rng or random.Random()
    now = now or datetime.now()
    used = set()
    history = []

    for _ in range(count):
        days_ago = rng.randrange(days)
        product = rng.choice(products)
        qty = rng.randint(1, MOCK_MAX_QUANTITY)
        is_sale = rng.random() < MOCK_OUT_PROBABILITY

        prefix = SALE_PREFIX if is_sale else RESTOCK_PREFIX
        tid = f"{prefix}-{rng.getrandbits(48):012X}"
        while tid in used:
            tid = f"{prefix}-{rng.getrandbits(48):012X}"
        used.add(tid)

        history.append(Transaction(
            id=tid,
            product_id=product.id,
            product_name=product.name,
            type=TransactionType.OUT if is_sale else TransactionType.IN,
            quantity=qty,
            total_price=product.price * qty if is_sale else restock_cost(product.price, qty),
            timestamp=now - timedelta(days=days_ago),
        ))

    history.sort(key=lambda t: t.timestamp)
    return history


def seed(rng=None, now=None, with_history=True):
    products = initial_products()
    history = generate_mock_transactions(products, rng=rng, now=now) if with_history else []
    db = SessionDatabase(products, history)
    LOGGER.info("Session seeded: %d products, %d transactions", len(products), len(history))
    return db
