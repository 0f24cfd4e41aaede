import logging
import uuid
from datetime import datetime

from config import RECENT_TRANSACTIONS_LIMIT, RESTOCK_COST_RATIO
from models import Transaction, TransactionType
from products import get_product, update_stock

LOGGER = logging.getLogger(__name__)

SALE_PREFIX = "TRX"
RESTOCK_PREFIX = "RESTOCK"


def generate_transaction_id(db, prefix=SALE_PREFIX):
    # uuid4 collisions are practically impossible but ids must be unique in the ledger
    existing = db.transaction_ids()
    while True:
        tid = f"{prefix}-{uuid.uuid4().hex[:12].upper()}"
        if tid not in existing:
            return tid


def restock_cost(price, amount):
    return -int(round(price * RESTOCK_COST_RATIO * amount))


def append_transaction(db, transaction):
    if transaction.quantity <= 0:
        raise ValueError("transaction quantity must be positive")
    db.transactions.append(transaction)
    return transaction


def create_sale_transactions(db, items, now=None):
    """Book a sale for every cart line and deduct the stock.

    Example input:
    items = [
        {"product_id": "P001", "qty": 2},
        {"product_id": "P003", "qty": 1}
    ]

    Must run inside `db.transaction()` so a failure on any line undoes the
    lines already booked.
    """
    now = now or datetime.now()
    created = []
    for it in items:
        product = get_product(db, it["product_id"])
        trx = Transaction(
            id=generate_transaction_id(db, SALE_PREFIX),
            product_id=product.id,
            product_name=product.name,
            type=TransactionType.OUT,
            quantity=it["qty"],
            total_price=product.price * it["qty"],
            timestamp=now,
        )
        append_transaction(db, trx)
        update_stock(db, product.id, -it["qty"])  # deduct
        created.append(trx)
    return created


def create_restock_transaction(db, product_id, amount, now=None):
    product = get_product(db, product_id)
    trx = Transaction(
        id=generate_transaction_id(db, RESTOCK_PREFIX),
        product_id=product.id,
        product_name=product.name,
        type=TransactionType.IN,
        quantity=amount,
        total_price=restock_cost(product.price, amount),
        timestamp=now or datetime.now(),
    )
    append_transaction(db, trx)
    update_stock(db, product.id, amount)
    return trx


def get_transaction(db, id):
    for t in db.transactions:
        if t.id == id:
            return t
    return None


def transactions_for_product(db, product_id):
    return [t for t in db.transactions if t.product_id == product_id]


def recent_transactions(db, limit=RECENT_TRANSACTIONS_LIMIT):
    """Newest first, as shown in the admin mutations log."""
    return list(reversed(db.transactions))[:limit]
