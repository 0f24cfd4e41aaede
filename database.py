import copy
import logging
from contextlib import contextmanager

LOGGER = logging.getLogger(__name__)


class SessionDatabase:
    """In-memory store for one session: the catalog and the transaction ledger.

    Nothing is persisted. `transaction()` gives checkout and restock an
    all-or-nothing unit of work: on any exception the catalog and ledger are
    put back exactly as they were before the block started.
    """

    def __init__(self, products=None, transactions=None):
        self.products = {}
        self.transactions = []
        for p in products or []:
            self.add_product(p)
        for t in transactions or []:
            self.transactions.append(t)

    def add_product(self, product):
        if product.id in self.products:
            raise ValueError(f"Duplicate product id: {product.id}")
        self.products[product.id] = product

    def transaction_ids(self):
        return {t.id for t in self.transactions}

    @contextmanager
    def transaction(self):
        # Ledger entries are immutable so a shallow copy of the list is enough,
        # products are mutable and need their own copies.
        saved_products = {pid: copy.copy(p) for pid, p in self.products.items()}
        saved_ledger_len = len(self.transactions)
        try:
            yield self
        except Exception:
            LOGGER.warning("Rolling back session changes")
            for pid, saved in saved_products.items():
                self.products[pid].__dict__.update(saved.__dict__)
            del self.transactions[saved_ledger_len:]
            raise
