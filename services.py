import logging

from errors import (
    CapacityExceeded,
    EmptyCheckout,
    InsufficientStock,
    InvalidRestockAmount,
    UnknownProduct,
)
from models import Cart
from products import find_product, get_product, list_products
from transactions import create_restock_transaction, create_sale_transactions

LOGGER = logging.getLogger(__name__)


def _no_notify(title, message):
    pass


#Product Service
class ProductService:
    def __init__(self, db):
        self.db = db

    def get_all_products(self, category=None, sort="newest"):
        return list_products(self.db, category=category, sort=sort)

    def get_product_by_id(self, id):
        return find_product(self.db, id)


#Cart service
class CartService:
    """Cart operations bounded by the live catalog stock.

    Rejected changes leave the cart as it was and call `notify(title, message)`,
    the hook a UI uses for its stock-limit alert.
    """

    def __init__(self, db, notify=None):
        self.db = db
        self.cart = Cart()
        self.notify = notify or _no_notify

    def _current_stock(self, product_id):
        return get_product(self.db, product_id).stock

    def add_to_cart(self, product_id):
        try:
            product = get_product(self.db, product_id)
            self.cart.add(product, product.stock)
        except UnknownProduct as e:
            LOGGER.warning("%s", e)
            return False
        except CapacityExceeded as e:
            LOGGER.warning("%s", e)
            self.notify("Stok Tidak Cukup", "Maaf, stok tidak mencukupi untuk menambah item ini.")
            return False
        return True

    def update_cart_qty(self, product_id, change):
        if product_id not in self.cart:
            return False
        try:
            new_qty = self.cart.change_qty(product_id, change, self._current_stock(product_id))
        except UnknownProduct as e:
            LOGGER.warning("%s", e)
            return False
        except CapacityExceeded as e:
            LOGGER.warning("%s", e)
            self.notify("Stok Tidak Cukup", "Maaf, stok tidak mencukupi untuk menambah item ini.")
            return False
        if new_qty == 0:
            LOGGER.debug("Removed %s from cart at zero quantity", product_id)
        return True

    def remove_from_cart(self, product_id):
        self.cart.remove(product_id)

    def clear_cart(self):
        self.cart.clear()

    def get_items(self):
        return list(self.cart)

    def get_count(self):
        return self.cart.count

    def get_total(self):
        return self.cart.total

    def get_weight(self):
        return self.cart.weight

    def get_shipping(self):
        return self.cart.shipping

    def get_grand_total(self):
        return self.cart.grand_total


class CheckoutResult:
    def __init__(self, transactions, subtotal, shipping, weight, timestamp):
        self.transactions = transactions
        self.subtotal = subtotal
        self.shipping = shipping
        self.weight = weight
        self.timestamp = timestamp

    @property
    def total(self):
        return self.subtotal + self.shipping

    @property
    def count(self):
        return sum(t.quantity for t in self.transactions)


#Check-out service
class CheckoutService:
    def __init__(self, db, notify=None, clock=None):
        self.db = db
        self.notify = notify or _no_notify
        self.clock = clock

    def _validate(self, cart):
        if len(cart) == 0:
            raise EmptyCheckout()
        # re-check against the catalog, not the cart snapshot
        for item in cart:
            product = get_product(self.db, item.id)
            if product.stock < item.qty:
                raise InsufficientStock(item.id, item.qty, product.stock)

    def checkout(self, cart):
        """Turn the cart into OUT transactions, deduct stock and clear the cart.

        Returns a CheckoutResult, or None when nothing was applied.
        """
        try:
            self._validate(cart)
        except EmptyCheckout:
            LOGGER.debug("Checkout on empty cart ignored")
            return None
        except (InsufficientStock, UnknownProduct) as e:
            LOGGER.warning("Checkout rejected: %s", e)
            self.notify("Checkout Gagal", f"Stok berubah, transaksi dibatalkan. {e}")
            return None

        subtotal, shipping, weight = cart.total, cart.shipping, cart.weight
        now = self.clock() if self.clock else None
        db_items = [{"product_id": item.id, "qty": item.qty} for item in cart]

        with self.db.transaction():
            created = create_sale_transactions(self.db, db_items, now=now)

        cart.clear()
        result = CheckoutResult(created, subtotal, shipping, weight, created[0].timestamp)
        LOGGER.info(
            "Checkout booked %d line(s), %d item(s), subtotal %d",
            len(created), result.count, subtotal,
        )
        self.notify("Berhasil", "Transaksi Berhasil! Stok telah diperbarui.")
        return result


class RestockService:
    def __init__(self, db, notify=None, clock=None):
        self.db = db
        self.notify = notify or _no_notify
        self.clock = clock

    def restock(self, product_id, amount):
        """Add `amount` units and book an IN transaction at cost. Returns it, or None."""
        try:
            if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
                raise InvalidRestockAmount(amount)
            get_product(self.db, product_id)
        except InvalidRestockAmount as e:
            LOGGER.warning("%s", e)
            self.notify("Jumlah Tidak Valid", "Jumlah restock harus bilangan bulat positif.")
            return None
        except UnknownProduct as e:
            LOGGER.warning("Restock ignored: %s", e)
            return None

        now = self.clock() if self.clock else None
        with self.db.transaction():
            trx = create_restock_transaction(self.db, product_id, amount, now=now)
        LOGGER.info("Restocked %s by %d (cost %d)", product_id, amount, trx.total_price)
        return trx
