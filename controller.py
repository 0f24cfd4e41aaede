import logging

import analytics
from auth import ConstantPasswordAuth, require_admin
from errors import AuthFailure
from inserting import seed
from services import CartService, CheckoutService, ProductService, RestockService

LOGGER = logging.getLogger(__name__)


class StoreController:
    """Owns the session state and exposes the operations a UI calls.

    The UI passes `notify(title, message)` for its alerts and may inject an
    authentication strategy; the defaults log and use the demo password.
    """

    def __init__(self, db=None, auth=None, notify=None, clock=None):
        self.db = db if db is not None else seed()
        self.auth = auth or ConstantPasswordAuth()
        self.notify = notify or self._log_notify
        self.is_admin = False

        self.products = ProductService(self.db)
        self.cart_service = CartService(self.db, notify=self.notify)
        self.checkout_service = CheckoutService(self.db, notify=self.notify, clock=clock)
        self.restock_service = RestockService(self.db, notify=self.notify, clock=clock)

    @staticmethod
    def _log_notify(title, message):
        LOGGER.info("%s: %s", title, message)

    @property
    def cart(self):
        return self.cart_service.cart

    # --- CART LOGIC ---
    def add_to_cart(self, product_id):
        return self.cart_service.add_to_cart(product_id)

    def update_cart_qty(self, product_id, change):
        return self.cart_service.update_cart_qty(product_id, change)

    def remove_from_cart(self, product_id):
        self.cart_service.remove_from_cart(product_id)

    def cart_totals(self):
        return {
            'count': self.cart.count,
            'subtotal': self.cart.total,
            'weight': self.cart.weight,
            'shipping': self.cart.shipping,
            'total': self.cart.grand_total,
        }

    # --- CHECKOUT ---
    def checkout(self):
        return self.checkout_service.checkout(self.cart)

    # --- ADMIN ---
    def check_password(self, candidate):
        return self.auth.check_password(candidate)

    def login(self, password):
        try:
            require_admin(self.auth, password)
        except AuthFailure:
            LOGGER.warning("Admin login failed")
            self.notify("Login Gagal", "Password salah, silakan coba lagi.")
            return False
        self.is_admin = True
        LOGGER.info("Admin logged in")
        return True

    def logout(self):
        self.is_admin = False

    def _admin_allowed(self, action):
        if self.is_admin:
            return True
        LOGGER.warning("%s refused: admin login required", action)
        self.notify("Login Diperlukan", "Silakan login sebagai admin terlebih dahulu.")
        return False

    def restock(self, product_id, amount):
        if not self._admin_allowed("Restock"):
            return None
        return self.restock_service.restock(product_id, amount)

    def dashboard(self, today=None):
        if not self._admin_allowed("Dashboard"):
            return None
        return analytics.dashboard(self.db, today=today)
