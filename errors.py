"""Exceptions raised by the store core.

None of these are fatal. Services catch them, log, notify the caller and
leave the session state untouched.
"""


class StoreError(Exception):
    """Base class for every store error."""


class CapacityExceeded(StoreError):
    """A cart quantity would go above the product's stock."""

    def __init__(self, product_id, requested, available):
        super().__init__(
            f"Not enough stock for {product_id}: requested {requested}, available {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EmptyCheckout(StoreError):
    """Checkout was called with nothing in the cart."""


class UnknownProduct(StoreError):
    """No product with the given id exists in the catalog."""

    def __init__(self, product_id):
        super().__init__(f"Unknown product: {product_id}")
        self.product_id = product_id


class InvalidRestockAmount(StoreError):
    """Restock amounts must be positive integers."""

    def __init__(self, amount):
        super().__init__(f"Restock amount must be a positive integer, got {amount!r}")
        self.amount = amount


class InsufficientStock(StoreError):
    """Catalog stock dropped below a cart line between fill and checkout."""

    def __init__(self, product_id, requested, available):
        super().__init__(
            f"Stock for {product_id} changed: requested {requested}, available {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class AuthFailure(StoreError):
    """Wrong admin password."""
