import logging

from errors import UnknownProduct
from models import Category

LOGGER = logging.getLogger(__name__)

STATUS_OUT_OF_STOCK = "out_of_stock"
STATUS_LOW_STOCK = "low_stock"
STATUS_AVAILABLE = "available"

SORT_NEWEST = "newest"
SORT_PRICE_DESC = "price_desc"
SORT_PRICE_ASC = "price_asc"


def get_product(db, id):
    product = db.products.get(id)
    if product is None:
        raise UnknownProduct(id)
    return product


def find_product(db, id):
    return db.products.get(id)


def list_products(db, category=None, sort=SORT_NEWEST):
    """Catalog listing, optionally filtered by category.

    `newest` keeps seed order, the price sorts are stable on that order.
    """
    products = list(db.products.values())
    if category is not None:
        category = Category(category)
        products = [p for p in products if p.category == category]

    if sort == SORT_PRICE_DESC:
        products.sort(key=lambda p: p.price, reverse=True)
    elif sort == SORT_PRICE_ASC:
        products.sort(key=lambda p: p.price)
    elif sort != SORT_NEWEST:
        raise ValueError(f"Unknown sort order: {sort}")
    return products


def update_stock(db, product_id, change):
    """Apply a stock delta and return the new stock. Deductions floor at zero."""
    product = get_product(db, product_id)
    new_stock = product.stock + change
    if new_stock < 0:
        LOGGER.warning(
            "Stock for %s would go negative (%d %+d), clamping to 0",
            product_id, product.stock, change,
        )
        new_stock = 0
    product.stock = new_stock
    return new_stock


def stock_status(product):
    if product.is_out_of_stock:
        return STATUS_OUT_OF_STOCK
    if product.is_low_stock:
        return STATUS_LOW_STOCK
    return STATUS_AVAILABLE
