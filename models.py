import copy
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from config import (
    CARGO_WEIGHT_KG,
    LOW_STOCK_THRESHOLD,
    SHIPPING_RATE_PER_STEP,
    SHIPPING_WEIGHT_STEP_KG,
)
from errors import CapacityExceeded


class Category(str, Enum):
    CEMENT = "Semen"
    STEEL = "Besi"
    PAINT = "Cat"
    BRICK = "Bata"
    WOOD = "Kayu"
    OTHER = "Lainnya"


class TransactionType(str, Enum):
    OUT = "OUT"  # sale
    IN = "IN"  # restock


#product model
class Product:
    def __init__(self, id, name, category, price, stock, unit, weight_kg, image=""):
        if price < 0:
            raise ValueError("price must be non-negative")
        if stock < 0:
            raise ValueError("stock must be non-negative")
        if weight_kg < 0:
            raise ValueError("weight_kg must be non-negative")
        self.id = id
        self.name = name
        self.category = Category(category)
        self.price = int(price)
        self.stock = int(stock)
        self.unit = unit
        self.weight_kg = float(weight_kg)
        self.image = image

    @property
    def is_out_of_stock(self):
        return self.stock == 0

    @property
    def is_low_stock(self):
        return self.stock < LOW_STOCK_THRESHOLD

    @property
    def is_cargo(self):
        return self.weight_kg > CARGO_WEIGHT_KG

    def snapshot(self):
        return copy.copy(self)

    def __repr__(self):
        return f"Product({self.id!r}, {self.name!r}, stock={self.stock})"


#ledger entry, never modified after it is appended
@dataclass(frozen=True)
class Transaction:
    id: str
    product_id: str
    product_name: str
    type: TransactionType
    quantity: int
    total_price: int
    timestamp: datetime

    @property
    def is_sale(self):
        return self.type == TransactionType.OUT

    @property
    def is_restock(self):
        return self.type == TransactionType.IN


#cart item model
class CartItem:
    def __init__(self, product, qty=1):
        self.product = product
        self.qty = qty

    @property
    def id(self):
        return self.product.id

    @property
    def total(self):
        return self.product.price * self.qty

    @property
    def weight(self):
        return self.product.weight_kg * self.qty


#cart model
class Cart:
    """Session cart keyed by product id.

    Every mutation that increases a quantity takes the product's current
    catalog stock and refuses to go above it.
    """

    def __init__(self):
        self.items = {}

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(list(self.items.values()))

    def __contains__(self, product_id):
        return product_id in self.items

    def get(self, product_id):
        return self.items.get(product_id)

    def add(self, product, stock):
        item = self.items.get(product.id)
        current = item.qty if item else 0
        if current + 1 > stock:
            raise CapacityExceeded(product.id, current + 1, stock)

        if item:
            item.qty += 1
        else:
            self.items[product.id] = CartItem(product.snapshot(), 1)
        return self.items[product.id]

    def change_qty(self, product_id, delta, stock):
        """Apply `delta` to a line. Returns the new quantity, 0 if the line was removed."""
        item = self.items.get(product_id)
        if item is None:
            return None
        new_qty = item.qty + delta
        if new_qty <= 0:
            del self.items[product_id]
            return 0
        if delta > 0 and new_qty > stock:
            raise CapacityExceeded(product_id, new_qty, stock)
        item.qty = new_qty
        return new_qty

    def remove(self, product_id):
        self.items.pop(product_id, None)

    def clear(self):
        self.items = {}

    @property
    def count(self):
        return sum(item.qty for item in self.items.values())

    @property
    def total(self):
        return sum(item.total for item in self.items.values())

    @property
    def weight(self):
        return sum(item.weight for item in self.items.values())

    @property
    def shipping(self):
        weight = self.weight
        if weight <= 0:
            return 0
        return math.ceil(weight / SHIPPING_WEIGHT_STEP_KG) * SHIPPING_RATE_PER_STEP

    @property
    def grand_total(self):
        return self.total + self.shipping
