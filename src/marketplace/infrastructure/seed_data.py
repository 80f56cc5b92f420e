"""Fixed starting assortment, handed to the shop verbatim at startup."""

from __future__ import annotations

from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money

# (name, price, quantity, category)
SEED_GOODS: list[tuple[str, str, int, str]] = [
    ("iPhone 15 Pro", "45999", 10, "Smartphones"),
    ("Samsung Galaxy S23", "34999", 15, "Smartphones"),
    ("Xiaomi 13 Pro", "28999", 8, "Smartphones"),
    ("PlayStation 5", "20999", 3, "Consoles"),
    ("Xbox Series X", "19999", 4, "Consoles"),
    ("LG Refrigerator", "48999", 7, "Refrigerators"),
    ("Dyson Vacuum Cleaner", "25999", 9, "Vacuum Cleaners"),
    ("MacBook Pro M3", "74999", 4, "Laptops"),
]


def seed_products() -> list[Product]:
    """Build fresh Product instances with ids 1..N in seed order."""
    return [
        Product(id=i, name=name, price=Money.of(price), quantity=qty, category=category)
        for i, (name, price, qty, category) in enumerate(SEED_GOODS, start=1)
    ]
