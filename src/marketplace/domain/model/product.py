"""Product aggregate.

A Product pairs an immutable identity (id, name, category) with a mutable
stock quantity.  Carts and orders never hold a Product itself, only value
copies, so catalog changes never leak into them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from marketplace.domain.exceptions import InvalidArgumentError
from marketplace.domain.model.value_objects import Money


@dataclass(eq=False)
class Product:
    """A sellable item in the catalog.

    Equality is deliberately not overloaded: two references describe the
    same product when ``same_identity()`` says so, i.e. when their ids match,
    regardless of name, price or stock.
    """

    id: int
    name: str
    price: Money
    quantity: int
    category: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidArgumentError("Product name is required")
        self._check_quantity(self.quantity)

    def same_identity(self, other: Product) -> bool:
        return other is not None and self.id == other.id

    def set_quantity(self, value: int) -> None:
        """Assign the stock level; negative values are rejected, not clamped."""
        self._check_quantity(value)
        self.quantity = value

    def add_quantity(self, amount: int) -> Product:
        """Return a copy of this product holding ``amount`` more units."""
        copy = replace(self)
        copy.set_quantity(self.quantity + amount)
        return copy

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Lines already in a cart or an order keep the price they captured.
        """
        self.price = new_price

    def is_low_stock(self, threshold: int) -> bool:
        return self.quantity <= threshold

    def describe(self) -> str:
        return f"Product: {self.name}, Category: {self.category}"

    def __str__(self) -> str:
        return f"{self.name} - {self.price} ({self.quantity} pcs)"

    @staticmethod
    def _check_quantity(value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgumentError(
                f"Quantity must be an integer, got {type(value).__name__}"
            )
        if value < 0:
            raise InvalidArgumentError("Quantity cannot be negative")
