"""Cart aggregate — a customer's staging area of reserved stock.

Adding to the cart reserves stock in the catalog first; the cart only
records a line once the catalog accepted the reservation.  Reservations
are one-way: clearing the cart does not return stock to the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import structlog

from marketplace.domain.events import CartChanged, CartListener
from marketplace.domain.exceptions import EmptyCartError
from marketplace.domain.model.catalog import Catalog
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money, Quantity

logger = structlog.get_logger(__name__)


@dataclass
class LineItem:
    """Value copy of a product carrying the *reserved* quantity.

    Independent of the catalog Product after the copy: later price or
    stock changes in the catalog do not reach it.
    """

    product_id: int
    product_name: str
    category: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    def add_quantity(self, amount: int) -> None:
        self.quantity = self.quantity.plus(amount)

    @staticmethod
    def snapshot(product: Product, amount: int) -> LineItem:
        return LineItem(
            product_id=product.id,
            product_name=product.name,
            category=product.category,
            unit_price=product.price,
            quantity=Quantity(amount),
        )


class Cart:

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._lines: list[LineItem] = []
        self._listeners: list[CartListener] = []

    def subscribe(self, listener: CartListener) -> None:
        self._listeners.append(listener)

    # --- Commands -------------------------------------------------------------

    def add_item(self, product: Product, amount: int) -> LineItem:
        """Reserve ``amount`` of ``product`` and record it in the cart.

        Catalog failures (EntityNotFoundError, InsufficientStockError)
        propagate unchanged and leave the cart as it was.  Name and price
        are copied from the catalog's own product, not from ``product``.
        """
        self._catalog.reserve(product.id, amount)
        stocked = self._catalog.find_by_id(product.id)

        line = self._find_line(stocked.id)
        if line is not None:
            line.add_quantity(amount)
        else:
            line = LineItem.snapshot(stocked, amount)
            self._lines.append(line)

        self._notify(f"Added: {stocked.name} x{amount}")
        return line

    def clear(self) -> None:
        """Empty the cart.  Reserved stock is not returned to the catalog."""
        self._lines.clear()
        self._notify("Cart cleared")

    def checkout(self, next_order_id: int, created_at: datetime | None = None) -> Order:
        """Build an Order from the current lines without clearing the cart."""
        if not self._lines:
            raise EmptyCartError("Cart is empty")
        return Order.create(next_order_id, self._lines, created_at=created_at)

    # --- Queries --------------------------------------------------------------

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def item_count(self) -> int:
        return len(self._lines)

    @property
    def unit_count(self) -> int:
        return sum(line.quantity.value for line in self._lines)

    @property
    def total_price(self) -> Money:
        result = Money.zero()
        for line in self._lines:
            result = result + line.line_total
        return result

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: int) -> LineItem | None:
        for line in self._lines:
            if line.product_id == product_id:
                return line
        return None

    def _notify(self, message: str) -> None:
        logger.debug("Cart changed", message=message, lines=len(self._lines))
        event = CartChanged(message)
        for listener in self._listeners:
            listener(event)
