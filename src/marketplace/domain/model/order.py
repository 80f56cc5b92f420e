"""Order aggregate — immutable snapshot of a cart at checkout.

An Order owns frozen copies of the cart lines it was built from, and its
total is fixed at creation time.  Nothing in the domain mutates an Order
once it exists.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from marketplace.domain.exceptions import InvalidArgumentError
from marketplace.domain.model.value_objects import Money, Quantity

if TYPE_CHECKING:
    from marketplace.domain.model.cart import LineItem


@dataclass(frozen=True)
class OrderLineItem:
    """Captures a cart line, price included, at checkout time."""

    product_id: int
    product_name: str
    category: str
    quantity: Quantity
    unit_price: Money  # locked at reservation time

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value

    @staticmethod
    def from_line(line: LineItem) -> OrderLineItem:
        return OrderLineItem(
            product_id=line.product_id,
            product_name=line.product_name,
            category=line.category,
            quantity=line.quantity,
            unit_price=line.unit_price,
        )


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use ``Order.create()`` — it copies the lines and computes the total
    exactly once.
    """

    id: int
    lines: tuple[OrderLineItem, ...]
    total: Money
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def create(
        order_id: int,
        lines: Iterable[LineItem],
        created_at: datetime | None = None,
    ) -> Order:
        if order_id <= 0:
            raise InvalidArgumentError("Order ID must be positive")

        snapshot = tuple(OrderLineItem.from_line(line) for line in lines)
        if not snapshot:
            raise InvalidArgumentError("Order must contain at least one item")

        total = Money.zero(snapshot[0].unit_price.currency)
        for item in snapshot:
            total = total + item.line_total

        return Order(
            id=order_id,
            lines=snapshot,
            total=total,
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(item.quantity.value for item in self.lines)

    def quantities_by_name(self) -> dict[str, int]:
        """Ordered quantity per distinct product name, first-seen order."""
        result: dict[str, int] = {}
        for item in self.lines:
            result[item.product_name] = result.get(item.product_name, 0) + item.quantity.value
        return result

    def summary(self) -> str:
        return f"Order #{self.id} from {self.created_at.astimezone():%d.%m.%Y} - {self.total}"
