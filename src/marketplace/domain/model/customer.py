"""Customer aggregate — profile, one cart and the history of orders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import structlog

from marketplace.domain.exceptions import InvalidArgumentError
from marketplace.domain.model.cart import Cart
from marketplace.domain.model.order import Order

logger = structlog.get_logger(__name__)

DEFAULT_CUSTOMER_NAME = "Guest"


@dataclass
class Customer:
    """Aggregate root for a shopper.

    ``place_order()`` is the only way an Order comes into existence, which
    keeps order ids a dense 1-based sequence per customer.
    """

    id: int
    cart: Cart
    name: str = DEFAULT_CUSTOMER_NAME
    phone: str = ""
    address: str = ""
    email: str = ""
    _orders: list[Order] = field(default_factory=list, repr=False)

    @property
    def orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    @property
    def last_order(self) -> Order | None:
        return self._orders[-1] if self._orders else None

    def place_order(self, created_at: datetime | None = None) -> Order:
        """Check the cart out, record the order, then empty the cart.

        EmptyCartError propagates unchanged; nothing is recorded then.
        """
        order = self.cart.checkout(len(self._orders) + 1, created_at=created_at)
        self._orders.append(order)
        self.cart.clear()
        logger.info(
            "Order placed",
            customer_id=self.id,
            order_id=order.id,
            total=str(order.total),
            lines=len(order.lines),
        )
        return order

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise InvalidArgumentError("Customer name is required")
        self.name = name.strip()

    def update_contacts(
        self,
        phone: str | None = None,
        address: str | None = None,
        email: str | None = None,
    ) -> None:
        if phone is not None:
            self.phone = phone.strip()
        if address is not None:
            self.address = address.strip()
        if email is not None:
            self.email = email.strip()
