"""Notification payloads raised by the catalog and the cart.

Subscribers register plain callables; there is no implicit fan-out beyond
the callbacks a caller explicitly subscribed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class StockAlert:
    """Raised by a low-stock scan, once per qualifying product per scan."""

    product_id: int
    product_name: str
    quantity: int

    @property
    def message(self) -> str:
        return f"Running low: {self.product_name} ({self.quantity} left)"


@dataclass(frozen=True)
class CartChanged:
    """Raised whenever the content of a cart changes."""

    message: str


StockAlertListener = Callable[[StockAlert], None]
CartListener = Callable[[CartChanged], None]
