"""Abstract write-only log of placed orders.

Defined in the domain layer so the domain never depends on
infrastructure.  The core only ever appends; it never reads back.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.model.order import Order


class OrderLog(ABC):

    @abstractmethod
    def append(self, order: Order, customer_name: str) -> None:
        """Record one placed order for the given customer."""
