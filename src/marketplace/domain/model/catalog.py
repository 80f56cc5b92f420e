"""Catalog aggregate — owns every Product and their stock levels.

The catalog is the only place that decrements stock.  ``reserve()`` is the
single enforcement point of the non-negative quantity invariant: it checks
availability before mutating, so a failed reservation leaves the product
untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from marketplace.domain.events import StockAlert, StockAlertListener
from marketplace.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    InvalidArgumentError,
)
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
LOW_STOCK_THRESHOLD = 3


class Catalog:
    """Aggregate root for the set of sellable products.

    Products are shared by reference while they sit in the catalog.
    Insertion order is kept for display and search results.
    """

    def __init__(self, products: Iterable[Product] | None = None) -> None:
        self._products: dict[int, Product] = {}
        self._low_stock_listeners: list[StockAlertListener] = []
        for product in products or []:
            self.add(product)

    # --- Observers ------------------------------------------------------------

    def subscribe_low_stock(self, listener: StockAlertListener) -> None:
        self._low_stock_listeners.append(listener)

    # --- Catalog maintenance --------------------------------------------------

    def add(self, product: Product) -> None:
        if product.id in self._products:
            raise InvalidArgumentError(f"Product ID {product.id} already exists")
        self._products[product.id] = product

    def add_product(
        self,
        name: str,
        price: Money,
        quantity: int,
        category: str,
    ) -> Product:
        """Create a product with the next free id and add it."""
        next_id = max(self._products, default=0) + 1
        product = Product(
            id=next_id,
            name=name.strip() if name else name,
            price=price,
            quantity=quantity,
            category=category,
        )
        self.add(product)
        logger.info("Product added", product_id=product.id, name=product.name)
        return product

    def remove(self, product_id: int) -> Product:
        """Drop a product.  Orders keep their own copies, so this is safe."""
        product = self._get(product_id)
        del self._products[product_id]
        return product

    # --- Queries --------------------------------------------------------------

    def find_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._products.values())

    def search(self, text: str | None) -> list[Product]:
        """Case-insensitive substring match on the product name."""
        needle = (text or "").casefold()
        return [p for p in self._products.values() if needle in p.name.casefold()]

    def filter_by_price_range(self, min_price: Money, max_price: Money) -> list[Product]:
        """Products priced within ``[min_price, max_price]``, cheapest first."""
        if min_price > max_price:
            raise InvalidArgumentError(
                f"Minimum price {min_price} is greater than maximum price {max_price}"
            )
        matches = [
            p for p in self._products.values()
            if min_price <= p.price <= max_price
        ]
        return sorted(matches, key=lambda p: (p.price.amount, p.id))

    def grouped_by_category(self) -> dict[str, list[Product]]:
        groups: dict[str, list[Product]] = {}
        for product in self._products.values():
            groups.setdefault(product.category, []).append(product)
        return groups

    @property
    def total_value(self) -> Money:
        result = Money.zero()
        for product in self._products.values():
            result = result + product.price * product.quantity
        return result

    def check_low_stock(self, threshold: int = LOW_STOCK_THRESHOLD) -> list[Product]:
        """Return every product at or below ``threshold`` and alert on each.

        No "already alerted" state is kept: each call notifies again for
        every product that still qualifies.
        """
        low = [p for p in self._products.values() if p.is_low_stock(threshold)]
        for product in low:
            alert = StockAlert(
                product_id=product.id,
                product_name=product.name,
                quantity=product.quantity,
            )
            logger.info(
                "Low stock",
                product_id=product.id,
                name=product.name,
                quantity=product.quantity,
                threshold=threshold,
            )
            for listener in self._low_stock_listeners:
                listener(alert)
        return low

    # --- Stock mutation -------------------------------------------------------

    def reserve(self, product_id: int, amount: int) -> None:
        """Take ``amount`` units out of stock.

        Raises EntityNotFoundError for an unknown id and
        InsufficientStockError when ``amount`` is not positive or exceeds
        what is left.  A non-integer amount is an InvalidArgumentError.
        """
        product = self._get(product_id)
        _check_amount(amount)
        if amount <= 0:
            raise InsufficientStockError("Reservation amount must be positive")
        if amount > product.quantity:
            raise InsufficientStockError(
                f"Insufficient stock for {product.name} "
                f"(requested {amount}, available {product.quantity})"
            )
        product.set_quantity(product.quantity - amount)
        logger.debug(
            "Stock reserved",
            product_id=product_id,
            amount=amount,
            remaining=product.quantity,
        )

    def restock(self, product_id: int, amount: int) -> None:
        product = self._get(product_id)
        _check_amount(amount)
        if amount <= 0:
            raise InvalidArgumentError("Restock amount must be positive")
        product.set_quantity(product.quantity + amount)
        logger.info(
            "Stock replenished",
            product_id=product_id,
            amount=amount,
            quantity=product.quantity,
        )

    # --- Container protocol ---------------------------------------------------

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(list(self._products.values()))

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._products

    # --- Internal helpers -----------------------------------------------------

    def _get(self, product_id: int) -> Product:
        product = self._products.get(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product


def _check_amount(amount: int) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool):
        raise InvalidArgumentError(
            f"Amount must be an integer, got {type(amount).__name__}"
        )
