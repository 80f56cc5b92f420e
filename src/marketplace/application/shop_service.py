"""Application service: the shop façade the UI layer talks to.

ShopService composes one Catalog with the notification wiring and the
optional order log.  It is built explicitly by the composition root and
passed around; there is no process-wide instance.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal

import structlog

from marketplace.domain.events import StockAlertListener
from marketplace.domain.exceptions import DomainException, EntityNotFoundError
from marketplace.domain.model.cart import Cart, LineItem
from marketplace.domain.model.catalog import LOW_STOCK_THRESHOLD, Catalog
from marketplace.domain.model.customer import DEFAULT_CUSTOMER_NAME, Customer
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.order_log import OrderLog

logger = structlog.get_logger(__name__)

PriceInput = str | int | Decimal | Money


class ShopService:

    def __init__(
        self,
        products: Iterable[Product],
        on_low_stock: StockAlertListener | None = None,
        order_log: OrderLog | None = None,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ) -> None:
        """Load the catalog and run the startup low-stock scan.

        ``on_low_stock`` is subscribed before the products are loaded so the
        startup scan already reaches it.
        """
        self._catalog = Catalog()
        self._order_log = order_log
        self._low_stock_threshold = low_stock_threshold
        self._next_customer_id = 1

        if on_low_stock is not None:
            self._catalog.subscribe_low_stock(on_low_stock)
        for product in products:
            self._catalog.add(product)

        logger.info("Catalog loaded", products=len(self._catalog))
        self.check_stock()

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def low_stock_threshold(self) -> int:
        return self._low_stock_threshold

    # --- Catalog queries ------------------------------------------------------

    def subscribe_low_stock(self, listener: StockAlertListener) -> None:
        self._catalog.subscribe_low_stock(listener)

    def search(self, text: str | None) -> list[Product]:
        return self._catalog.search(text)

    def filter_by_price(self, min_price: PriceInput, max_price: PriceInput) -> list[Product]:
        return self._catalog.filter_by_price_range(Money.of(min_price), Money.of(max_price))

    def find_product(self, product_id: int) -> Product | None:
        return self._catalog.find_by_id(product_id)

    def get_product(self, product_id: int) -> Product:
        product = self._catalog.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID {product_id} not found")
        return product

    def grouped_by_category(self) -> dict[str, list[Product]]:
        return self._catalog.grouped_by_category()

    def check_stock(self) -> list[Product]:
        return self._catalog.check_low_stock(self._low_stock_threshold)

    # --- Customer flow --------------------------------------------------------

    def open_customer(self, name: str = DEFAULT_CUSTOMER_NAME) -> Customer:
        """Create a customer whose cart reserves from this shop's catalog."""
        customer = Customer(id=self._next_customer_id, cart=Cart(self._catalog))
        customer.rename(name)
        self._next_customer_id += 1
        return customer

    def add_to_cart(self, customer: Customer, product_id: int, amount: int) -> LineItem:
        product = self.get_product(product_id)
        return customer.cart.add_item(product, amount)

    def place_order(self, customer: Customer) -> Order:
        return customer.place_order()

    def save_last_order(self, customer: Customer) -> Order | None:
        """Append the customer's most recent order to the order log.

        Returns None when the customer has not ordered anything yet.
        """
        if self._order_log is None:
            raise DomainException("No order log is configured")
        order = customer.last_order
        if order is None:
            logger.info("No order to save", customer_id=customer.id)
            return None
        self._order_log.append(order, customer.name)
        return order
