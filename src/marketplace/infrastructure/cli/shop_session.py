"""Interactive menu session.

Each menu action is one uninterruptible unit of work.  Domain errors are
shown to the user and the loop continues; only "Exit" ends the session.
"""

from __future__ import annotations

from pathlib import Path

import click
import structlog

from marketplace.application.dto import cart_to_dto, order_to_dto, product_to_dto
from marketplace.application.shop_service import ShopService
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.customer import Customer
from marketplace.domain.model.product import Product
from marketplace.infrastructure.bootstrap import shop_service
from marketplace.infrastructure.cli.display import (
    echo_cart,
    echo_cart_change,
    echo_error,
    echo_header,
    echo_order,
    echo_product,
    echo_products,
    echo_stock_alert,
)

logger = structlog.get_logger(__name__)

MAIN_MENU = [
    "Catalog",
    "Search",
    "Cart",
    "Orders",
    "Settings",
    "Save last order",
    "Exit",
]


def choose(low: int, high: int, text: str = "Your choice") -> int:
    """Prompt until the user enters an integer within ``[low, high]``."""
    return click.prompt(f"\n{text}", type=click.IntRange(low, high))


class ShopSession:

    def __init__(self, shop: ShopService, customer: Customer) -> None:
        self._shop = shop
        self._customer = customer

    def run(self) -> None:
        actions = {
            1: self.show_catalog,
            2: self.search,
            3: self.show_cart,
            4: self.show_orders,
            5: self.settings,
            6: self.save_last_order,
        }
        while True:
            echo_header("Main menu")
            cart = self._customer.cart
            click.echo(f"User: {self._customer.name}")
            click.echo(f"Cart: {cart.item_count} items for {cart.total_price}\n")
            for number, label in enumerate(MAIN_MENU, start=1):
                click.echo(f"{number}. {label}")

            choice = choose(1, len(MAIN_MENU))
            if choice == len(MAIN_MENU):
                return
            self._guarded(actions[choice])

    # --- Menu actions ---------------------------------------------------------

    def show_catalog(self) -> None:
        while True:
            echo_header("Catalog")
            for category, products in self._shop.grouped_by_category().items():
                click.echo(f"\n{category}:")
                for product in products:
                    echo_product(self._to_dto(product))

            click.echo("\n0. Back")
            click.echo("Product ID - add to cart")

            highest = max((p.id for p in self._shop.catalog), default=0)
            product_id = choose(0, highest)
            if product_id == 0:
                return

            product = self._shop.find_product(product_id)
            if product is None:
                click.echo(f"No product with ID {product_id}")
                continue
            self._guarded(lambda: self.add_to_cart(product))

    def add_to_cart(self, product: Product) -> None:
        amount = click.prompt(f"Quantity (up to {product.quantity})", type=int)
        self._shop.add_to_cart(self._customer, product.id, amount)
        click.echo("Added to cart")

    def search(self) -> None:
        echo_header("Search")
        text = click.prompt("Search", default="", show_default=False)
        results = self._shop.search(text)
        if not results:
            click.echo("Nothing found")
            return

        echo_products([self._to_dto(p) for p in results])
        product_id = click.prompt(
            "\nAdd product to cart (ID or 0 to go back)", type=int, default=0
        )
        if product_id <= 0:
            return
        for product in results:
            if product.id == product_id:
                self.add_to_cart(product)
                return
        click.echo(f"No product with ID {product_id} in the results")

    def show_cart(self) -> None:
        while True:
            echo_header("Your cart")
            echo_cart(cart_to_dto(self._customer.cart))

            click.echo("\n1. Place order")
            click.echo("2. Clear cart")
            click.echo("0. Back")

            choice = choose(0, 2)
            if choice == 0:
                return
            if choice == 1:
                self.checkout()
                return
            self._customer.cart.clear()

    def checkout(self) -> None:
        if self._customer.cart.is_empty:
            click.echo("Cart is empty!")
            return

        name = click.prompt("Your name", default=self._customer.name)
        self._customer.rename(name)

        order = self._shop.place_order(self._customer)
        click.secho(f"\nOrder #{order.id} placed!", fg="green")
        click.echo(f"Total: {order.total}")

        if click.confirm("Save the order to the log file?", default=False):
            self.save_last_order()
        else:
            click.echo("Order was not saved to the log file")

    def show_orders(self) -> None:
        echo_header("My orders")
        orders = self._customer.orders
        if not orders:
            click.echo("You have no orders yet")
            return
        for order in orders:
            click.echo(order.summary())
        click.echo()
        echo_order(order_to_dto(orders[-1]))

    def settings(self) -> None:
        echo_header("Settings")
        self._customer.rename(click.prompt("New name", default=self._customer.name))
        self._customer.update_contacts(
            phone=click.prompt("Phone", default=self._customer.phone, show_default=False),
            address=click.prompt("Address", default=self._customer.address, show_default=False),
            email=click.prompt("Email", default=self._customer.email, show_default=False),
        )
        click.echo(f"Name changed to: {self._customer.name}")

    def save_last_order(self) -> None:
        order = self._shop.save_last_order(self._customer)
        if order is None:
            click.echo("There is no order to save yet")
        else:
            click.echo(f"Order #{order.id} saved to the log file")

    # --- Internal helpers -----------------------------------------------------

    def _to_dto(self, product: Product):
        return product_to_dto(product, self._shop.low_stock_threshold)

    @staticmethod
    def _guarded(action) -> None:
        try:
            action()
        except DomainException as exc:
            logger.info("Action rejected", error=str(exc))
            echo_error(str(exc))


@click.command("shop")
@click.pass_context
def shop_command(ctx: click.Context) -> None:
    """Start the interactive shop menu."""
    order_log_path: Path | None = ctx.obj.get("order_log_path") if ctx.obj else None

    shop = shop_service(on_low_stock=echo_stock_alert, order_log_path=order_log_path)
    customer = shop.open_customer()
    customer.cart.subscribe(echo_cart_change)

    ShopSession(shop, customer).run()
    click.echo("Goodbye!")
