"""Read-only CLI commands over the seeded catalog."""

from __future__ import annotations

import click

from marketplace.application.dto import product_to_dto
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.catalog import LOW_STOCK_THRESHOLD
from marketplace.infrastructure.bootstrap import shop_service
from marketplace.infrastructure.cli.display import (
    echo_products,
    echo_stock_alert,
)


@click.command("list")
def catalog_list() -> None:
    """List every product grouped by category."""
    shop = shop_service()
    for category, products in shop.grouped_by_category().items():
        click.echo(f"\n{category}:")
        echo_products([product_to_dto(p, shop.low_stock_threshold) for p in products])


@click.command("search")
@click.argument("text")
def catalog_search(text: str) -> None:
    """Find products whose name contains TEXT (case-insensitive)."""
    shop = shop_service()
    echo_products([product_to_dto(p, shop.low_stock_threshold) for p in shop.search(text)])


@click.command("filter")
@click.option("--min", "min_price", required=True, help="Lowest price, inclusive.")
@click.option("--max", "max_price", required=True, help="Highest price, inclusive.")
def catalog_filter(min_price: str, max_price: str) -> None:
    """List products within a price range, cheapest first."""
    shop = shop_service()

    try:
        products = shop.filter_by_price(min_price, max_price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_products([product_to_dto(p, shop.low_stock_threshold) for p in products])


@click.command("low-stock")
@click.option(
    "--threshold",
    default=LOW_STOCK_THRESHOLD,
    show_default=True,
    type=click.IntRange(min=0),
    help="Alert on products with at most this many units.",
)
def catalog_low_stock(threshold: int) -> None:
    """Scan the catalog for products running low."""
    shop = shop_service()
    shop.subscribe_low_stock(echo_stock_alert)

    low = shop.catalog.check_low_stock(threshold)
    if not low:
        click.echo(f"All products have more than {threshold} units in stock.")
