from __future__ import annotations

from pathlib import Path

import click

from marketplace.infrastructure.cli.catalog_commands import (
    catalog_filter,
    catalog_list,
    catalog_low_stock,
    catalog_search,
)
from marketplace.infrastructure.cli.shop_session import shop_command
from marketplace.infrastructure.logging import DEFAULT_LOG_LEVEL, configure_logging

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    envvar="MARKETPLACE_LOG_LEVEL",
    default=DEFAULT_LOG_LEVEL,
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Minimum level of log events written to stderr.",
)
@click.option(
    "--order-log",
    "order_log_path",
    envvar="MARKETPLACE_ORDER_LOG",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="File that placed orders are appended to.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str, order_log_path: Path | None) -> None:
    """MarketPlace — in-memory shop demo"""
    configure_logging(log_level)
    ctx.ensure_object(dict)
    ctx.obj["order_log_path"] = order_log_path


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
cli.add_command(shop_command)
catalog.add_command(catalog_filter)
catalog.add_command(catalog_list)
catalog.add_command(catalog_low_stock)
catalog.add_command(catalog_search)
