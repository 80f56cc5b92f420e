"""Shared console formatting for the CLI commands and the menu session."""

from __future__ import annotations

import click

from marketplace.application.dto import CartDTO, OrderDTO, ProductDTO
from marketplace.domain.events import CartChanged, StockAlert


def echo_header(title: str) -> None:
    click.secho(f"\n=== {title} ===", fg="cyan")


def echo_product(dto: ProductDTO) -> None:
    click.secho(
        f"[{dto.id}] {dto.name:<25} | {dto.category:<15} | {dto.price:>14} | {dto.quantity:>3} pcs",
        fg="yellow" if dto.low_stock else "green",
    )


def echo_products(dtos: list[ProductDTO]) -> None:
    if not dtos:
        click.echo("Nothing found")
        return
    for dto in dtos:
        echo_product(dto)


def echo_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty")
        return
    for item in dto.items:
        click.echo(f"{item.product_name} x{item.quantity} = {item.line_total}")
    click.echo(f"\nTotal: {dto.total}")


def echo_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (placed {dto.created_at})")
    click.echo()
    click.echo(f"  {'Product':<25} {'Qty':>5} {'Price':>14} {'Total':>14}")
    click.echo(f"  {'-'*61}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<25} {item.quantity:>5} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-'*61}")
    click.echo(f"  {'Order Total':<31} {dto.total:>29}")


def echo_stock_alert(alert: StockAlert) -> None:
    click.secho(f"[!] {alert.message}", fg="yellow")


def echo_cart_change(event: CartChanged) -> None:
    click.secho(f"[Cart] {event.message}", fg="magenta")


def echo_error(message: str) -> None:
    click.secho(f"Error: {message}", fg="red", err=True)
