"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry display-ready data to the CLI without exposing domain
internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from marketplace.domain.model.cart import Cart
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    category: str
    price: str  # formatted, e.g. "45999.00 UAH"
    quantity: int
    low_stock: bool


@dataclass(frozen=True)
class LineItemDTO:
    """A single cart or order line as displayed to the user."""

    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    items: list[LineItemDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    items: list[LineItemDTO]
    total: str
    created_at: str
    summary: str


# --- Mapping --------------------------------------------------------------


def product_to_dto(product: Product, low_stock_threshold: int) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        category=product.category,
        price=str(product.price),
        quantity=product.quantity,
        low_stock=product.is_low_stock(low_stock_threshold),
    )


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        items=[
            LineItemDTO(
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in cart.items
        ],
        item_count=cart.item_count,
        total=str(cart.total_price),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,
        items=[
            LineItemDTO(
                product_name=item.product_name,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.lines
        ],
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        summary=order.summary(),
    )
