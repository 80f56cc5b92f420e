"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from marketplace.application.shop_service import ShopService
from marketplace.domain.events import StockAlertListener
from marketplace.infrastructure.persistence.text_order_log import TextOrderLog
from marketplace.infrastructure.seed_data import seed_products

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEFAULT_ORDER_LOG = _DATA_DIR / "marketplace_data.txt"


def order_log(path: Path | None = None) -> TextOrderLog:
    return TextOrderLog(path or DEFAULT_ORDER_LOG)


def shop_service(
    on_low_stock: StockAlertListener | None = None,
    order_log_path: Path | None = None,
) -> ShopService:
    return ShopService(
        seed_products(),
        on_low_stock=on_low_stock,
        order_log=order_log(order_log_path),
    )
