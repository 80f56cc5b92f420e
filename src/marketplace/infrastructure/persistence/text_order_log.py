"""Plain-text, pipe-delimited implementation of OrderLog.

Each append writes one block::

    #OrderedGoods
    <name>|<aggregatedQuantity>
    #Orders
    <orderId>|<YYYY-MM-DD HH:MM>|<customerName>|<itemName>|<itemQuantity>|<lineTotal>
    ------------------------------------------------------

Times are written in the local time zone.

The first append made through an instance truncates the file; every later
append only adds to the end.  The composition root builds one instance per
process run, so the file is truncated once per run.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from marketplace.domain.exceptions import OrderLogError
from marketplace.domain.model.order import Order
from marketplace.domain.repository.order_log import OrderLog

logger = structlog.get_logger(__name__)

GOODS_HEADER = "#OrderedGoods"
ORDERS_HEADER = "#Orders"
BLOCK_SEPARATOR = "-" * 54
DATE_FORMAT = "%Y-%m-%d %H:%M"


class TextOrderLog(OrderLog):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._truncated = False

    @property
    def file_path(self) -> Path:
        return self._file_path

    # --- OrderLog interface ---------------------------------------------------

    def append(self, order: Order, customer_name: str) -> None:
        """Write one block; I/O failures surface as OrderLogError."""
        block = self.render_block(order, customer_name)
        try:
            self._truncate_once()
            with self._file_path.open("a", encoding="utf-8") as fh:
                fh.write(block)
        except OSError as exc:
            logger.error("Order log write failed", path=str(self._file_path), error=str(exc))
            raise OrderLogError(
                f"Could not write order log {self._file_path}: {exc.strerror or exc}"
            ) from exc
        logger.info(
            "Order appended to log",
            order_id=order.id,
            path=str(self._file_path),
        )

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def render_block(order: Order, customer_name: str) -> str:
        lines = [GOODS_HEADER]
        for name, quantity in order.quantities_by_name().items():
            lines.append(f"{name}|{quantity}")

        lines.append(ORDERS_HEADER)
        placed_at = order.created_at.astimezone().strftime(DATE_FORMAT)
        for item in order.lines:
            lines.append(
                f"{order.id}|{placed_at}|{customer_name}|{item.product_name}"
                f"|{item.quantity.value}|{item.line_total.amount}"
            )

        lines.append(BLOCK_SEPARATOR)
        return "\n".join(lines) + "\n"

    # --- File helpers ---------------------------------------------------------

    def _truncate_once(self) -> None:
        if self._truncated:
            return
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._file_path.write_text("", encoding="utf-8")
        self._truncated = True
        logger.debug("Order log truncated", path=str(self._file_path))
