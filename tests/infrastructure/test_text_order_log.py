"""Tests for the pipe-delimited order log writer."""

from datetime import datetime, timezone

import pytest

from marketplace.domain.exceptions import OrderLogError
from marketplace.domain.model.cart import LineItem
from marketplace.domain.model.order import Order
from marketplace.infrastructure.persistence.text_order_log import TextOrderLog
from tests.fakes import make_product

SEPARATOR = "-" * 54


def _order(order_id: int = 1) -> Order:
    return Order.create(
        order_id,
        [
            LineItem.snapshot(make_product(id=1, name="iPhone 15 Pro", price="45999"), 2),
            LineItem.snapshot(make_product(id=4, name="PlayStation 5", price="20999"), 1),
        ],
        created_at=datetime(2024, 11, 5, 12, 7, tzinfo=timezone.utc),
    )


class TestRenderBlock:

    def test_block_shape(self, kyiv_local_time):
        block = TextOrderLog.render_block(_order(), "Olena")
        assert block.splitlines() == [
            "#OrderedGoods",
            "iPhone 15 Pro|2",
            "PlayStation 5|1",
            "#Orders",
            "1|2024-11-05 14:07|Olena|iPhone 15 Pro|2|91998",
            "1|2024-11-05 14:07|Olena|PlayStation 5|1|20999",
            SEPARATOR,
        ]


class TestAppend:

    def test_first_append_truncates_existing_file(self, tmp_path):
        path = tmp_path / "marketplace_data.txt"
        path.write_text("stale content from a previous run\n", encoding="utf-8")

        TextOrderLog(path).append(_order(), "Olena")

        content = path.read_text(encoding="utf-8")
        assert "stale content" not in content
        assert content.startswith("#OrderedGoods\n")

    def test_later_appends_keep_previous_blocks(self, tmp_path):
        path = tmp_path / "marketplace_data.txt"
        log = TextOrderLog(path)

        log.append(_order(1), "Olena")
        log.append(_order(2), "Olena")

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines.count("#OrderedGoods") == 2
        assert lines.count(SEPARATOR) == 2
        assert lines[4].startswith("1|")
        assert lines[11].startswith("2|")

    def test_untouched_until_first_append(self, tmp_path):
        path = tmp_path / "marketplace_data.txt"
        path.write_text("previous run\n", encoding="utf-8")

        TextOrderLog(path)

        assert path.read_text(encoding="utf-8") == "previous run\n"

    def test_creates_missing_directory(self, tmp_path):
        path = tmp_path / "data" / "orders.txt"
        TextOrderLog(path).append(_order(), "Guest")
        assert path.exists()

    def test_unwritable_path_raises_order_log_error(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        log = TextOrderLog(blocker / "orders.txt")

        with pytest.raises(OrderLogError, match="Could not write order log") as info:
            log.append(_order(), "Olena")

        assert isinstance(info.value.__cause__, OSError)


class TestLocalTime:

    def test_utc_timestamp_written_as_local_time(self, kyiv_local_time):
        order = Order.create(
            1,
            [LineItem.snapshot(make_product(id=1, name="Widget", price="10"), 1)],
            created_at=datetime(2024, 7, 1, 22, 30, tzinfo=timezone.utc),
        )

        block = TextOrderLog.render_block(order, "Olena")

        # Kyiv is UTC+3 in summer, so the order lands on the next day.
        assert "1|2024-07-02 01:30|Olena|Widget|1|10" in block.splitlines()
