"""Unit tests for the Product aggregate."""

import pytest

from marketplace.domain.exceptions import InvalidArgumentError
from marketplace.domain.model.value_objects import Money
from tests.fakes import make_product


class TestProductQuantity:

    def test_negative_quantity_rejected_on_assignment(self):
        product = make_product(quantity=5)
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            product.set_quantity(-1)
        assert product.quantity == 5

    def test_negative_quantity_rejected_on_creation(self):
        with pytest.raises(InvalidArgumentError, match="cannot be negative"):
            make_product(quantity=-2)

    def test_zero_quantity_allowed(self):
        product = make_product(quantity=5)
        product.set_quantity(0)
        assert product.quantity == 0

    def test_add_quantity_returns_copy(self):
        product = make_product(quantity=5)
        bigger = product.add_quantity(3)
        assert bigger.quantity == 8
        assert product.quantity == 5
        assert bigger is not product
        assert bigger.same_identity(product)

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidArgumentError, match="name is required"):
            make_product(name="  ")


class TestProductIdentity:

    def test_same_id_means_same_identity(self):
        a = make_product(id=1, name="Widget", price="100", quantity=5)
        b = make_product(id=1, name="Renamed", price="1", quantity=0)
        assert a.same_identity(b)

    def test_different_id_means_different_identity(self):
        a = make_product(id=1, name="Widget")
        b = make_product(id=2, name="Widget")
        assert not a.same_identity(b)

    def test_none_is_never_the_same(self):
        assert not make_product().same_identity(None)


class TestProductDisplay:

    def test_low_stock_is_inclusive(self):
        assert make_product(quantity=3).is_low_stock(3)
        assert not make_product(quantity=4).is_low_stock(3)

    def test_update_price(self):
        product = make_product(price="100")
        product.update_price(Money.of("120"))
        assert product.price == Money.of("120")

    def test_describe(self):
        product = make_product(name="Widget", category="Gadgets")
        assert product.describe() == "Product: Widget, Category: Gadgets"

    def test_str(self):
        assert str(make_product(name="Widget", price="100", quantity=5)) == "Widget - 100.00 UAH (5 pcs)"
