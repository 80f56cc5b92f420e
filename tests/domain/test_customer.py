"""Unit tests for the Customer aggregate and order placement."""

import pytest

from marketplace.domain.exceptions import EmptyCartError, InvalidArgumentError
from marketplace.domain.model.cart import Cart
from marketplace.domain.model.customer import Customer
from marketplace.domain.model.value_objects import Money
from tests.fakes import make_catalog, make_product


def _setup():
    widget = make_product(id=1, name="Widget", price="100", quantity=5)
    catalog = make_catalog(widget)
    customer = Customer(id=1, cart=Cart(catalog))
    return customer, catalog, widget


class TestPlaceOrder:

    def test_widget_walkthrough(self):
        customer, catalog, widget = _setup()

        customer.cart.add_item(widget, 3)
        assert catalog.find_by_id(1).quantity == 2
        assert customer.cart.items[0].line_total == Money.of("300")

        order = customer.place_order()

        assert order.id == 1
        assert order.total == Money.of("300")
        assert customer.cart.is_empty
        assert len(customer.orders) == 1

    def test_order_ids_are_dense_and_one_based(self):
        customer, _, widget = _setup()
        ids = []
        for _ in range(3):
            customer.cart.add_item(widget, 1)
            ids.append(customer.place_order().id)
        assert ids == [1, 2, 3]

    def test_orders_kept_in_creation_order(self):
        customer, _, widget = _setup()
        customer.cart.add_item(widget, 1)
        first = customer.place_order()
        customer.cart.add_item(widget, 2)
        second = customer.place_order()

        assert customer.orders == (first, second)
        assert customer.last_order is second

    def test_empty_cart_produces_no_order(self):
        customer, _, _ = _setup()
        with pytest.raises(EmptyCartError):
            customer.place_order()
        assert customer.orders == ()
        assert customer.last_order is None

    def test_placing_order_does_not_restock(self):
        customer, catalog, widget = _setup()
        customer.cart.add_item(widget, 2)
        customer.place_order()
        assert catalog.find_by_id(1).quantity == 3


class TestProfile:

    def test_default_name_is_guest(self):
        customer, _, _ = _setup()
        assert customer.name == "Guest"

    def test_rename_strips(self):
        customer, _, _ = _setup()
        customer.rename("  Olena ")
        assert customer.name == "Olena"

    def test_blank_name_rejected(self):
        customer, _, _ = _setup()
        with pytest.raises(InvalidArgumentError, match="name is required"):
            customer.rename("   ")
        assert customer.name == "Guest"

    def test_update_contacts_only_touches_given_fields(self):
        customer, _, _ = _setup()
        customer.update_contacts(phone="+380 44 000 0000", email="o@example.com")
        customer.update_contacts(address="Kyiv")
        assert customer.phone == "+380 44 000 0000"
        assert customer.email == "o@example.com"
        assert customer.address == "Kyiv"
