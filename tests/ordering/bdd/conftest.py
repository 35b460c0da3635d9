"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.creation import CreateOrder
from ordering.order.order import Order
from ordering.product_lookup import get_product_catalog
from protean import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def outcome():
    """Container for the error raised by the last When step, if any."""
    return {"exc": None}


@given(
    parsers.parse('the product "{product_id}" named "{name}" costs {price:f} with {discount:d} percent discount')
)
def _(product_id, name, price, discount):
    get_product_catalog().register(product_id, name=name, unit_price=price, discount_percent=discount)


@given(parsers.parse('an open order for member "{member_card_no}"'), target_fixture="order_id")
def _(member_card_no):
    order = current_domain.process(CreateOrder(member_card_no=member_card_no), asynchronous=False)
    return order.id


@then(parsers.parse('the order status is "{status}"'))
def _(order_id, status):
    assert current_domain.repository_for(Order).get_by_id(order_id).status == status
