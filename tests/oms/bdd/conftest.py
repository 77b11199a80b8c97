"""Shared BDD fixtures and step definitions for the order lifecycle."""

import json

import pytest
from oms.order.cancellation import CancelOrder
from oms.order.confirmation import ConfirmOrder
from oms.order.creation import CreateOrder
from oms.order.fulfillment import ShipOrder
from oms.order.order import Order
from oms.product.product import Product
from oms.user.user import User
from protean import current_domain
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then, when

_TRANSITIONS = {
    "confirmed": ConfirmOrder,
    "shipped": ShipOrder,
    "cancelled": CancelOrder,
}


@pytest.fixture()
def shop():
    """State shared across the steps of one scenario."""
    return {"customer": None, "products": {}, "orders": {}, "error": None}


def _place(shop, label, quantity, product_name):
    product = shop["products"][product_name]
    command = CreateOrder(
        user_id=str(shop["customer"].id),
        items=json.dumps([{"product_id": str(product.id), "quantity": quantity}]),
    )
    shop["orders"][label] = current_domain.process(command, asynchronous=False)


def _transition(shop, label, action):
    command = _TRANSITIONS[action](order_id=shop["orders"][label])
    current_domain.process(command, asynchronous=False)


def _attempt(shop, step):
    """Run a When step, keeping the first rejection for the Then steps."""
    try:
        step()
    except (ObjectNotFoundError, ValidationError) as exc:
        if shop["error"] is None:
            shop["error"] = exc


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a registered customer")
def _(shop):
    customer = User.register(name="Juan Pérez", email="juan@example.com")
    current_domain.repository_for(User).add(customer)
    shop["customer"] = customer


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def _(shop, name, price, stock):
    product = Product.add(name=name, price=price, stock=stock)
    current_domain.repository_for(Product).add(product)
    shop["products"][name] = product


@given(parsers.cfparse('order "{label}" was placed for {quantity:d} of "{product_name}"'))
def _(shop, label, quantity, product_name):
    _place(shop, label, quantity, product_name)


@given(parsers.cfparse('order "{label}" was {action:w}'))
def _(shop, label, action):
    _transition(shop, label, action)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('order "{label}" is placed for {quantity:d} of "{product_name}"'))
def _(shop, label, quantity, product_name):
    _attempt(shop, lambda: _place(shop, label, quantity, product_name))


@when(parsers.cfparse('order "{label}" is {action:w}'))
def _(shop, label, action):
    _attempt(shop, lambda: _transition(shop, label, action))


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('order "{label}" should be {status:w}'))
def _(shop, label, status):
    order = current_domain.repository_for(Order).get(shop["orders"][label])
    assert order.status == status


@then(parsers.cfparse('order "{label}" should total {total:f}'))
def _(shop, label, total):
    order = current_domain.repository_for(Order).get(shop["orders"][label])
    assert order.total == total


@then(parsers.cfparse('"{product_name}" should have {stock:d} in stock'))
def _(shop, product_name, stock):
    product = current_domain.repository_for(Product).get(shop["products"][product_name].id)
    assert product.stock == stock


@then(parsers.cfparse("the request is rejected with {error_name:w}"))
def _(shop, error_name):
    assert shop["error"] is not None
    assert type(shop["error"]).__name__ == error_name
