"""Shared fixtures: users and products already stored in the domain."""

import json

import pytest
from oms.order.creation import CreateOrder
from oms.order.order import Order
from oms.product.product import Product
from oms.user.user import User
from protean import current_domain


@pytest.fixture()
def user():
    user = User.register(name="Juan Pérez", email="juan@example.com")
    current_domain.repository_for(User).add(user)
    return user


@pytest.fixture()
def make_product():
    def _make(name="Laptop Dell XPS 13", price=100.0, stock=10):
        product = Product.add(name=name, price=price, stock=stock)
        current_domain.repository_for(Product).add(product)
        return product

    return _make


@pytest.fixture()
def product(make_product):
    return make_product()


@pytest.fixture()
def stock_of():
    """Read a product's current stock straight from the store."""

    def _stock_of(product):
        return current_domain.repository_for(Product).get(product.id).stock

    return _stock_of


@pytest.fixture()
def place_order():
    """Process a CreateOrder command for ``(product, quantity)`` pairs and return the order id."""

    def _place(user, *lines):
        command = CreateOrder(
            user_id=str(user.id),
            items=json.dumps([{"product_id": str(product.id), "quantity": quantity} for product, quantity in lines]),
        )
        return current_domain.process(command, asynchronous=False)

    return _place


@pytest.fixture()
def order_status():
    def _order_status(order_id):
        return current_domain.repository_for(Order).get(order_id).status

    return _order_status
