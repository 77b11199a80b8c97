"""Read side of the order lifecycle.

Orders reference users and products by id only. These queries resolve those
references so callers get an order with its user and every line's product
filled in. A reference that no longer resolves is returned as ``None``.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from oms.order.order import Order
from oms.product.inventory import product_to_dict
from oms.product.product import Product
from oms.user.directory import user_to_dict
from oms.user.user import User


def _lookup(cls, identifier, cache):
    key = (cls, str(identifier))
    if key not in cache:
        try:
            cache[key] = current_domain.repository_for(cls).get(identifier)
        except ObjectNotFoundError:
            cache[key] = None
    return cache[key]


def hydrate(order, cache=None) -> dict:
    """Render an order together with its user and each line's product."""
    cache = {} if cache is None else cache
    user = _lookup(User, order.user_id, cache)

    items = []
    for item in order.items:
        product = _lookup(Product, item.product_id, cache)
        items.append(
            {
                "id": str(item.id),
                "order_id": str(order.id),
                "product_id": str(item.product_id),
                "product": product_to_dict(product) if product else None,
                "quantity": item.quantity,
                "price": item.price,
            }
        )

    return {
        "id": str(order.id),
        "user_id": str(order.user_id),
        "user": user_to_dict(user) if user else None,
        "total": order.total,
        "status": order.status,
        "items": items,
        "created_at": order.created_at.isoformat() if order.created_at else None,
        "updated_at": order.updated_at.isoformat() if order.updated_at else None,
    }


def get_order(order_id) -> dict:
    """Fetch one hydrated order. Raises ``OrderNotFoundError`` on a miss."""
    order = current_domain.repository_for(Order).get_by_id(order_id)
    return hydrate(order)


def list_orders() -> list[dict]:
    cache = {}
    return [hydrate(order, cache) for order in current_domain.repository_for(Order).find_all()]


def list_orders_for_user(user_id) -> list[dict]:
    cache = {}
    return [hydrate(order, cache) for order in current_domain.repository_for(Order).find_by_user(user_id)]
