"""Stock bookkeeping for order transitions.

Every product an order references is resolved and checked before any stock
level is touched, so a failure on the third line of an order leaves the
first two products exactly as they were.
"""

from protean.utils.globals import current_domain

from oms.product.product import Product


def _resolve_products(order) -> dict[str, Product]:
    repo = current_domain.repository_for(Product)
    products = {}
    for item in order.items:
        product_id = str(item.product_id)
        if product_id not in products:
            products[product_id] = repo.get_by_id(product_id)
    return products


def _demand_by_product(order) -> dict[str, int]:
    demand = {}
    for item in order.items:
        product_id = str(item.product_id)
        demand[product_id] = demand.get(product_id, 0) + item.quantity
    return demand


def withdraw_stock_for(order) -> list[Product]:
    """Take every line's quantity out of its product's stock.

    Lines that repeat a product are checked against their combined quantity.
    Returns the modified products; persisting them is up to the caller.

    Raises:
        ProductNotFoundError: a line references a product that no longer exists.
        InsufficientStockError: a product cannot cover what the order asks for.
    """
    products = _resolve_products(order)

    for product_id, quantity in _demand_by_product(order).items():
        products[product_id].ensure_stock_for(quantity)

    for item in order.items:
        products[str(item.product_id)].withdraw_stock(item.quantity, order_id=order.id)

    return list(products.values())


def return_stock_for(order) -> list[Product]:
    """Hand every line's quantity back to its product's stock."""
    products = _resolve_products(order)

    for item in order.items:
        products[str(item.product_id)].return_stock(item.quantity, order_id=order.id)

    return list(products.values())
