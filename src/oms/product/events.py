"""Domain events raised by the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from oms.domain import oms


@oms.event(part_of="Product")
class ProductAdded:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    price = Float(required=True)
    stock = Integer(required=True)
    added_at = DateTime(required=True)


@oms.event(part_of="Product")
class StockWithdrawn:
    """Stock was taken out of the product's availability for an order."""

    product_id = Identifier(required=True)
    order_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    withdrawn_at = DateTime(required=True)


@oms.event(part_of="Product")
class StockReturned:
    """Stock held by a cancelled order was handed back."""

    product_id = Identifier(required=True)
    order_id = Identifier(required=True)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    new_stock = Integer(required=True)
    returned_at = DateTime(required=True)
