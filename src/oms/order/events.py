"""Domain events raised by the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from oms.domain import oms


@oms.event(part_of="Order")
class OrderPlaced:
    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total = Float(required=True)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@oms.event(part_of="Order")
class OrderConfirmed:
    order_id = Identifier(required=True)
    confirmed_at = DateTime(required=True)


@oms.event(part_of="Order")
class OrderShipped:
    order_id = Identifier(required=True)
    shipped_at = DateTime(required=True)


@oms.event(part_of="Order")
class OrderCancelled:
    order_id = Identifier(required=True)
    previous_status = String(required=True, max_length=20)
    cancelled_at = DateTime(required=True)
