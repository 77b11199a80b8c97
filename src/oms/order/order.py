"""Order aggregate and its line items.

State Machine:
    PENDING → CONFIRMED → SHIPPED
    PENDING → CANCELLED
    CONFIRMED → CANCELLED

SHIPPED and CANCELLED are terminal. The order total is computed from the
line items once, when the order is placed, and never recomputed.
"""

from datetime import UTC, datetime
from enum import Enum

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String

from oms.domain import oms
from oms.errors import CannotCancelShippedError, InvalidStatusError
from oms.order.events import OrderCancelled, OrderConfirmed, OrderPlaced, OrderShipped


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    SHIPPED = "SHIPPED"
    CANCELLED = "CANCELLED"


_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.CONFIRMED, OrderStatus.CANCELLED},
    OrderStatus.CONFIRMED: {OrderStatus.SHIPPED, OrderStatus.CANCELLED},
    OrderStatus.SHIPPED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


@oms.entity(part_of="Order")
class OrderItem:
    """One product/quantity line of an order.

    ``price`` is the product's unit price at the moment the order was placed,
    not a live reference to the catalogue.
    """

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    price = Float(required=True, min_value=0.0)

    @property
    def line_total(self):
        return self.price * self.quantity


@oms.aggregate
class Order:
    user_id = Identifier(required=True)
    total = Float(default=0.0)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    items = HasMany(OrderItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, user_id, lines):
        """Place a new PENDING order.

        Args:
            user_id: The user placing the order.
            lines: List of dicts with product_id, quantity and price, where
                   price is the product's current unit price.
        """
        now = datetime.now(UTC)
        order = cls(
            user_id=str(user_id),
            total=sum(line["price"] * line["quantity"] for line in lines),
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )
        for line in lines:
            order.add_items(
                OrderItem(
                    product_id=str(line["product_id"]),
                    quantity=line["quantity"],
                    price=line["price"],
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                user_id=str(user_id),
                total=order.total,
                item_count=len(lines),
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helpers
    # -------------------------------------------------------------------
    def can_transition_to(self, target_status) -> bool:
        return target_status in _VALID_TRANSITIONS[OrderStatus(self.status)]

    def _assert_can_transition(self, target_status):
        if not self.can_transition_to(target_status):
            raise InvalidStatusError(self.id, current=self.status, target=target_status.value)

    def _transition_to(self, target_status):
        self._assert_can_transition(target_status)
        self.status = target_status.value
        self.updated_at = datetime.now(UTC)

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def confirm(self):
        """Mark the order confirmed. Stock has already been withdrawn by the caller."""
        self._transition_to(OrderStatus.CONFIRMED)
        self.raise_(OrderConfirmed(order_id=str(self.id), confirmed_at=self.updated_at))

    def ship(self):
        self._transition_to(OrderStatus.SHIPPED)
        self.raise_(OrderShipped(order_id=str(self.id), shipped_at=self.updated_at))

    def cancel(self):
        """Cancel a PENDING or CONFIRMED order.

        Cancelling an order that is already CANCELLED changes nothing and
        raises no event. Shipped orders cannot be cancelled.
        """
        previous_status = self.status
        if OrderStatus(previous_status) == OrderStatus.SHIPPED:
            raise CannotCancelShippedError(self.id)
        if OrderStatus(previous_status) == OrderStatus.CANCELLED:
            return

        self._transition_to(OrderStatus.CANCELLED)
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                previous_status=previous_status,
                cancelled_at=self.updated_at,
            )
        )

    @property
    def holds_stock(self) -> bool:
        """Only confirmed orders have stock withdrawn on their behalf."""
        return OrderStatus(self.status) == OrderStatus.CONFIRMED
