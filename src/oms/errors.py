"""Business-rule failures raised by the order lifecycle.

Lookups that miss derive from Protean's ``ObjectNotFoundError`` and rule
violations from ``ValidationError``, so the HTTP layer can map whole families
of errors (404 and 400 respectively) without knowing every subclass.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError


class UserNotFoundError(ObjectNotFoundError):
    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__({"user_id": [f"User {user_id} not found"]})


class ProductNotFoundError(ObjectNotFoundError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__({"product_id": [f"Product {product_id} not found"]})


class OrderNotFoundError(ObjectNotFoundError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__({"order_id": [f"Order {order_id} not found"]})


class InsufficientStockError(ValidationError):
    """A requested quantity exceeds what the product currently has in stock."""

    def __init__(self, product_id, requested, available):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        super().__init__(
            {"quantity": [f"Insufficient stock for product {product_id}: {available} available, {requested} requested"]}
        )


class InvalidStatusError(ValidationError):
    """The order is not in a state that allows the requested transition."""

    def __init__(self, order_id, current, target):
        self.order_id = order_id
        self.current = current
        self.target = target
        super().__init__({"status": [f"Cannot transition order {order_id} from {current} to {target}"]})


class CannotCancelShippedError(ValidationError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__({"status": [f"Order {order_id} has already shipped and cannot be cancelled"]})
