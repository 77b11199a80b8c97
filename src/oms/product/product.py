"""Product aggregate — catalogue entry and its stock level.

Stock is only ever written as an absolute value. ``withdraw_stock`` and
``return_stock`` compute the new level from the current one; the order
lifecycle calls them when orders are confirmed or cancelled.
"""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from oms.domain import oms
from oms.errors import InsufficientStockError
from oms.product.events import ProductAdded, StockReturned, StockWithdrawn


@oms.aggregate
class Product:
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0)
    created_at = DateTime()

    @invariant.post
    def stock_cannot_be_negative(self):
        if self.stock is not None and self.stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

    @classmethod
    def add(cls, name, price, stock=0):
        now = datetime.now(UTC)
        product = cls(name=name, price=price, stock=stock, created_at=now)
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                name=name,
                price=price,
                stock=stock,
                added_at=now,
            )
        )
        return product

    def has_stock_for(self, quantity) -> bool:
        # Taking exactly the last unit is allowed
        return quantity <= self.stock

    def ensure_stock_for(self, quantity):
        if not self.has_stock_for(quantity):
            raise InsufficientStockError(self.id, requested=quantity, available=self.stock)

    def set_stock(self, new_quantity):
        """Overwrite the stock level with an absolute value."""
        if new_quantity < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})
        self.stock = new_quantity

    def withdraw_stock(self, quantity, order_id):
        self.ensure_stock_for(quantity)

        previous = self.stock
        self.set_stock(previous - quantity)
        self.raise_(
            StockWithdrawn(
                product_id=str(self.id),
                order_id=str(order_id),
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
                withdrawn_at=datetime.now(UTC),
            )
        )

    def return_stock(self, quantity, order_id):
        previous = self.stock
        self.set_stock(previous + quantity)
        self.raise_(
            StockReturned(
                product_id=str(self.id),
                order_id=str(order_id),
                quantity=quantity,
                previous_stock=previous,
                new_stock=self.stock,
                returned_at=datetime.now(UTC),
            )
        )
