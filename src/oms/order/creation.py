"""Order creation — command and handler."""

import json

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.order.order import Order
from oms.product.product import Product
from oms.user.user import User

logger = structlog.get_logger(__name__)


@oms.command(part_of="Order")
class CreateOrder:
    user_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_id, quantity}


@oms.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        requested_items = json.loads(command.items)

        user = current_domain.repository_for(User).get_by_id(command.user_id)

        # Availability check only: stock is withdrawn on confirmation
        product_repo = current_domain.repository_for(Product)
        lines = []
        for requested in requested_items:
            product = product_repo.get_by_id(requested["product_id"])
            product.ensure_stock_for(requested["quantity"])
            lines.append(
                {
                    "product_id": str(product.id),
                    "quantity": requested["quantity"],
                    "price": product.price,
                }
            )

        order = Order.place(user_id=user.id, lines=lines)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            user_id=str(user.id),
            total=order.total,
            item_count=len(lines),
        )
        return str(order.id)
