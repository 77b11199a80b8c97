"""Order cancellation — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.order.order import Order
from oms.order.stock import return_stock_for
from oms.product.product import Product

logger = structlog.get_logger(__name__)


@oms.command(part_of="Order")
class CancelOrder:
    order_id = Identifier(required=True)


@oms.command_handler(part_of=Order)
class CancelOrderHandler:
    @handle(CancelOrder)
    def cancel_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_by_id(command.order_id)

        # Read before cancel() moves the status on
        returns_stock = order.holds_stock
        order.cancel()

        if returns_stock:
            product_repo = current_domain.repository_for(Product)
            for product in return_stock_for(order):
                product_repo.add(product)
        repo.add(order)

        logger.info("Order cancelled", order_id=str(order.id), stock_returned=returns_stock)
