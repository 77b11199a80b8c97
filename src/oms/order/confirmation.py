"""Order confirmation — command and handler.

Confirmation is the reservation point: stock is re-checked against the
current levels and withdrawn for every line before the order is marked
CONFIRMED.
"""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.order.order import Order
from oms.order.stock import withdraw_stock_for
from oms.product.product import Product

logger = structlog.get_logger(__name__)


@oms.command(part_of="Order")
class ConfirmOrder:
    order_id = Identifier(required=True)


@oms.command_handler(part_of=Order)
class ConfirmOrderHandler:
    @handle(ConfirmOrder)
    def confirm_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_by_id(command.order_id)
        order.confirm()

        product_repo = current_domain.repository_for(Product)
        for product in withdraw_stock_for(order):
            product_repo.add(product)
        repo.add(order)

        logger.info("Order confirmed", order_id=str(order.id))
