"""Order shipment — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.order.order import Order

logger = structlog.get_logger(__name__)


@oms.command(part_of="Order")
class ShipOrder:
    """Mark a confirmed order as shipped. Stock was already committed on confirmation."""

    order_id = Identifier(required=True)


@oms.command_handler(part_of=Order)
class ShipOrderHandler:
    @handle(ShipOrder)
    def ship_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_by_id(command.order_id)
        order.ship()
        repo.add(order)

        logger.info("Order shipped", order_id=str(order.id))
