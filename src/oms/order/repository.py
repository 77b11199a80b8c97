"""Order store — persistence access for orders and their line items."""

from protean.exceptions import ObjectNotFoundError

from oms.domain import oms
from oms.errors import OrderNotFoundError
from oms.order.order import Order


@oms.repository(part_of=Order)
class OrderRepository:
    def get_by_id(self, order_id) -> Order:
        try:
            return self.get(order_id)
        except ObjectNotFoundError:
            raise OrderNotFoundError(order_id) from None

    def find_all(self) -> list[Order]:
        return self._dao.query.order_by("created_at").limit(None).all().items

    def find_by_user(self, user_id) -> list[Order]:
        return self._dao.query.filter(user_id=str(user_id)).order_by("created_at").limit(None).all().items
