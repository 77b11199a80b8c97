"""Inventory store — product lookups and stock writes by absolute value."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.errors import ProductNotFoundError
from oms.product.product import Product


@oms.repository(part_of=Product)
class ProductRepository:
    def get_by_id(self, product_id) -> Product:
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise ProductNotFoundError(product_id) from None

    def find_all(self) -> list[Product]:
        return self._dao.query.order_by("created_at").limit(None).all().items

    def update_stock(self, product_id, new_quantity) -> Product:
        product = self.get_by_id(product_id)
        product.set_stock(new_quantity)
        self.add(product)
        return product


def get_product(product_id) -> Product:
    return current_domain.repository_for(Product).get_by_id(product_id)


def list_products() -> list[Product]:
    return current_domain.repository_for(Product).find_all()


def product_to_dict(product) -> dict:
    return {
        "id": str(product.id),
        "name": product.name,
        "price": product.price,
        "stock": product.stock,
        "created_at": product.created_at.isoformat() if product.created_at else None,
    }
