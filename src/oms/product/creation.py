"""Product creation — command and handler."""

import structlog
from protean import handle
from protean.fields import Float, Integer, String
from protean.utils.globals import current_domain

from oms.domain import oms
from oms.product.product import Product

logger = structlog.get_logger(__name__)


@oms.command(part_of="Product")
class AddProduct:
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    stock = Integer(default=0, min_value=0)


@oms.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            price=command.price,
            stock=command.stock or 0,
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product added", product_id=str(product.id), stock=product.stock)
        return str(product.id)
