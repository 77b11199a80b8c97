"""Order management API package."""

from oms.api.application import API_PREFIX, create_app
from oms.api.routes import order_router, product_router, user_router

__all__ = ["API_PREFIX", "create_app", "order_router", "product_router", "user_router"]
