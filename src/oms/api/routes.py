"""FastAPI routes for users, products and orders.

Thin adapters: requests become domain commands, and every order endpoint
answers with the order re-read through the query side, fully hydrated.
"""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from oms.api.schemas import (
    CreateOrderRequest,
    CreateProductRequest,
    CreateUserRequest,
    ErrorResponse,
    OrderResponse,
    ProductResponse,
    UserResponse,
)
from oms.order.cancellation import CancelOrder
from oms.order.confirmation import ConfirmOrder
from oms.order.creation import CreateOrder
from oms.order.fulfillment import ShipOrder
from oms.order.queries import get_order, list_orders, list_orders_for_user
from oms.product.creation import AddProduct
from oms.product.inventory import get_product, list_products, product_to_dict
from oms.user.directory import get_user, list_users, user_to_dict
from oms.user.registration import RegisterUser

_NOT_FOUND = {404: {"model": ErrorResponse}}
_REJECTED = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}

# ---------------------------------------------------------------------------
# User Router
# ---------------------------------------------------------------------------
user_router = APIRouter(prefix="/users", tags=["users"])


@user_router.get("", response_model=list[UserResponse])
async def get_users() -> list[UserResponse]:
    return [UserResponse(**user_to_dict(user)) for user in list_users()]


@user_router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
async def get_user_by_id(user_id: str) -> UserResponse:
    return UserResponse(**user_to_dict(get_user(user_id)))


@user_router.post("", status_code=201, response_model=UserResponse, responses={400: {"model": ErrorResponse}})
async def register_user(body: CreateUserRequest) -> UserResponse:
    command = RegisterUser(name=body.name, email=body.email)
    user_id = current_domain.process(command, asynchronous=False)
    return UserResponse(**user_to_dict(get_user(user_id)))


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
async def get_products() -> list[ProductResponse]:
    return [ProductResponse(**product_to_dict(product)) for product in list_products()]


@product_router.get("/{product_id}", response_model=ProductResponse, responses=_NOT_FOUND)
async def get_product_by_id(product_id: str) -> ProductResponse:
    return ProductResponse(**product_to_dict(get_product(product_id)))


@product_router.post("", status_code=201, response_model=ProductResponse, responses={400: {"model": ErrorResponse}})
async def add_product(body: CreateProductRequest) -> ProductResponse:
    command = AddProduct(name=body.name, price=body.price, stock=body.stock)
    product_id = current_domain.process(command, asynchronous=False)
    return ProductResponse(**product_to_dict(get_product(product_id)))


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse, responses=_REJECTED)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    command = CreateOrder(
        user_id=body.user_id,
        items=json.dumps([item.model_dump() for item in body.items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return OrderResponse(**get_order(order_id))


@order_router.get("", response_model=list[OrderResponse])
async def get_orders() -> list[OrderResponse]:
    return [OrderResponse(**order) for order in list_orders()]


@order_router.get("/user/{user_id}", response_model=list[OrderResponse])
async def get_orders_by_user(user_id: str) -> list[OrderResponse]:
    return [OrderResponse(**order) for order in list_orders_for_user(user_id)]


@order_router.get("/{order_id}", response_model=OrderResponse, responses=_NOT_FOUND)
async def get_order_by_id(order_id: str) -> OrderResponse:
    return OrderResponse(**get_order(order_id))


@order_router.patch("/{order_id}/confirm", response_model=OrderResponse, responses=_REJECTED)
async def confirm_order(order_id: str) -> OrderResponse:
    current_domain.process(ConfirmOrder(order_id=order_id), asynchronous=False)
    return OrderResponse(**get_order(order_id))


@order_router.patch("/{order_id}/ship", response_model=OrderResponse, responses=_REJECTED)
async def ship_order(order_id: str) -> OrderResponse:
    current_domain.process(ShipOrder(order_id=order_id), asynchronous=False)
    return OrderResponse(**get_order(order_id))


@order_router.patch("/{order_id}/cancel", response_model=OrderResponse, responses=_REJECTED)
async def cancel_order(order_id: str) -> OrderResponse:
    current_domain.process(CancelOrder(order_id=order_id), asynchronous=False)
    return OrderResponse(**get_order(order_id))
