"""Pydantic request/response schemas for the order management API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class CreateUserRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Jane Doe", "email": "jane.doe@example.com"}]}}

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=254)


class CreateProductRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Laptop Dell XPS 13", "price": 1200.0, "stock": 15}]}}

    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., ge=0)
    stock: int = Field(0, ge=0)


class OrderItemRequest(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "items": [{"product_id": "f0e1d2c3-b4a5-6789-0abc-def123456789", "quantity": 2}],
                }
            ]
        }
    }

    user_id: str
    items: list[OrderItemRequest] = Field(default_factory=list)


# --- Response Schemas ---


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    created_at: str | None = None


class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    stock: int
    created_at: str | None = None


class OrderItemResponse(BaseModel):
    id: str
    order_id: str
    product_id: str
    product: ProductResponse | None = None
    quantity: int
    price: float


class OrderResponse(BaseModel):
    id: str
    user_id: str
    user: UserResponse | None = None
    total: float
    status: str
    items: list[OrderItemResponse] = []
    created_at: str | None = None
    updated_at: str | None = None


class ErrorResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"error": "OrderNotFoundError", "messages": {"order_id": ["Order 42 not found"]}}]
        }
    }

    error: str
    messages: dict | list | str
