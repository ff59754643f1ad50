"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class OrderLineRequest(BaseModel):
    product_id: str = Field(..., min_length=1)
    size: str = Field(..., min_length=1, max_length=20)
    quantity: int = Field(..., ge=1)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"product_id": "0b6f6c1e-0c3e-4c55-9d5e-3f6f0a2b9c11", "size": "Large", "quantity": 2}],
                    "address": "House 12, Street 4, F-7/2, Islamabad",
                }
            ]
        }
    }

    items: list[OrderLineRequest] = Field(..., min_length=1)
    # Length and blankness are checked by the domain so they surface as InvalidAddress
    address: str | None = None


class UpdateStatusRequest(BaseModel):
    status: str


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str
    size: str
    quantity: int
    unit_price: float


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    items: list[OrderItemResponse]
    total: float
    address: str
    payment_method: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        return cls(
            order_id=str(order.id),
            user_id=str(order.user_id),
            items=[OrderItemResponse(**item) for item in order.items_snapshot()],
            total=order.total,
            address=order.address,
            payment_method=order.payment_method,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
    page: int
    limit: int
    total: int

