"""Pydantic request/response schemas for the Cart API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from printeez.product.product import ProductSize, to_cents

# --- Request Schemas ---


class AddToCartRequest(BaseModel):
    product_id: str = Field(..., min_length=1)
    size: ProductSize
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(BaseModel):
    quantity: int = Field(..., ge=1)


class CheckoutRequest(BaseModel):
    address: str | None = None


# --- Response Schemas ---


class CartItemResponse(BaseModel):
    product_id: str
    product_name: str | None = None
    size: str
    quantity: int
    unit_price: float | None = None
    available: bool


class CartResponse(BaseModel):
    cart_id: str
    user_id: str
    items: list[CartItemResponse]
    total_amount: float
    updated_at: datetime | None = None

    @classmethod
    def from_cart(cls, cart, products) -> CartResponse:
        """Price ``cart`` from ``products``, a ``{product_id: Product}`` map of what is still on sale."""
        items = []
        total = 0.0
        for item in cart.items:
            product = products.get(str(item.product_id))
            if product is None:
                items.append(
                    CartItemResponse(
                        product_id=str(item.product_id),
                        size=item.size,
                        quantity=item.quantity,
                        available=False,
                    )
                )
                continue
            items.append(
                CartItemResponse(
                    product_id=str(item.product_id),
                    product_name=product.name,
                    size=item.size,
                    quantity=item.quantity,
                    unit_price=product.price,
                    available=True,
                )
            )
            total += product.price * item.quantity

        return cls(
            cart_id=str(cart.id),
            user_id=str(cart.user_id),
            items=items,
            total_amount=to_cents(total),
            updated_at=cart.updated_at,
        )


class ClearedResponse(BaseModel):
    message: str
