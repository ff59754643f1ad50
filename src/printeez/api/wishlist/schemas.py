"""Pydantic request/response schemas for the Wishlist API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AddToWishlistRequest(BaseModel):
    product_id: str = Field(..., min_length=1)


class WishlistEntryResponse(BaseModel):
    product_id: str
    product_name: str | None = None
    price: float | None = None
    available: bool
    added_at: datetime | None = None


class WishlistResponse(BaseModel):
    wishlist_id: str
    user_id: str
    items: list[WishlistEntryResponse]
    updated_at: datetime | None = None

    @classmethod
    def from_wishlist(cls, wishlist, products) -> WishlistResponse:
        items = []
        for entry in wishlist.entries:
            product = products.get(str(entry.product_id))
            items.append(
                WishlistEntryResponse(
                    product_id=str(entry.product_id),
                    product_name=product.name if product else None,
                    price=product.price if product else None,
                    available=product is not None,
                    added_at=entry.added_at,
                )
            )
        return cls(
            wishlist_id=str(wishlist.id),
            user_id=str(wishlist.user_id),
            items=items,
            updated_at=wishlist.updated_at,
        )


class ClearedResponse(BaseModel):
    message: str
