"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from printeez.product.product import ProductCategory, ProductSize

# --- Request Schemas ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Neon Alley Tee",
                    "description": "Glow-in-the-dark street art print on heavyweight cotton.",
                    "category": "urban",
                    "price": 2499.0,
                    "image_url": "https://cdn.printeez.com/neon-alley.png",
                    "sizes": {"Small": 10, "Large": 4},
                }
            ]
        }
    }

    name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: ProductCategory
    price: float = Field(..., gt=0)
    image_url: str | None = Field(None, max_length=500)
    sizes: dict[ProductSize, int] = Field(..., min_length=1)


class UpdateProductRequest(BaseModel):
    name: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: ProductCategory | None = None
    price: float | None = Field(None, gt=0)
    image_url: str | None = Field(None, max_length=500)


class RestockRequest(BaseModel):
    stock: int = Field(..., ge=0)


# --- Response Schemas ---


class ProductIdResponse(BaseModel):
    product_id: str


class SizeStockResponse(BaseModel):
    size: str
    stock: int


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    category: str
    price: float
    image_url: str | None = None
    sizes: list[SizeStockResponse]
    sales_count: int
    created_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            product_id=str(product.id),
            name=product.name,
            description=product.description,
            category=product.category,
            price=product.price,
            image_url=product.image_url,
            sizes=[SizeStockResponse(size=s.size, stock=s.stock) for s in product.sizes],
            sales_count=product.sales_count or 0,
            created_at=product.created_at,
        )


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    page: int
    limit: int
    total: int


class StatusResponse(BaseModel):
    status: str = "ok"


class MessageResponse(BaseModel):
    message: str
