"""FastAPI endpoints for the Catalogue."""

import json

from fastapi import APIRouter, Depends, Query
from protean.utils.globals import current_domain

from printeez import config
from printeez.api.catalogue.schemas import (
    AddProductRequest,
    MessageResponse,
    ProductIdResponse,
    ProductListResponse,
    ProductResponse,
    RestockRequest,
    StatusResponse,
    UpdateProductRequest,
)
from printeez.product.creation import AddProduct
from printeez.product.management import DiscontinueProduct, UpdateProductDetails
from printeez.product.product import Product, ProductCategory, ProductSize
from printeez.product.stock import RestockSize
from printeez.shared.api import admin_user

router = APIRouter(prefix="/products", tags=["products"])


@router.post("", status_code=201, response_model=ProductIdResponse, dependencies=[Depends(admin_user)])
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        description=body.description,
        category=body.category.value,
        price=body.price,
        image_url=body.image_url,
        sizes=json.dumps({size.value: stock for size, stock in body.sizes.items()}),
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@router.get("", response_model=ProductListResponse)
async def list_products(
    category: ProductCategory | None = None,
    page: int = Query(1, ge=1),
    limit: int = Query(config.PRODUCTS_PAGE_SIZE, ge=1),
) -> ProductListResponse:
    limit = min(limit, config.PRODUCTS_MAX_PAGE_SIZE)
    products, total = current_domain.repository_for(Product).by_category(
        category=category.value if category else None, page=page, limit=limit
    )
    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in products],
        page=page,
        limit=limit,
        total=total,
    )


@router.get("/top-selling", response_model=list[ProductResponse])
async def top_selling_products(limit: int = Query(config.TOP_SELLING_DEFAULT, ge=1)) -> list[ProductResponse]:
    products = current_domain.repository_for(Product).top_selling(limit=min(limit, config.TOP_SELLING_MAX))
    return [ProductResponse.from_product(p) for p in products]


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    product = current_domain.repository_for(Product).get_active(product_id)
    return ProductResponse.from_product(product)


@router.put("/{product_id}", response_model=ProductResponse, dependencies=[Depends(admin_user)])
async def update_product(product_id: str, body: UpdateProductRequest) -> ProductResponse:
    repo = current_domain.repository_for(Product)
    repo.get_active(product_id)
    command = UpdateProductDetails(
        product_id=product_id,
        name=body.name,
        description=body.description,
        category=body.category.value if body.category else None,
        price=body.price,
        image_url=body.image_url,
    )
    current_domain.process(command, asynchronous=False)
    return ProductResponse.from_product(repo.get(product_id))


@router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(admin_user)])
async def delete_product(product_id: str) -> MessageResponse:
    current_domain.repository_for(Product).get_active(product_id)
    current_domain.process(DiscontinueProduct(product_id=product_id), asynchronous=False)
    return MessageResponse(message="Product deleted.")


@router.put("/{product_id}/sizes/{size}", response_model=StatusResponse, dependencies=[Depends(admin_user)])
async def restock_size(product_id: str, size: ProductSize, body: RestockRequest) -> StatusResponse:
    command = RestockSize(product_id=product_id, size=size.value, stock=body.stock)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
