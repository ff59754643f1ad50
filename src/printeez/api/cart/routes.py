"""FastAPI endpoints for the shopping cart."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from printeez.api.cart.schemas import (
    AddToCartRequest,
    CartResponse,
    CheckoutRequest,
    ClearedResponse,
    UpdateCartItemRequest,
)
from printeez.api.ordering.schemas import OrderResponse
from printeez.cart.cart import Cart
from printeez.cart.management import AddToCart, ClearCart, RemoveFromCart, UpdateCartQuantity, checkout_cart
from printeez.product.product import Product, ProductSize
from printeez.shared.api import current_user
from printeez.shared.errors import CartNotFound
from printeez.user.user import User

router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_response(user_id) -> CartResponse:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    if cart is None:
        raise CartNotFound()

    product_repo = current_domain.repository_for(Product)
    products = {}
    for item in cart.items:
        try:
            products[str(item.product_id)] = product_repo.get_active(item.product_id)
        except ObjectNotFoundError:
            continue
    return CartResponse.from_cart(cart, products)


@router.get("", response_model=CartResponse)
async def get_cart(user: User = Depends(current_user)) -> CartResponse:
    return _cart_response(str(user.id))


@router.post("", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, user: User = Depends(current_user)) -> CartResponse:
    command = AddToCart(
        user_id=str(user.id),
        product_id=body.product_id,
        size=body.size.value,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(str(user.id))


@router.post("/checkout", status_code=201, response_model=OrderResponse)
async def checkout(body: CheckoutRequest, user: User = Depends(current_user)) -> OrderResponse:
    order = checkout_cart(str(user.id), body.address)
    return OrderResponse.from_order(order)


# Declared before /{product_id}/{size} so "clear" is never read as a product id
@router.delete("/clear", response_model=ClearedResponse)
async def clear_cart(user: User = Depends(current_user)) -> ClearedResponse:
    current_domain.process(ClearCart(user_id=str(user.id)), asynchronous=False)
    return ClearedResponse(message="Cart cleared successfully")


@router.put("/{product_id}/{size}", response_model=CartResponse)
async def update_cart_item(
    product_id: str,
    size: ProductSize,
    body: UpdateCartItemRequest,
    user: User = Depends(current_user),
) -> CartResponse:
    command = UpdateCartQuantity(
        user_id=str(user.id),
        product_id=product_id,
        size=size.value,
        quantity=body.quantity,
    )
    current_domain.process(command, asynchronous=False)
    return _cart_response(str(user.id))


@router.delete("/{product_id}/{size}", response_model=CartResponse)
async def remove_cart_item(product_id: str, size: ProductSize, user: User = Depends(current_user)) -> CartResponse:
    command = RemoveFromCart(user_id=str(user.id), product_id=product_id, size=size.value)
    current_domain.process(command, asynchronous=False)
    return _cart_response(str(user.id))
