"""FastAPI endpoints for the wishlist."""

from fastapi import APIRouter, Depends
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from printeez.api.wishlist.schemas import AddToWishlistRequest, ClearedResponse, WishlistResponse
from printeez.product.product import Product
from printeez.shared.api import current_user
from printeez.shared.errors import WishlistNotFound
from printeez.user.user import User
from printeez.wishlist.management import AddToWishlist, ClearWishlist, RemoveFromWishlist
from printeez.wishlist.wishlist import Wishlist

router = APIRouter(prefix="/wishlist", tags=["wishlist"])


def _wishlist_response(user_id) -> WishlistResponse:
    wishlist = current_domain.repository_for(Wishlist).for_user(user_id)
    if wishlist is None:
        raise WishlistNotFound()

    product_repo = current_domain.repository_for(Product)
    products = {}
    for entry in wishlist.entries:
        try:
            products[str(entry.product_id)] = product_repo.get_active(entry.product_id)
        except ObjectNotFoundError:
            continue
    return WishlistResponse.from_wishlist(wishlist, products)


@router.get("", response_model=WishlistResponse)
async def get_wishlist(user: User = Depends(current_user)) -> WishlistResponse:
    return _wishlist_response(str(user.id))


@router.post("", response_model=WishlistResponse)
async def add_to_wishlist(body: AddToWishlistRequest, user: User = Depends(current_user)) -> WishlistResponse:
    current_domain.process(AddToWishlist(user_id=str(user.id), product_id=body.product_id), asynchronous=False)
    return _wishlist_response(str(user.id))


@router.delete("/clear", response_model=ClearedResponse)
async def clear_wishlist(user: User = Depends(current_user)) -> ClearedResponse:
    current_domain.process(ClearWishlist(user_id=str(user.id)), asynchronous=False)
    return ClearedResponse(message="Wishlist cleared successfully")


@router.delete("/{product_id}", response_model=WishlistResponse)
async def remove_from_wishlist(product_id: str, user: User = Depends(current_user)) -> WishlistResponse:
    current_domain.process(RemoveFromWishlist(user_id=str(user.id), product_id=product_id), asynchronous=False)
    return _wishlist_response(str(user.id))
