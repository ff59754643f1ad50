"""Wishlist API package."""

from printeez.api.wishlist.routes import router

__all__ = ["router"]
