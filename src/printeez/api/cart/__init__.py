"""Cart API package."""

from printeez.api.cart.routes import router

__all__ = ["router"]
