"""Ordering API package."""

from printeez.api.ordering.routes import router

__all__ = ["router"]
