"""Catalogue API package."""

from printeez.api.catalogue.routes import router

__all__ = ["router"]
