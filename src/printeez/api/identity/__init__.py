"""Identity API package."""

from printeez.api.identity.routes import router

__all__ = ["router"]
