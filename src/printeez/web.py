"""FastAPI application factory.

The domain must already be initialized; ``src/app.py`` does that for the
served application and the test suite does it once per session.
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from printeez.domain import printeez
from printeez.shared.api import register_error_handlers
from printeez.utils.logging import bind_request


def create_app() -> FastAPI:
    app = FastAPI(
        title="Printeez API",
        description="Print-on-demand apparel store: catalogue, accounts, carts, wishlists and orders",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def domain_context_middleware(request: Request, call_next):
        """Push the Printeez domain context and tag log lines with the request."""
        bind_request(
            request_id=request.headers.get("x-request-id") or uuid4().hex[:12],
            method=request.method,
            path=request.url.path,
        )
        with printeez.domain_context():
            response = await call_next(request)
        return response

    from printeez.api.cart import router as cart_router
    from printeez.api.catalogue import router as product_router
    from printeez.api.identity import router as user_router
    from printeez.api.ordering import router as order_router
    from printeez.api.wishlist import router as wishlist_router

    app.include_router(user_router)
    app.include_router(product_router)
    app.include_router(cart_router)
    app.include_router(wishlist_router)
    app.include_router(order_router)

    register_error_handlers(app)

    @app.get("/health")
    async def health():
        return JSONResponse(content={"status": "ok", "domain": printeez.name})

    return app
