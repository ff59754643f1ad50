"""HTTP plumbing shared by every router: error mapping and caller identity."""

import structlog
from fastapi import FastAPI, Header, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ObjectNotFoundError
from protean.integrations.fastapi import register_exception_handlers
from protean.utils.globals import current_domain
from starlette.exceptions import HTTPException as StarletteHTTPException

from printeez.shared.errors import OrderingInputError, OrderNotFound
from printeez.user.user import User

logger = structlog.get_logger(__name__)


def _first_schema_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    error = errors[0]
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg')}" if location else error.get("msg", "Invalid request")


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and request errors to ``{"error": message}`` responses."""
    register_exception_handlers(app)

    @app.exception_handler(OrderingInputError)
    async def ordering_input_error_handler(request: Request, exc: OrderingInputError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(OrderNotFound)
    async def order_not_found_handler(request: Request, exc: OrderNotFound):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _first_schema_error(exc)})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.error(
            "unhandled_request_error",
            method=request.method,
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


async def current_user(x_user_id: str = Header(default="")) -> User:
    """Resolve the caller from the ``X-User-Id`` header."""
    if not x_user_id:
        raise HTTPException(status_code=401, detail="Authentication required")
    try:
        return current_domain.repository_for(User).get(x_user_id)
    except ObjectNotFoundError:
        raise HTTPException(status_code=401, detail="Invalid user") from None


async def admin_user(x_user_id: str = Header(default="")) -> User:
    user = await current_user(x_user_id)
    if not user.is_admin:
        raise HTTPException(status_code=403, detail="Admin access required")
    return user
