"""FastAPI endpoints for Ordering."""

from fastapi import APIRouter, Depends, HTTPException, Query
from protean.utils.globals import current_domain

from printeez import config
from printeez.api.ordering.schemas import (
    OrderListResponse,
    OrderResponse,
    PlaceOrderRequest,
    UpdateStatusRequest,
)
from printeez.order.order import OrderStatus
from printeez.order.placement import place_order
from printeez.order.repository import get_order, list_all_orders, list_orders_for_user, page_size
from printeez.order.status import UpdateOrderStatus
from printeez.shared.api import admin_user, current_user
from printeez.user.user import User

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: PlaceOrderRequest, user: User = Depends(current_user)) -> OrderResponse:
    order = place_order(
        user_id=str(user.id),
        items=[line.model_dump() for line in body.items],
        address=body.address,
    )
    return OrderResponse.from_order(order)


@router.get("", response_model=OrderListResponse)
async def my_orders(
    status: OrderStatus | None = None,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    user: User = Depends(current_user),
) -> OrderListResponse:
    orders, total = list_orders_for_user(
        str(user.id), status=status.value if status else None, page=page, limit=limit
    )
    return OrderListResponse(
        orders=[OrderResponse.from_order(o) for o in orders],
        page=page,
        limit=page_size(limit, config.USER_ORDERS_PAGE_SIZE, config.USER_ORDERS_MAX_PAGE_SIZE),
        total=total,
    )


# Declared before /{order_id} so "admin" is not read as an order id
@router.get("/admin", response_model=OrderListResponse, dependencies=[Depends(admin_user)])
async def all_orders(
    status: OrderStatus | None = None,
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
) -> OrderListResponse:
    orders, total = list_all_orders(status=status.value if status else None, page=page, limit=limit)
    return OrderListResponse(
        orders=[OrderResponse.from_order(o) for o in orders],
        page=page,
        limit=page_size(limit, config.ADMIN_ORDERS_PAGE_SIZE, config.ADMIN_ORDERS_MAX_PAGE_SIZE),
        total=total,
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def order_detail(order_id: str, user: User = Depends(current_user)) -> OrderResponse:
    order = get_order(order_id)
    if str(order.user_id) != str(user.id) and not user.is_admin:
        raise HTTPException(status_code=403, detail="Access denied")
    return OrderResponse.from_order(order)


@router.put("/{order_id}/status", response_model=OrderResponse, dependencies=[Depends(admin_user)])
async def update_order_status(order_id: str, body: UpdateStatusRequest) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return OrderResponse.from_order(get_order(order_id))
