from datetime import date
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlmodel import Session

from ..auth.service import AuthPayload, Username, require_owner
from ..core.database import StoreError, get_session
from ..core.responses import RespondMessage, store_http_exception, text_response
from ..core.utils import today
from ..models.Order import Order, OrderCreate, OrderItemDelete, OrderItemUpdate
from .service import (
    create_order_items,
    delete_order_item,
    get_orders_by_day,
    get_orders_by_order_id,
    update_order_item,
)

router = APIRouter(tags=["orders"])

@router.post("/{shop_name}/order", response_model=List[Order])
async def create_order(shop_name: str, order: OrderCreate, session: Session = Depends(get_session)):
    """
    Place an order at a shop. Open to customers, no token required.
    """
    for item in order.orders:
        if item.shop_name is not None and item.shop_name != shop_name:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"order item for shop '{item.shop_name}' sent to '{shop_name}'",
            )
    try:
        return create_order_items(session, shop_name, order)
    except StoreError as e:
        raise store_http_exception(e)

# Unauthenticated on purpose: customers look up their own order by its order_id.
@router.get("/{shop_name}/order/{order_id}", response_model=List[Order])
async def get_order(shop_name: str, order_id: UUID, session: Session = Depends(get_session)):
    try:
        return get_orders_by_order_id(session, shop_name, order_id)
    except StoreError as e:
        raise store_http_exception(e)

@router.get("/users/{username}/orders", response_model=List[Order])
async def list_orders_by_day(
    payload: AuthPayload,
    username: Username,
    order_day: Optional[date] = None,
    session: Session = Depends(get_session),
):
    """
    All order lines of the caller's shop for one day (today by default).
    """
    require_owner(payload, username)
    day = order_day.isoformat() if order_day else today()
    try:
        return get_orders_by_day(session, username, day)
    except StoreError as e:
        raise store_http_exception(e)

@router.patch("/users/{username}/orders/{order_item_id}", response_model=Order)
async def update_existing_order_item(
    payload: AuthPayload,
    username: Username,
    order_item_id: UUID,
    update: OrderItemUpdate,
    session: Session = Depends(get_session),
):
    require_owner(payload, username, update.shop_name)
    try:
        return update_order_item(session, update.shop_name, order_item_id, update.amount, update.status)
    except StoreError as e:
        raise store_http_exception(e)

@router.delete("/users/{username}/orders/{order_item_id}", response_model=RespondMessage)
async def delete_existing_order_item(
    payload: AuthPayload,
    username: Username,
    order_item_id: UUID,
    body: OrderItemDelete = Body(...),
    session: Session = Depends(get_session),
):
    require_owner(payload, username, body.shop_name)
    try:
        delete_order_item(session, body.shop_name, order_item_id)
    except StoreError as e:
        raise store_http_exception(e)
    return text_response("delete successfully")
