from typing import List
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ..auth.service import AuthPayload, Username, require_owner
from ..core.database import StoreError, get_session
from ..core.responses import RespondMessage, store_http_exception, text_response
from ..models.Menu import Menu, MenuItemCreate, MenuItemDelete, MenuItemUpdate
from .service import add_menu_item, delete_menu_item, get_all_menu_items, update_menu_item

router = APIRouter(tags=["menus"])

@router.get("/{shop_name}/menus", response_model=List[Menu])
async def list_menu_items(shop_name: str, session: Session = Depends(get_session)):
    """
    Public menu of a shop.
    """
    try:
        return get_all_menu_items(session, shop_name)
    except StoreError as e:
        raise store_http_exception(e)

@router.post("/users/{username}/menus", response_model=Menu)
async def add_new_menu_item(
    payload: AuthPayload,
    username: Username,
    item: MenuItemCreate,
    session: Session = Depends(get_session),
):
    require_owner(payload, username, item.shop_name, user_id=item.user_id)
    try:
        return add_menu_item(session, item)
    except StoreError as e:
        raise store_http_exception(e)

@router.patch("/users/{username}/menus/{menu_item_id}", response_model=Menu)
async def update_existing_menu_item(
    payload: AuthPayload,
    username: Username,
    menu_item_id: UUID,
    update: MenuItemUpdate,
    session: Session = Depends(get_session),
):
    require_owner(payload, username, update.shop_name, user_id=update.user_id)
    try:
        return update_menu_item(session, menu_item_id, update)
    except StoreError as e:
        raise store_http_exception(e)

@router.delete("/users/{username}/menus/{menu_item_id}", response_model=RespondMessage)
async def delete_existing_menu_item(
    payload: AuthPayload,
    username: Username,
    menu_item_id: UUID,
    body: MenuItemDelete = Body(...),
    session: Session = Depends(get_session),
):
    require_owner(payload, username, body.shop_name, user_id=body.user_id)
    try:
        delete_menu_item(session, body.user_id, body.shop_name, menu_item_id)
    except StoreError as e:
        raise store_http_exception(e)
    return text_response("delete successfully")
