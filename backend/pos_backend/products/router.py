from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends
from sqlmodel import Session

from ..auth.service import AuthPayload, Username, require_owner
from ..core.database import StoreError, get_session
from ..core.responses import RespondMessage, store_http_exception, text_response
from ..models.Product import Product, ProductCreate, ProductDelete, ProductUpdate
from .service import create_product, delete_product, get_all_products, update_product

router = APIRouter(prefix="/users/{username}/products", tags=["products"])

@router.get("", response_model=List[Product])
async def list_products(
    payload: AuthPayload,
    username: Username,
    name: Optional[str] = None,
    session: Session = Depends(get_session),
):
    require_owner(payload, username)
    try:
        return get_all_products(session, username, name=name)
    except StoreError as e:
        raise store_http_exception(e)

@router.post("", response_model=Product)
async def create_new_product(
    payload: AuthPayload,
    username: Username,
    product: ProductCreate,
    session: Session = Depends(get_session),
):
    require_owner(payload, username, product.username, user_id=product.user_id)
    try:
        return create_product(session, product.user_id, product.name, product.price, product.description)
    except StoreError as e:
        raise store_http_exception(e)

@router.patch("/{product_id}", response_model=Product)
async def update_existing_product(
    payload: AuthPayload,
    username: Username,
    product_id: UUID,
    update: ProductUpdate,
    session: Session = Depends(get_session),
):
    require_owner(payload, username, user_id=update.user_id)
    try:
        return update_product(session, update.user_id, product_id, update.name, update.price, update.description)
    except StoreError as e:
        raise store_http_exception(e)

@router.delete("/{product_id}", response_model=RespondMessage)
async def delete_existing_product(
    payload: AuthPayload,
    username: Username,
    product_id: UUID,
    body: ProductDelete = Body(...),
    session: Session = Depends(get_session),
):
    require_owner(payload, username, user_id=body.user_id)
    try:
        delete_product(session, body.user_id, product_id)
    except StoreError as e:
        raise store_http_exception(e)
    return text_response("delete successfully")
