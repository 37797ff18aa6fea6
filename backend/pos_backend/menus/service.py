from typing import List
from uuid import UUID

from sqlmodel import Session, select

from ..core.database import commit, delete, fetch_all, fetch_one
from ..core.utils import format_price
from ..models.Menu import Menu, MenuItemCreate, MenuItemUpdate

def add_menu_item(session: Session, item: MenuItemCreate) -> Menu:
    menu_item = Menu(
        user_id=item.user_id,
        shop_name=item.shop_name,
        product_id=item.product_id,
        product_name=item.product_name,
        product_price=format_price(item.product_price),
        catalog=item.catalog,
        description=item.description,
    )
    commit(session, menu_item)
    return menu_item

def get_menu_item(session: Session, user_id: UUID, shop_name: str, menu_item_id: UUID) -> Menu:
    statement = select(Menu).where(
        Menu.user_id == user_id,
        Menu.shop_name == shop_name,
        Menu.id == menu_item_id,
    )
    return fetch_one(session, statement)

def get_all_menu_items(session: Session, shop_name: str) -> List[Menu]:
    statement = select(Menu).where(Menu.shop_name == shop_name).order_by(Menu.catalog, Menu.created_at)
    return fetch_all(session, statement)

def update_menu_item(session: Session, menu_item_id: UUID, update: MenuItemUpdate) -> Menu:
    menu_item = get_menu_item(session, update.user_id, update.shop_name, menu_item_id)
    menu_item.product_name = update.product_name
    menu_item.product_price = format_price(update.product_price)
    menu_item.catalog = update.catalog
    menu_item.description = update.description
    commit(session, menu_item)
    return menu_item

def delete_menu_item(session: Session, user_id: UUID, shop_name: str, menu_item_id: UUID) -> None:
    menu_item = get_menu_item(session, user_id, shop_name, menu_item_id)
    delete(session, menu_item)
