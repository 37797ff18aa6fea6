from typing import List
from uuid import UUID

from sqlmodel import Session, select

from ..core.database import commit, delete, fetch_all, fetch_one
from ..core.utils import format_price
from ..models.Order import Order, OrderCreate

def create_order_items(session: Session, shop_name: str, order: OrderCreate) -> List[Order]:
    """
    Stores every line of an order in a single commit.
    """
    items = [
        Order(
            shop_name=shop_name,
            order_id=order.order_id,
            order_day=item.order_day.isoformat(),
            product_name=item.product_name,
            product_price=format_price(item.product_price),
            amount=item.amount,
            status=item.status,
        )
        for item in order.orders
    ]
    commit(session, *items)
    return items

def get_order_item(session: Session, shop_name: str, order_item_id: UUID) -> Order:
    statement = select(Order).where(Order.shop_name == shop_name, Order.id == order_item_id)
    return fetch_one(session, statement)

def get_orders_by_order_id(session: Session, shop_name: str, order_id: UUID) -> List[Order]:
    statement = (
        select(Order)
        .where(Order.shop_name == shop_name, Order.order_id == order_id)
        .order_by(Order.created_at)
    )
    return fetch_all(session, statement)

def get_orders_by_day(session: Session, shop_name: str, order_day: str) -> List[Order]:
    statement = (
        select(Order)
        .where(Order.shop_name == shop_name, Order.order_day == order_day)
        .order_by(Order.created_at)
    )
    return fetch_all(session, statement)

def update_order_item(session: Session, shop_name: str, order_item_id: UUID, amount: int, status: str) -> Order:
    order_item = get_order_item(session, shop_name, order_item_id)
    order_item.amount = amount
    order_item.status = status
    commit(session, order_item)
    return order_item

def delete_order_item(session: Session, shop_name: str, order_item_id: UUID) -> None:
    order_item = get_order_item(session, shop_name, order_item_id)
    delete(session, order_item)
