from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from sqlmodel import Session, select

from ..core.database import commit, delete, fetch_all, fetch_one
from ..core.utils import format_price
from ..models.Product import Product
from ..models.User import User

def create_product(session: Session, user_id: UUID, name: str, price: Decimal, description: str) -> Product:
    product = Product(
        user_id=user_id,
        name=name,
        price=format_price(price),
        description=description,
    )
    commit(session, product)
    return product

def get_product(session: Session, user_id: UUID, product_id: UUID) -> Product:
    statement = select(Product).where(Product.user_id == user_id, Product.id == product_id)
    return fetch_one(session, statement)

def get_all_products(session: Session, username: str, name: Optional[str] = None) -> List[Product]:
    statement = select(Product).join(User, User.id == Product.user_id).where(User.username == username)
    if name is not None:
        statement = statement.where(Product.name == name)
    return fetch_all(session, statement.order_by(Product.created_at))

def update_product(
    session: Session,
    user_id: UUID,
    product_id: UUID,
    name: str,
    price: Decimal,
    description: Optional[str] = None,
) -> Product:
    product = get_product(session, user_id, product_id)
    product.name = name
    product.price = format_price(price)
    if description is not None:
        product.description = description
    commit(session, product)
    return product

def delete_product(session: Session, user_id: UUID, product_id: UUID) -> None:
    product = get_product(session, user_id, product_id)
    delete(session, product)
