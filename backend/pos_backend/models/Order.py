from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pydantic import conlist
from sqlmodel import Field, SQLModel

class Order(SQLModel, table=True):
    """One line of an order; every line of the same order shares order_id."""
    __tablename__ = "orders"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    shop_name: str = Field(index=True)
    order_id: UUID = Field(index=True)
    order_day: str = Field(index=True)  # YYYY-MM-DD
    product_name: str
    product_price: Decimal = Field(max_digits=12, decimal_places=2)
    amount: int
    status: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class OrderItemCreate(SQLModel):
    shop_name: Optional[str] = None
    order_day: date
    product_name: str = Field(min_length=1)
    product_price: Decimal = Field(ge=0)
    amount: int = Field(gt=0)
    status: str = Field(min_length=1)

class OrderCreate(SQLModel):
    order_id: UUID
    orders: conlist(OrderItemCreate, min_length=1)

class OrderItemUpdate(SQLModel):
    shop_name: str
    amount: int = Field(gt=0)
    status: str = Field(min_length=1)

class OrderItemDelete(SQLModel):
    shop_name: str
