from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

class Product(SQLModel, table=True):
    __tablename__ = "products"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    name: str
    price: Decimal = Field(max_digits=12, decimal_places=2)
    description: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class ProductCreate(SQLModel):
    user_id: UUID
    username: str
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    description: str

class ProductUpdate(SQLModel):
    user_id: UUID
    name: str = Field(min_length=1)
    price: Decimal = Field(ge=0)
    description: Optional[str] = None

class ProductDelete(SQLModel):
    user_id: UUID
