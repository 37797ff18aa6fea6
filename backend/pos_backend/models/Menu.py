from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

class Catalog(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

class Menu(SQLModel, table=True):
    __tablename__ = "menus"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", index=True)
    shop_name: str = Field(index=True)
    product_id: UUID = Field(foreign_key="products.id")
    product_name: str
    product_price: Decimal = Field(max_digits=12, decimal_places=2)
    catalog: Catalog
    description: str = ""
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

class MenuItemCreate(SQLModel):
    user_id: UUID
    shop_name: str
    product_id: UUID
    product_name: str = Field(min_length=1)
    product_price: Decimal = Field(ge=0)
    catalog: Catalog
    description: str

class MenuItemUpdate(SQLModel):
    user_id: UUID
    shop_name: str
    product_name: str = Field(min_length=1)
    product_price: Decimal = Field(ge=0)
    catalog: Catalog
    description: str

class MenuItemDelete(SQLModel):
    user_id: UUID
    shop_name: str
