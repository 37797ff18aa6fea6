from datetime import datetime, timezone
from uuid import UUID, uuid4

from pydantic import constr
from sqlmodel import Field, SQLModel

# ==========================================
# SQLModel (Database Entity + Base Pydantic)
# ==========================================
class User(SQLModel, table=True):
    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, nullable=False)
    hashed_password: str = Field(nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

# ==========================================
# Pydantic Models (DTOs)
# ==========================================

# Properties to receive via API on creation
class UserCreate(SQLModel):
    username: constr(pattern=r"^[a-zA-Z0-9]+$")
    password: constr(min_length=8)

# Properties to receive via API on login
class LoginRequest(SQLModel):
    username: constr(pattern=r"^[a-zA-Z0-9]+$")
    password: constr(min_length=8)

# Properties to return via API
class UserResponse(SQLModel):
    id: UUID
    username: str
    created_at: datetime

class LoginResponse(SQLModel):
    access_token: str
    user: UserResponse
