from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import SQLModel

class TokenPayload(SQLModel):
    """Identity claim embedded in every access token."""
    id: UUID  # Random claim ID
    username: str  # Subject
    user_id: Optional[UUID] = None  # Account ID of the subject, set at login
    issued_at: datetime
    expired_at: datetime
