from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.user import UserRole
from app.schemas.base import CamelModel


class UserResponse(CamelModel):
    id: int
    email: str
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    role: UserRole
    created_at: datetime
    updated_at: datetime


class UpdateUserRequest(CamelModel):
    name: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = None
    address: Optional[str] = Field(default=None, max_length=250)
