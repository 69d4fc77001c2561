from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum

from app.models.base import utc_now

if TYPE_CHECKING:
    from app.models.order import Order


class UserRole(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    # subject of the verified upstream identity token
    external_uid: str = Field(unique=True, index=True)
    email: str = Field(unique=True)
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    role: UserRole = Field(default=UserRole.USER)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    orders: List["Order"] = Relationship(back_populates="user")
