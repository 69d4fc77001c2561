from sqlmodel import SQLModel, Field, Relationship
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.models.base import utc_now
from app.models.order_item import OrderItem

if TYPE_CHECKING:
    from app.models.user import User


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    PREPARING = "PREPARING"
    READY_FOR_PICKUP = "READY_FOR_PICKUP"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentMethod(str, Enum):
    CASH = "CASH"
    CARD = "CARD"


class OrderType(str, Enum):
    DELIVERY = "DELIVERY"
    IN_STORE = "IN_STORE"


class Order(SQLModel, table=True):
    """
    Order aggregate root.

    Created together with its items in a single transaction. Afterwards only
    ``status`` changes; the total and the item prices are historical records.
    """

    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    # ORD-YYYYMMDD-NNNN
    order_number: str = Field(unique=True, index=True, max_length=20)

    status: OrderStatus = Field(default=OrderStatus.PENDING, index=True)
    payment_method: PaymentMethod
    order_type: OrderType

    total_amount: Decimal = Field(max_digits=10, decimal_places=2)
    delivery_address: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, index=True)

    user_id: int = Field(foreign_key="users.id", index=True)

    # relationships
    user: Optional["User"] = Relationship(back_populates="orders")
    items: List["OrderItem"] = Relationship(
        back_populates="order",
        sa_relationship_kwargs={
            "cascade": "all, delete-orphan",
            "order_by": "OrderItem.id",
        },
    )
