from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import CheckConstraint
from typing import Optional, TYPE_CHECKING
from decimal import Decimal

from app.models.product import Product

if TYPE_CHECKING:
    from app.models.order import Order


class OrderItem(SQLModel, table=True):
    __tablename__ = "order_items"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    # assigned on flush through the Order.items relationship
    order_id: Optional[int] = Field(
        default=None,
        foreign_key="orders.id",
        ondelete="CASCADE",
        nullable=False,
        index=True,
    )
    product_id: int = Field(foreign_key="products.id", index=True)

    quantity: int
    price_at_time: Decimal = Field(max_digits=10, decimal_places=2)

    order: Optional["Order"] = Relationship(back_populates="items")
    product: Optional["Product"] = Relationship()
