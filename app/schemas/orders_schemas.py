from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from app.constants.order_limits import MAX_ITEM_QUANTITY
from app.models.order import OrderStatus, OrderType, PaymentMethod
from app.schemas.base import CamelModel
from app.schemas.product_schemas import ProductResponse
from app.schemas.user_schemas import UserResponse


# ---------- REQUESTS ----------

class CreateOrderItem(CamelModel):
    product_id: int
    quantity: int = Field(ge=1, le=MAX_ITEM_QUANTITY)


class CreateOrderRequest(CamelModel):
    items: List[CreateOrderItem] = Field(min_length=1)
    payment_method: PaymentMethod
    order_type: OrderType
    delivery_address: Optional[str] = Field(default=None, max_length=250)


class UpdateStatusRequest(CamelModel):
    status: OrderStatus


# ---------- RESPONSES ----------

class OrderItemResponse(CamelModel):
    id: int
    quantity: int
    price_at_time: Decimal
    product: Optional[ProductResponse] = None


class OrderResponse(CamelModel):
    id: int
    order_number: str
    status: OrderStatus
    payment_method: PaymentMethod
    order_type: OrderType
    total_amount: Decimal
    delivery_address: Optional[str] = None
    created_at: datetime
    user: Optional[UserResponse] = None
    items: List[OrderItemResponse]
