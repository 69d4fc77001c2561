from datetime import datetime
from decimal import Decimal
from typing import Optional

from app.schemas.base import CamelModel


class ProductResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Decimal
    is_available: bool
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime
