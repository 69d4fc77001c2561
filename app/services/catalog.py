from typing import List, Optional

from sqlmodel import Session, select

from app.exceptions import NotFoundError
from app.models.product import Product


class ProductCatalog:
    """Read-only view over the product table."""

    def __init__(self, session: Session):
        self.session = session

    def find_product(self, product_id: int) -> Optional[Product]:
        return self.session.get(Product, product_id)

    def get_product(self, product_id: int) -> Product:
        product = self.find_product(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID {product_id} not found.")
        return product

    def list_available(self) -> List[Product]:
        return list(
            self.session.exec(
                select(Product)
                .where(Product.is_available == True)  # noqa: E712
                .order_by(Product.id)
            ).all()
        )
