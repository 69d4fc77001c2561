from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.services.catalog import ProductCatalog
from app.services.order_service import OrderService
from app.services.user_service import UserService


def get_catalog(session: Session = Depends(get_session)) -> ProductCatalog:
    return ProductCatalog(session)


def get_order_service(
    session: Session = Depends(get_session),
    catalog: ProductCatalog = Depends(get_catalog),
) -> OrderService:
    return OrderService(session, catalog)


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)
