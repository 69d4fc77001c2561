"""
Shared pytest fixtures.

Every test runs against a fresh in-memory SQLite database. The API client
shares that database through a ``get_session`` dependency override.
"""

import os
from decimal import Decimal

# Settings are read at import time
os.environ["ENV"] = "test"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["DATABASE_URL_OVERRIDE"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.models import Product, User, UserRole
from app.services.catalog import ProductCatalog
from app.services.order_service import OrderService
from app.utils.token import create_access_token


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def engine():
    """In-memory SQLite engine shared by every connection of a test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


# ============================================================================
# DATA FIXTURES
# ============================================================================


def _add(session, obj):
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj


@pytest.fixture
def customer(session) -> User:
    return _add(
        session,
        User(external_uid="uid-customer", email="ana@example.com", name="Ana"),
    )


@pytest.fixture
def other_customer(session) -> User:
    return _add(
        session,
        User(external_uid="uid-other", email="luis@example.com", name="Luis"),
    )


@pytest.fixture
def admin(session) -> User:
    return _add(
        session,
        User(
            external_uid="uid-admin",
            email="admin@example.com",
            name="Admin",
            role=UserRole.ADMIN,
        ),
    )


@pytest.fixture
def chicken(session) -> Product:
    return _add(
        session,
        Product(name="Whole Roast Chicken", price=Decimal("59.90"), is_available=True),
    )


@pytest.fixture
def fries(session) -> Product:
    return _add(
        session,
        Product(name="Fries", price=Decimal("12.50"), is_available=True),
    )


@pytest.fixture
def sold_out(session) -> Product:
    return _add(
        session,
        Product(name="Chicha Morada", price=Decimal("8.00"), is_available=False),
    )


@pytest.fixture
def order_service(session) -> OrderService:
    return OrderService(session, ProductCatalog(session))


# ============================================================================
# AUTH HELPERS
# ============================================================================


def make_auth_headers(user: User) -> dict:
    token = create_access_token(
        {"sub": user.external_uid, "email": user.email, "name": user.name}
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def customer_headers(customer) -> dict:
    return make_auth_headers(customer)


@pytest.fixture
def other_headers(other_customer) -> dict:
    return make_auth_headers(other_customer)


@pytest.fixture
def admin_headers(admin) -> dict:
    return make_auth_headers(admin)


@pytest.fixture
def auth_headers():
    return make_auth_headers
