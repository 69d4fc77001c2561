import logging

from fastapi import FastAPI
from app.database import create_db_and_tables
from app.config import settings
from app.exception_handlers import register_exception_handlers
from app.routes import (
    admin_orders,
    health,
    orders,
    products,
    users,
)

from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local
    if settings.env == "local":
        create_db_and_tables()
        logger.info("Local environment: tables created")
    yield

app = FastAPI(title="Food Orders API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

register_exception_handlers(app)

app.include_router(users.router, prefix="/users", tags=["Users"])
app.include_router(products.router, prefix="/products", tags=["Products"])
app.include_router(orders.router, prefix="/orders", tags=["Orders"])
app.include_router(admin_orders.router, prefix="/admin", tags=["Admin Orders"])
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get("/")
def root():
    return {
        "user_endpoints": [
            "/users/me"
        ],
        "product_endpoints": [
            "/products", "/products/{product_id}"
        ],
        "order_endpoints": [
            "/orders", "/orders/{order_id}"
        ],
        "admin_order_endpoints": [
            "/admin/orders", "/admin/orders/{order_id}/status"
        ],
        "health": [
            "/health/check"
        ]
    }
