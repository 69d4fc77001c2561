import logging
import random
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

from sqlalchemy.orm import selectinload
from sqlmodel import Session, select

from app.config import settings
from app.constants.order_limits import MAX_ITEM_QUANTITY, MAX_ORDER_AMOUNT
from app.constants.order_status import (
    INITIAL_STATUS,
    allowed_next_statuses,
    can_transition,
)
from app.database import transaction
from app.exceptions import ConflictError, InvalidRequestError, NotFoundError
from app.models.order import Order, OrderStatus, OrderType, PaymentMethod
from app.models.order_item import OrderItem
from app.models.user import User
from app.services.catalog import ProductCatalog

logger = logging.getLogger(__name__)

ORDER_NUMBER_PREFIX = "ORD"


def generate_order_number(now: Optional[datetime] = None) -> str:
    """
    Build an order number of the form ORD-YYYYMMDD-NNNN.

    Example: ORD-20251126-3847. The date part is UTC and the suffix is a
    random number in [1000, 9999].
    """
    now = now or datetime.now(timezone.utc)
    suffix = random.randint(1000, 9999)
    return f"{ORDER_NUMBER_PREFIX}-{now:%Y%m%d}-{suffix}"


def _order_query():
    return select(Order).options(
        selectinload(Order.items).selectinload(OrderItem.product),
        selectinload(Order.user),
    )


class OrderService:
    """
    Order lifecycle: creation, status transitions, cancellation and queries.

    The product catalog is passed in rather than looked up so the service only
    ever reads products through ``catalog.find_product``.
    """

    def __init__(self, session: Session, catalog: ProductCatalog):
        self.session = session
        self.catalog = catalog

    # -------------------------
    # CREATE
    # -------------------------
    def create_order(
        self,
        *,
        items: Sequence,
        payment_method: PaymentMethod,
        order_type: OrderType,
        owner: User,
        delivery_address: Optional[str] = None,
    ) -> Order:
        """
        Place an order for ``owner``.

        ``items`` is a sequence of objects exposing ``product_id`` and
        ``quantity``. Prices are read from the catalog inside the same
        transaction that writes the order, so either the order and all of its
        items are stored or nothing is.
        """
        if not items:
            raise InvalidRequestError("Order must contain at least one item.")

        address = (delivery_address or "").strip() or None
        if OrderType(order_type) == OrderType.DELIVERY and not address:
            raise InvalidRequestError(
                "Delivery address is required for DELIVERY orders."
            )

        owner_id = owner.id

        with transaction(self.session):
            total_amount = Decimal("0.00")
            order_items: List[OrderItem] = []

            for line in items:
                if line.quantity < 1:
                    raise InvalidRequestError("Quantity must be at least 1")
                if line.quantity > MAX_ITEM_QUANTITY:
                    raise InvalidRequestError(
                        f"Quantity must be at most {MAX_ITEM_QUANTITY}",
                        details={"productId": line.product_id},
                    )

                product = self.catalog.find_product(line.product_id)
                if product is None:
                    raise NotFoundError(
                        f"Product with ID {line.product_id} not found",
                        details={"productId": line.product_id},
                    )
                if not product.is_available:
                    raise InvalidRequestError(
                        f'Product "{product.name}" is not available',
                        details={"productId": product.id},
                    )

                price = Decimal(product.price)
                total_amount += price * line.quantity
                if total_amount > MAX_ORDER_AMOUNT:
                    raise InvalidRequestError(
                        f"Order total exceeds the maximum of {MAX_ORDER_AMOUNT}",
                        details={"productId": product.id},
                    )

                order_items.append(
                    OrderItem(
                        product_id=product.id,
                        quantity=line.quantity,
                        price_at_time=price,
                    )
                )

            order = Order(
                order_number=self._next_order_number(),
                status=INITIAL_STATUS,
                payment_method=PaymentMethod(payment_method),
                order_type=OrderType(order_type),
                total_amount=total_amount,
                delivery_address=address,
                user_id=owner_id,
                items=order_items,
            )
            self.session.add(order)
            self.session.flush()
            order_id = order.id
            order_number = order.order_number

        logger.info(
            f"Order {order_number} (id={order_id}) placed by user {owner_id}: "
            f"{len(order_items)} items, total {total_amount}"
        )
        return self._load(order_id)

    def _next_order_number(self) -> str:
        attempts = settings.order_number_max_attempts
        for attempt in range(1, attempts + 1):
            candidate = generate_order_number()
            taken = self.session.exec(
                select(Order.id).where(Order.order_number == candidate)
            ).first()
            if taken is None:
                return candidate
            logger.warning(
                f"Order number {candidate} already taken (attempt {attempt}/{attempts})"
            )

        raise ConflictError("Could not allocate a unique order number. Please retry.")

    # -------------------------
    # QUERIES
    # -------------------------
    def list_orders_for_user(self, user_id: int) -> List[Order]:
        return list(
            self.session.exec(
                _order_query()
                .where(Order.user_id == user_id)
                .order_by(Order.created_at.desc(), Order.id.desc())
            ).all()
        )

    def get_order(self, order_id: int, user_id: int) -> Order:
        order = self.session.exec(
            _order_query()
            .where(Order.id == order_id)
            .where(Order.user_id == user_id)
        ).first()

        if not order:
            raise NotFoundError(f"Order with ID {order_id} not found.")
        return order

    def list_all_orders(self) -> List[Order]:
        return list(
            self.session.exec(
                _order_query().order_by(Order.created_at.desc(), Order.id.desc())
            ).all()
        )

    def _load(self, order_id: int) -> Order:
        order = self.session.exec(
            _order_query()
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        ).first()

        if not order:
            raise NotFoundError(f"Order with ID {order_id} not found.")
        return order

    # -------------------------
    # STATUS
    # -------------------------
    def update_status(self, order_id: int, new_status: OrderStatus) -> Order:
        """
        Admin transition, not scoped to an owner.

        The row is locked and re-read before the transition check so two
        concurrent updates cannot both pass it against the same old status.
        """
        new_status = OrderStatus(new_status)

        with transaction(self.session):
            order = self.session.get(
                Order, order_id, with_for_update=True, populate_existing=True
            )
            if not order:
                raise NotFoundError(f"Order with ID {order_id} not found.")

            current = OrderStatus(order.status)

            if not can_transition(current, new_status):
                allowed = allowed_next_statuses(current)
                allowed_text = ", ".join(s.value for s in allowed) or "none"
                raise InvalidRequestError(
                    f"Cannot transition from {current.value} to {new_status.value}. "
                    f"Allowed transitions: {allowed_text}.",
                    details={
                        "currentStatus": current.value,
                        "requestedStatus": new_status.value,
                        "allowedStatuses": [s.value for s in allowed],
                    },
                )

            order.status = new_status
            self.session.add(order)

        logger.info(f"Order {order_id} status {current.value} -> {new_status.value}")
        return self._load(order_id)

    def cancel_order(self, order_id: int, user_id: int) -> Order:
        """Customer cancellation; only the owner may cancel and only while PENDING."""
        with transaction(self.session):
            order = self.session.exec(
                select(Order)
                .where(Order.id == order_id)
                .where(Order.user_id == user_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            ).first()

            if not order:
                raise NotFoundError(f"Order with ID {order_id} not found.")

            if order.status != OrderStatus.PENDING:
                raise InvalidRequestError(
                    f"Cannot cancel order with status {OrderStatus(order.status).value}. "
                    "Only PENDING orders can be cancelled.",
                )

            order.status = OrderStatus.CANCELLED
            self.session.add(order)

        logger.info(f"Order {order_id} cancelled by user {user_id}")
        return self._load(order_id)
