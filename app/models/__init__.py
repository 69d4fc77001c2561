from app.models.user import User, UserRole
from app.models.product import Product
from app.models.order_item import OrderItem
from app.models.order import Order, OrderStatus, OrderType, PaymentMethod

# add ALL models here
