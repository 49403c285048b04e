from .user import User
from .category import Category
from .menu_item import MenuItem
from .cart import Cart
from .order import Order, OrderStatus, DeliveryType, PaymentMethod
from .order_item import OrderItem

__all__ = [
    "User",
    "Category",
    "MenuItem",
    "Cart",
    "Order",
    "OrderStatus",
    "DeliveryType",
    "PaymentMethod",
    "OrderItem",
]
