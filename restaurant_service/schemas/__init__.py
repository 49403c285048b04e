from .user import User, UserCreate
from .category import Category, CategoryCreate, CategoryUpdate
from .menu_item import MenuItem, MenuItemCreate, MenuItemUpdate
from .cart import CartItem, CartItemCreate, CartItemUpdate, CartLine, CartSummary
from .order import Order, OrderCreate, OrderStatusUpdate, CheckoutRequest
from .order_item import OrderItem, OrderItemCreate

__all__ = [
    "User",
    "UserCreate",
    "Category",
    "CategoryCreate",
    "CategoryUpdate",
    "MenuItem",
    "MenuItemCreate",
    "MenuItemUpdate",
    "CartItem",
    "CartItemCreate",
    "CartItemUpdate",
    "CartLine",
    "CartSummary",
    "Order",
    "OrderCreate",
    "OrderStatusUpdate",
    "CheckoutRequest",
    "OrderItem",
    "OrderItemCreate",
]
