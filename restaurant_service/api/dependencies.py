from fastapi import Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.user_service import UserService
from ..services.menu_service import MenuService
from ..services.cart_service import CartService
from ..services.order_service import OrderService


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency для получения UserService"""
    return UserService(db)


def get_menu_service(db: Session = Depends(get_db)) -> MenuService:
    """Dependency для получения MenuService"""
    return MenuService(db)


def get_cart_service(db: Session = Depends(get_db)) -> CartService:
    """Dependency для получения CartService"""
    return CartService(db)


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency для получения OrderService"""
    return OrderService(db)
