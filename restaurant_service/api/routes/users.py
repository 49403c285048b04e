from fastapi import APIRouter, Depends, HTTPException

from ...schemas.user import User, UserCreate
from ...services.user_service import UserService
from ..dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=User)
def get_user(user_id: int, user_service: UserService = Depends(get_user_service)):
    """Получить пользователя по ID"""
    user = user_service.get_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/telegram/{telegram_id}", response_model=User)
def get_user_by_telegram_id(telegram_id: str, user_service: UserService = Depends(get_user_service)):
    """Получить пользователя по Telegram ID"""
    user = user_service.get_user_by_telegram_id(telegram_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.post("", response_model=User)
def create_user(user: UserCreate, user_service: UserService = Depends(get_user_service)):
    """Регистрация пользователя из Telegram"""
    return user_service.create_user(user)
