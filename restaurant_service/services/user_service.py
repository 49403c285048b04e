import logging
from typing import Optional

from sqlalchemy import select

from ..models.user import User
from ..schemas.user import UserCreate
from .base import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService):
    """Пользователи, импортированные из Telegram"""

    def get_user(self, user_id: int) -> Optional[User]:
        with self._storage_errors("get_user", "user"):
            return self.db.get(User, user_id)

    def get_user_by_telegram_id(self, telegram_id: str) -> Optional[User]:
        with self._storage_errors("get_user_by_telegram_id", "user"):
            return self.db.execute(
                select(User).where(User.telegram_id == telegram_id)
            ).scalar_one_or_none()

    def create_user(self, user_data: UserCreate) -> User:
        """Создать пользователя; повторный telegram_id -> ConstraintViolation"""
        with self._storage_errors("create_user", "user"):
            user = User(**user_data.model_dump())
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)

        logger.info(f"✅ User {user.id} created for telegram id {user.telegram_id}")
        return user
