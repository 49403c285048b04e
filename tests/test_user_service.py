import pytest

from restaurant_service.exceptions import ConstraintViolation
from restaurant_service.schemas.user import UserCreate


def test_create_and_get_user(user_service):
    user = user_service.create_user(UserCreate(
        telegram_id="123456789",
        first_name="Алексей",
        last_name="Иванов",
        username="alexivanov",
    ))

    assert user.id is not None
    assert user.created_at is not None
    assert user_service.get_user(user.id).telegram_id == "123456789"
    assert user_service.get_user_by_telegram_id("123456789").id == user.id


def test_missing_user_is_none(user_service):
    assert user_service.get_user(999) is None
    assert user_service.get_user_by_telegram_id("nobody") is None


def test_duplicate_telegram_id_is_constraint_violation(user_service):
    user_service.create_user(UserCreate(telegram_id="42", first_name="Первый"))

    with pytest.raises(ConstraintViolation) as exc_info:
        user_service.create_user(UserCreate(telegram_id="42", first_name="Второй"))

    assert exc_info.value.operation == "create_user"
    assert exc_info.value.entity == "user"
    # Сессия после отката снова пригодна
    assert user_service.get_user_by_telegram_id("42").first_name == "Первый"
