from typing import Optional


class StorageError(Exception):
    """Сбой хранилища: соединение, неожиданная ошибка БД"""

    def __init__(self, operation: str, entity: str, cause: Optional[BaseException] = None):
        self.operation = operation
        self.entity = entity
        self.cause = cause
        message = f"{operation} failed for {entity}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConstraintViolation(StorageError):
    """Нарушение ограничения уникальности или ссылочной целостности"""


class EmptyCartError(Exception):
    """Попытка оформить заказ из пустой корзины"""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"Cart of user {user_id} is empty")


class InvalidOrderStatus(ValueError):
    """Статус не входит в жизненный цикл заказа"""

    def __init__(self, status):
        self.status = status
        super().__init__(f"Unknown order status: {status!r}")
