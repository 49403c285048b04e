import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import ConstraintViolation, StorageError

logger = logging.getLogger(__name__)


class BaseService:
    """Общая основа сервисов хранилища: сессия и перевод ошибок БД"""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _storage_errors(self, operation: str, entity: str):
        """Откатывает сессию и переводит ошибки SQLAlchemy в StorageError"""
        try:
            yield
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"❌ Constraint violated in {operation} ({entity}): {e.orig}")
            raise ConstraintViolation(operation, entity, e) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"❌ Storage failure in {operation} ({entity}): {e}")
            raise StorageError(operation, entity, e) from e
        except Exception:
            self.db.rollback()
            raise
