import logging
from typing import List, Optional

from sqlalchemy import select, delete

from ..models.category import Category
from ..models.menu_item import MenuItem
from ..schemas.category import CategoryCreate, CategoryUpdate
from ..schemas.menu_item import MenuItemCreate, MenuItemUpdate
from .base import BaseService

logger = logging.getLogger(__name__)


class MenuService(BaseService):
    """Категории и блюда меню"""

    # Категории

    def list_categories(self) -> List[Category]:
        """Все категории по sort_order, при равенстве в порядке создания"""
        with self._storage_errors("list_categories", "category"):
            query = select(Category).order_by(Category.sort_order.asc(), Category.id.asc())
            return list(self.db.execute(query).scalars().all())

    def get_category(self, category_id: int) -> Optional[Category]:
        with self._storage_errors("get_category", "category"):
            return self.db.get(Category, category_id)

    def create_category(self, category_data: CategoryCreate) -> Category:
        with self._storage_errors("create_category", "category"):
            category = Category(**category_data.model_dump())
            self.db.add(category)
            self.db.commit()
            self.db.refresh(category)

        logger.info(f"✅ Category {category.id} created")
        return category

    def update_category(self, category_id: int, updates: CategoryUpdate) -> Optional[Category]:
        with self._storage_errors("update_category", "category"):
            category = self.db.get(Category, category_id)
            if not category:
                logger.warning(f"⚠️ Category {category_id} not found for update")
                return None

            for field, value in updates.model_dump(exclude_unset=True).items():
                setattr(category, field, value)

            self.db.commit()
            self.db.refresh(category)

        logger.info(f"✅ Category {category_id} updated")
        return category

    def delete_category(self, category_id: int) -> bool:
        """Удалить категорию; блюда категории не затрагиваются"""
        with self._storage_errors("delete_category", "category"):
            result = self.db.execute(delete(Category).where(Category.id == category_id))
            self.db.commit()

        if result.rowcount > 0:
            logger.info(f"🗑️ Category {category_id} deleted")
            return True
        logger.warning(f"⚠️ Category {category_id} not found for deletion")
        return False

    # Блюда

    def list_menu_items(self, category_id: Optional[int] = None) -> List[MenuItem]:
        """Блюда по sort_order; доступность не фильтруется"""
        with self._storage_errors("list_menu_items", "menu_item"):
            query = select(MenuItem)
            if category_id is not None:
                query = query.where(MenuItem.category_id == category_id)
            query = query.order_by(MenuItem.sort_order.asc(), MenuItem.id.asc())
            return list(self.db.execute(query).scalars().all())

    def get_menu_item(self, item_id: int) -> Optional[MenuItem]:
        with self._storage_errors("get_menu_item", "menu_item"):
            return self.db.get(MenuItem, item_id)

    def create_menu_item(self, item_data: MenuItemCreate) -> MenuItem:
        with self._storage_errors("create_menu_item", "menu_item"):
            item = MenuItem(**item_data.model_dump())
            self.db.add(item)
            self.db.commit()
            self.db.refresh(item)

        logger.info(f"✅ Menu item {item.id} created in category {item.category_id}")
        return item

    def update_menu_item(self, item_id: int, updates: MenuItemUpdate) -> Optional[MenuItem]:
        with self._storage_errors("update_menu_item", "menu_item"):
            item = self.db.get(MenuItem, item_id)
            if not item:
                logger.warning(f"⚠️ Menu item {item_id} not found for update")
                return None

            for field, value in updates.model_dump(exclude_unset=True).items():
                setattr(item, field, value)

            self.db.commit()
            self.db.refresh(item)

        logger.info(f"✅ Menu item {item_id} updated")
        return item

    def delete_menu_item(self, item_id: int) -> bool:
        with self._storage_errors("delete_menu_item", "menu_item"):
            result = self.db.execute(delete(MenuItem).where(MenuItem.id == item_id))
            self.db.commit()

        if result.rowcount > 0:
            logger.info(f"🗑️ Menu item {item_id} deleted")
            return True
        logger.warning(f"⚠️ Menu item {item_id} not found for deletion")
        return False
