import os

# Модули приложения создают engine при импорте
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_DEMO_DATA", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from restaurant_service.database import Base, get_db
from restaurant_service.main import app
from restaurant_service.schemas.category import CategoryCreate
from restaurant_service.schemas.menu_item import MenuItemCreate
from restaurant_service.schemas.user import UserCreate
from restaurant_service.services import UserService, MenuService, CartService, OrderService


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_service(db):
    return UserService(db)


@pytest.fixture
def menu_service(db):
    return MenuService(db)


@pytest.fixture
def cart_service(db):
    return CartService(db)


@pytest.fixture
def order_service(db):
    return OrderService(db, delivery_time_minutes=30)


@pytest.fixture
def user(user_service):
    return user_service.create_user(UserCreate(telegram_id="555000111", first_name="Дилшод"))


@pytest.fixture
def category(menu_service):
    return menu_service.create_category(CategoryCreate(name="Супы", sort_order=1))


@pytest.fixture
def make_menu_item(menu_service, category):
    def _make(name="Шурпа", price="40000", **kwargs):
        data = {"category_id": category.id, "name": name, "price": price}
        data.update(kwargs)
        return menu_service.create_menu_item(MenuItemCreate(**data))
    return _make


@pytest.fixture
def file_session_factory(tmp_path):
    """Файловая SQLite: у каждой сессии своё соединение, как у параллельных запросов"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def file_menu(file_session_factory):
    """Пользователь и два блюда в файловой базе: (user_id, soup_id, tea_id)"""
    with file_session_factory() as session:
        user = UserService(session).create_user(UserCreate(telegram_id="900100200", first_name="Бахтиёр"))
        menu_service = MenuService(session)
        category = menu_service.create_category(CategoryCreate(name="Супы"))
        soup = menu_service.create_menu_item(MenuItemCreate(category_id=category.id, name="Шурпа", price="40000"))
        tea = menu_service.create_menu_item(MenuItemCreate(category_id=category.id, name="Чай", price="12000"))
        return user.id, soup.id, tea.id
