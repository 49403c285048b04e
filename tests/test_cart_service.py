import threading
from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from restaurant_service.exceptions import ConstraintViolation, StorageError
from restaurant_service.models.cart import Cart
from restaurant_service.services import cart_service as cart_service_module
from restaurant_service.services.cart_service import CartService


@pytest.fixture(params=["upsert", "update_first"])
def merge_strategy(request, monkeypatch):
    # "update_first" проверяет путь UPDATE + INSERT для диалектов без upsert
    if request.param == "update_first":
        monkeypatch.setattr(cart_service_module, "_UPSERT_INSERTS", {})
    return request.param


def test_add_same_item_twice_merges_quantities(db, cart_service, user, make_menu_item, merge_strategy):
    item = make_menu_item()

    cart_service.add_to_cart(user.id, item.id, 2)
    merged = cart_service.add_to_cart(user.id, item.id, 3)

    assert merged.quantity == 5
    assert db.query(Cart).filter(Cart.user_id == user.id).count() == 1
    lines = cart_service.get_cart_items(user.id)
    assert len(lines) == 1
    assert lines[0].quantity == 5


def test_add_to_cart_keeps_notes_unless_replaced(cart_service, user, make_menu_item, merge_strategy):
    item = make_menu_item()

    cart_service.add_to_cart(user.id, item.id, 1, notes="без лука")
    assert cart_service.add_to_cart(user.id, item.id, 1).notes == "без лука"
    assert cart_service.add_to_cart(user.id, item.id, 1, notes="острое").notes == "острое"


def test_different_items_get_separate_rows(cart_service, user, make_menu_item):
    first = make_menu_item(name="Шурпа")
    second = make_menu_item(name="Мастава")

    cart_service.add_to_cart(user.id, first.id, 1)
    cart_service.add_to_cart(user.id, second.id, 4)

    lines = cart_service.get_cart_items(user.id)
    assert [(line.menu_item.name, line.quantity) for line in lines] == [("Шурпа", 1), ("Мастава", 4)]


def test_cart_lines_show_current_menu_price(cart_service, menu_service, user, make_menu_item):
    from restaurant_service.schemas.menu_item import MenuItemUpdate

    item = make_menu_item(price="40000")
    cart_service.add_to_cart(user.id, item.id, 2)
    menu_service.update_menu_item(item.id, MenuItemUpdate(price="42000"))

    line = cart_service.get_cart_items(user.id)[0]
    assert line.menu_item.price == Decimal("42000")
    assert cart_service.get_cart_total(user.id) == Decimal("84000.00")


def test_get_cart_summary(cart_service, user, make_menu_item):
    cart_service.add_to_cart(user.id, make_menu_item(name="Шурпа", price="40000").id, 2)
    cart_service.add_to_cart(user.id, make_menu_item(name="Чай", price="12000.50").id, 1)

    summary = cart_service.get_cart(user.id)

    assert summary.total_items == 3
    assert summary.total_amount == Decimal("92000.50")
    assert len(summary.items) == 2


def test_update_cart_item_sets_quantity(cart_service, user, make_menu_item):
    line = cart_service.add_to_cart(user.id, make_menu_item().id, 2)

    updated = cart_service.update_cart_item(line.id, 7)

    assert updated.quantity == 7
    assert cart_service.update_cart_item(9999, 1) is None


def test_remove_from_cart(cart_service, user, make_menu_item):
    line = cart_service.add_to_cart(user.id, make_menu_item().id, 1)

    assert cart_service.remove_from_cart(line.id) is True
    assert cart_service.remove_from_cart(line.id) is False
    assert cart_service.get_cart_items(user.id) == []


def test_clear_cart(cart_service, user, make_menu_item):
    cart_service.add_to_cart(user.id, make_menu_item(name="Шурпа").id, 1)
    cart_service.add_to_cart(user.id, make_menu_item(name="Чай").id, 1)

    assert cart_service.clear_cart(user.id) is True
    assert cart_service.get_cart_items(user.id) == []


def test_clear_empty_cart_succeeds_and_touches_nothing(db, cart_service, user, user_service, make_menu_item):
    from restaurant_service.schemas.user import UserCreate

    other = user_service.create_user(UserCreate(telegram_id="777", first_name="Сосед"))
    cart_service.add_to_cart(other.id, make_menu_item().id, 3)

    assert cart_service.clear_cart(user.id) is True
    assert db.query(Cart).count() == 1


def test_cart_hides_lines_of_deleted_menu_items(cart_service, menu_service, user, make_menu_item):
    kept = make_menu_item(name="Шурпа")
    removed = make_menu_item(name="Сезонный суп")
    cart_service.add_to_cart(user.id, kept.id, 1)
    cart_service.add_to_cart(user.id, removed.id, 1)

    menu_service.delete_menu_item(removed.id)

    assert [line.item_id for line in cart_service.get_cart_items(user.id)] == [kept.id]


def _add_concurrently(session_factory, user_id, item_id, quantities):
    barrier = threading.Barrier(len(quantities))

    def add(quantity):
        with session_factory() as session:
            barrier.wait()
            return CartService(session).add_to_cart(user_id, item_id, quantity).quantity

    with ThreadPoolExecutor(max_workers=len(quantities)) as pool:
        return list(pool.map(add, quantities))


def test_concurrent_adds_sum_quantities(file_session_factory, file_menu, merge_strategy):
    user_id, soup_id, _ = file_menu
    with file_session_factory() as session:
        CartService(session).add_to_cart(user_id, soup_id, 1)

    _add_concurrently(file_session_factory, user_id, soup_id, [2, 3, 4, 5])

    with file_session_factory() as session:
        rows = session.query(Cart).filter(Cart.user_id == user_id).all()
        assert [(row.item_id, row.quantity) for row in rows] == [(soup_id, 15)]


def test_concurrent_first_adds_leave_one_row(file_session_factory, file_menu, merge_strategy):
    user_id, soup_id, _ = file_menu

    _add_concurrently(file_session_factory, user_id, soup_id, [2, 3])

    with file_session_factory() as session:
        rows = session.query(Cart).filter(Cart.user_id == user_id).all()
        assert [(row.item_id, row.quantity) for row in rows] == [(soup_id, 5)]


def test_update_first_merge_reports_lost_insert_race(monkeypatch, cart_service, user, make_menu_item):
    monkeypatch.setattr(cart_service_module, "_UPSERT_INSERTS", {})
    item = make_menu_item()
    cart_service.add_to_cart(user.id, item.id, 2)
    # Вторая вставка, не увидевшая строку при UPDATE
    monkeypatch.setattr(cart_service, "_increment", lambda *args, **kwargs: False)

    with pytest.raises(ConstraintViolation) as exc_info:
        cart_service.add_to_cart(user.id, item.id, 3)

    assert exc_info.value.operation == "add_to_cart"
    assert [line.quantity for line in cart_service.get_cart_items(user.id)] == [2]


def test_cart_quantity_never_drops_below_one(cart_service, user, make_menu_item, merge_strategy):
    item = make_menu_item()

    with pytest.raises(ConstraintViolation):
        cart_service.add_to_cart(user.id, item.id, 0)

    line = cart_service.add_to_cart(user.id, item.id, 2)
    with pytest.raises(ConstraintViolation):
        cart_service.add_to_cart(user.id, item.id, -2)
    with pytest.raises(ConstraintViolation):
        cart_service.update_cart_item(line.id, 0)

    assert [line.quantity for line in cart_service.get_cart_items(user.id)] == [2]


def test_storage_failure_is_wrapped_and_rolled_back(db, cart_service, user_service, user):
    db.execute(text("DROP TABLE carts"))
    db.commit()

    with pytest.raises(StorageError) as exc_info:
        cart_service.get_cart_items(user.id)

    error = exc_info.value
    assert not isinstance(error, ConstraintViolation)
    assert (error.operation, error.entity) == ("get_cart_items", "cart")
    assert isinstance(error.cause, OperationalError)
    # Сессия откатилась и снова пригодна к работе
    assert user_service.get_user_by_telegram_id("555000111").first_name == "Дилшод"
