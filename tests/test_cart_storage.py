import json

import pytest

from app.storefront.cart import Cart, CartItem
from app.storefront.cart_storage import LocalCartStorage

from conftest import make_product


@pytest.fixture(name="storage")
def storage_fixture(tmp_path):
    return LocalCartStorage(path=str(tmp_path / "cart.json"), key="darimac-cart")


def test_load_without_file_returns_none(storage):
    assert storage.load() is None


def test_round_trip_preserves_lines(storage):
    items = [
        CartItem(id=1, name="Keyboard", price=4500.5, image="https://img/k.png", quantity=2),
        CartItem(id=2, name="Mouse", price=1200, quantity=1),
    ]

    storage.save(items)

    assert storage.load() == items


def test_saved_format_is_plain_json_array(storage):
    storage.save([CartItem(id=3, name="Pad", price=10, quantity=4)])

    data = json.loads(storage.path.read_text())
    assert data == {"darimac-cart": [{"id": 3, "name": "Pad", "price": 10.0, "quantity": 4}]}


def test_other_keys_are_preserved(storage):
    storage.path.write_text(json.dumps({"theme": "dark"}))

    storage.save([CartItem(id=1, name="A", price=1)])

    data = json.loads(storage.path.read_text())
    assert data["theme"] == "dark"
    assert len(data["darimac-cart"]) == 1


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"darimac-cart": "oops"}),
        json.dumps({"darimac-cart": [{"id": "x"}]}),
        json.dumps({"darimac-cart": [{"id": 1, "name": "A", "price": 1, "quantity": 0}]}),
        json.dumps(["not", "a", "dict"]),
    ],
)
def test_malformed_data_is_discarded(storage, content):
    storage.path.write_text(content)

    assert storage.load() is None
    assert Cart(storage=storage).items == []


def test_cart_seeds_from_storage(storage):
    storage.save(
        [
            CartItem(id=1, name="A", price=100, quantity=2),
            CartItem(id=2, name="B", price=50, quantity=1),
        ]
    )

    cart = Cart(storage=storage)

    assert [i.id for i in cart.items] == [1, 2]
    assert cart.total_items == 3
    assert cart.total_amount == 250


def test_every_mutation_is_persisted(storage):
    cart = Cart(storage=storage)

    cart.add(make_product(1, 100))
    assert [i.quantity for i in storage.load()] == [1]

    cart.add(make_product(1, 100))
    assert [i.quantity for i in storage.load()] == [2]

    cart.set_quantity(1, 5)
    assert [i.quantity for i in storage.load()] == [5]

    cart.clear()
    assert storage.load() == []


def test_reload_reproduces_equivalent_cart(storage):
    cart = Cart(storage=storage)
    cart.add(make_product(1, 19.99, name="Headset", image="https://img/h.png"))
    cart.add(make_product(2, 5))
    cart.set_quantity(2, 3)

    reloaded = Cart(storage=storage)

    assert reloaded.items == cart.items
    assert reloaded.total_amount == cart.total_amount


def test_clear_removes_entry(storage):
    storage.save([CartItem(id=1, name="A", price=1)])

    storage.clear()

    assert storage.load() is None
    assert not storage.path.exists()


def test_unwritable_storage_keeps_cart_in_memory(tmp_path):
    storage = LocalCartStorage(path=str(tmp_path / "missing" / "cart.json"))
    cart = Cart(storage=storage)

    cart.add(make_product(1, 100))
    cart.add(make_product(2, 50))
    cart.set_quantity(1, 3)

    assert [(i.id, i.quantity) for i in cart.items] == [(1, 3), (2, 1)]
    assert cart.total_amount == 350
    assert not storage.path.exists()

    cart.clear()
    assert cart.items == []


def test_clear_on_unwritable_storage_does_not_raise(tmp_path):
    storage = LocalCartStorage(path=str(tmp_path / "missing" / "cart.json"))

    storage.clear()

    assert storage.load() is None
