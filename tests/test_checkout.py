import httpx
import pytest

from app.storefront.cart import Cart
from app.storefront.cart_storage import LocalCartStorage
from app.storefront.checkout import (
    CheckoutError,
    CustomerDetails,
    build_order_request,
    checkout,
)
from app.storefront.client import StorefrontClient
from app.schemas.product import ProductCreate

from conftest import make_product


@pytest.fixture(name="customer")
def customer_fixture():
    return CustomerDetails(
        customer_name="Nimal Silva",
        customer_email="nimal@example.com",
        customer_phone="0711111111",
        customer_address="5 Temple Road, Kandy",
    )


def test_build_order_request_snapshots_cart_lines(customer):
    cart = Cart()
    cart.add(make_product(1, 100))
    cart.add(make_product(1, 100))
    cart.add(make_product(2, 50))

    payload = build_order_request(cart, customer)

    assert [(i.product_id, i.quantity, i.price) for i in payload.items] == [
        (1, 2, 100),
        (2, 1, 50),
    ]
    assert payload.total_amount == 250
    assert payload.customer_name == "Nimal Silva"


def test_empty_cart_is_rejected_before_any_request(customer):
    class NoCallsClient:
        def create_order(self, payload):
            raise AssertionError("must not be called")

    with pytest.raises(CheckoutError):
        checkout(Cart(), customer, NoCallsClient())


def test_checkout_creates_order_and_clears_cart(storefront: StorefrontClient, customer, tmp_path):
    headset = storefront.create_product(
        ProductCreate(
            name="Headset",
            price=3000,
            category="audio",
            images=["https://img/headset.png"],
        )
    )
    webcam = storefront.create_product(ProductCreate(name="Webcam", price=4500.5, category="video"))

    storage = LocalCartStorage(path=str(tmp_path / "cart.json"))
    cart = Cart(storage=storage)
    cart.add(storefront.get_product(headset.id))
    cart.add(storefront.get_product(headset.id))
    cart.add(storefront.get_product(webcam.id))
    assert cart.items[0].image == "https://img/headset.png"

    order = checkout(cart, customer, storefront)

    assert order.status == "pending"
    assert len(order.items) == 2
    assert order.total_amount == pytest.approx(10500.5)
    assert cart.items == []
    assert cart.total_amount == 0
    assert storage.load() == []

    fetched = storefront.get_order(order.id)
    assert [(i.product_id, i.quantity) for i in fetched.items] == [(headset.id, 2), (webcam.id, 1)]


def test_cart_price_snapshot_survives_catalog_change(storefront: StorefrontClient, customer):
    mouse = storefront.create_product(ProductCreate(name="Mouse", price=1000, category="mice"))
    cart = Cart()
    cart.add(storefront.get_product(mouse.id))

    storefront.client.put(f"/api/products/{mouse.id}", json={"price": 1500})
    order = checkout(cart, customer, storefront)

    assert order.items[0].price == 1000
    assert order.total_amount == 1000


def test_failed_checkout_keeps_cart(customer):
    class RejectingClient:
        def create_order(self, payload):
            request = httpx.Request("POST", "http://testserver/api/orders")
            response = httpx.Response(500, request=request)
            raise httpx.HTTPStatusError("server error", request=request, response=response)

    cart = Cart()
    cart.add(make_product(1, 100))

    with pytest.raises(httpx.HTTPStatusError):
        checkout(cart, customer, RejectingClient())

    assert [i.id for i in cart.items] == [1]
    assert cart.total_amount == 100


def test_client_admin_flow(storefront: StorefrontClient, customer):
    product = storefront.create_product(ProductCreate(name="Cable", price=5, category="cables"))
    cart = Cart()
    cart.add(product)
    order = checkout(cart, customer, storefront)

    updated = storefront.update_order_status(order.id, "delivered")
    listing = storefront.list_orders(status="delivered")

    assert updated.status == "delivered"
    assert [o.id for o in listing.orders] == [order.id]
    assert listing.pagination.total_orders == 1
    assert storefront.list_categories() == ["all", "cables"]
    assert storefront.list_products(category="cables").pagination.total_products == 1

    assert storefront.delete_order(order.id) == "Order deleted successfully"
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        storefront.get_order(order.id)
    assert exc_info.value.response.status_code == 404
