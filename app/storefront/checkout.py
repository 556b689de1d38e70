# app/storefront/checkout.py
import logging

from app.schemas.base import CamelModel
from app.schemas.order import OrderCreate, OrderItemCreate, OrderRead
from app.storefront.cart import Cart
from app.storefront.client import StorefrontClient

logger = logging.getLogger(__name__)


class CheckoutError(Exception):
    """Raised when the cart cannot be turned into an order."""


class CustomerDetails(CamelModel):
    """
    Contact fields collected by the checkout form.

    All required; values are sent as typed (no format checks).
    """

    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str


def build_order_request(cart: Cart, customer: CustomerDetails) -> OrderCreate:
    """
    Translate the cart into an order-creation payload.

    Each line carries the quantity and the price snapshotted in the cart,
    and the total is the cart's computed total.
    """
    if not cart.items:
        raise CheckoutError("Cart is empty")

    return OrderCreate(
        customer_name=customer.customer_name,
        customer_email=customer.customer_email,
        customer_phone=customer.customer_phone,
        customer_address=customer.customer_address,
        items=[
            OrderItemCreate(product_id=item.id, quantity=item.quantity, price=item.price)
            for item in cart.items
        ],
        total_amount=cart.total_amount,
    )


def checkout(cart: Cart, customer: CustomerDetails, client: StorefrontClient) -> OrderRead:
    """
    Place an order for the cart contents and clear the cart on success.

    Raises:
        CheckoutError: the cart is empty (nothing is sent).
        httpx.HTTPStatusError: the order API rejected the request;
            the cart is left as it was.
    """
    payload = build_order_request(cart, customer)
    order = client.create_order(payload)
    cart.clear()
    logger.info(f"Order placed successfully! Order ID: {order.id}")
    return order
