# app/schemas/order.py
from datetime import datetime
from typing import Literal, get_args

from pydantic import ConfigDict, Field

from app.schemas.base import CamelModel, PaginationBase
from app.schemas.product import ProductSummaryRead

OrderStatus = Literal[
    "pending",
    "confirmed",
    "processing",
    "shipped",
    "delivered",
    "cancelled",
]

ORDER_STATUSES: tuple[str, ...] = get_args(OrderStatus)


class OrderItemCreate(CamelModel):
    """
    One cart line sent at checkout.
    """

    model_config = ConfigDict(extra="forbid")

    product_id: int
    quantity: int = Field(gt=0)
    price: float


class OrderCreate(CamelModel):
    """
    Payload for creating an order from the storefront cart.

    Customer fields are required but only checked for presence:
    an empty string is accepted and the email format is not validated.

    `total_amount` and item prices are taken as sent by the client.
    """

    model_config = ConfigDict(extra="forbid")

    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    items: list[OrderItemCreate]
    total_amount: float


class OrderItemRead(CamelModel):
    """
    Representation of a single order line item.
    """

    id: int
    order_id: int
    product_id: int
    quantity: int
    price: float
    product: ProductSummaryRead | None = None


class OrderRead(CamelModel):
    """
    Full order view including items.
    """

    id: int
    customer_name: str
    customer_email: str
    customer_phone: str
    customer_address: str
    total_amount: float
    status: OrderStatus
    items: list[OrderItemRead] = []
    created_at: datetime
    updated_at: datetime


class OrderStatusUpdate(CamelModel):
    """
    Admin payload to change order status.

    Any of the six statuses may be written over any current status.
    """

    model_config = ConfigDict(extra="forbid")

    status: OrderStatus


class OrderPagination(PaginationBase):
    total_orders: int


class OrderPage(CamelModel):
    """
    Response of the admin order listing.
    """

    orders: list[OrderRead]
    pagination: OrderPagination
