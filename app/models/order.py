# app/models/order.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Order(SQLModel, table=True):
    """
    Customer order placed from the storefront checkout.

    Columns:
      - id, customer_name, customer_email, customer_phone,
        customer_address, total_amount, status, created_at, updated_at
    """

    __tablename__ = "orders"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    customer_name: str = Field(
        description="Name of the customer",
    )
    customer_email: str = Field(
        description="Contact email (format is not checked)",
    )
    customer_phone: str = Field(
        description="Contact phone number",
    )
    customer_address: str = Field(
        description="Delivery address",
    )

    # As sent by the client at checkout
    total_amount: float = Field(
        description="Order total",
    )

    # pending | confirmed | processing | shipped | delivered | cancelled
    status: str = Field(
        default="pending",
        index=True,
        description="Order status lifecycle",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Creation timestamp (UTC)",
    )

    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last modification timestamp (UTC)",
    )


class OrderItem(SQLModel, table=True):
    """
    Line item inside an order.

    Columns:
      - id, order_id, product_id, quantity, price
    """

    __tablename__ = "order_items"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    order_id: int = Field(
        foreign_key="orders.id",
        index=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        index=True,
    )

    quantity: int = Field(
        gt=0,
        description="Quantity ordered (>=1)",
    )

    # Snapshot from the cart, independent of the current product price
    price: float = Field(
        description="Unit price at time of order",
    )
