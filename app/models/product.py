# app/models/product.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Columns:
      - id, name, description, price, image, category,
        in_stock, created_at, updated_at
    """

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        index=True,
        description="Display name of the product",
    )

    description: str | None = Field(
        default=None,
        description="Optional long description",
    )

    price: float = Field(
        description="Unit price",
    )

    image: str | None = Field(
        default=None,
        description="Primary image URL",
    )

    category: str = Field(
        index=True,
        description="Free-text category used by the storefront filter",
    )

    in_stock: bool = Field(
        default=True,
        description="Whether the product can currently be bought",
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


class ProductImage(SQLModel, table=True):
    """
    Gallery image owned by a product.

    Rows are deleted and recreated wholesale whenever the product is updated.
    """

    __tablename__ = "product_images"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        index=True,
        description="FK to products.id",
    )

    url: str = Field(
        description="Public URL of the hosted image",
    )

    public_id: str | None = Field(
        default=None,
        description="Identifier of the asset at the image host",
    )

    sort_order: int = Field(
        default=0,
        ge=0,
        description="Ordering index within the gallery",
    )
