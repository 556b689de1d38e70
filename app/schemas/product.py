# app/schemas/product.py
from datetime import datetime

from pydantic import ConfigDict, computed_field

from app.schemas.base import CamelModel, PaginationBase


class ProductImageRead(CamelModel):
    """
    Read model for gallery images.
    """

    id: int
    product_id: int
    url: str
    public_id: str | None = None
    sort_order: int = 0


class ProductCreate(CamelModel):
    """
    Payload for creating a product.

    - `price` may arrive as a string from form inputs; it is parsed as float.
    - `images` is the ordered list of image URLs for the gallery.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str | None = None
    price: float
    image: str | None = None
    images: list[str] = []
    category: str
    in_stock: bool = True


class ProductUpdate(CamelModel):
    """
    Update payload for products.

    Omitted fields are unchanged; an explicit null clears `description` or
    `image` (other fields ignore null). `images` is replace-all:
    leaving it out removes every image of the product.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    price: float | None = None
    image: str | None = None
    images: list[str] = []
    category: str | None = None
    in_stock: bool | None = None


class ProductSummaryRead(CamelModel):
    """
    Product fields embedded in order items.
    """

    id: int
    name: str
    price: float
    image: str | None = None
    category: str
    in_stock: bool


class ProductRead(CamelModel):
    """
    Product representation for clients, images included.
    """

    id: int
    name: str
    description: str | None = None
    price: float
    image: str | None = None
    images: list[ProductImageRead] = []
    category: str
    in_stock: bool
    created_at: datetime
    updated_at: datetime

    @computed_field(alias="mainImage")
    @property
    def main_image(self) -> str | None:
        """`image` if set, else the first gallery image."""
        if self.image:
            return self.image
        if self.images:
            return self.images[0].url
        return None


class ProductPagination(PaginationBase):
    total_products: int


class ProductPage(CamelModel):
    """
    Response of the catalog listing.
    """

    products: list[ProductRead]
    pagination: ProductPagination
