# app/routers/products.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.common import MessageRead
from app.schemas.product import (
    ProductCreate,
    ProductPage,
    ProductRead,
    ProductUpdate,
)
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Storefront endpoints --------


@router.get("", response_model=ProductPage)
def list_products(
    session: Session = Depends(get_session),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=12, ge=1),
    search: str = "",
    category: str = "",
):
    """
    List products, newest first.

    - `search` matches a substring of name or description.
    - `category=all` (or empty) disables the category filter.
    """
    return service.list_products(
        session, page=page, limit=limit, search=search, category=category
    )


@router.get("/categories", response_model=list[str])
def list_categories(session: Session = Depends(get_session)):
    """
    Distinct product categories, prefixed with `all`.
    """
    return service.list_categories(session)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single product with its images.
    """
    return service.get_product(session, product_id)


# -------- Admin endpoints --------


@router.post("", response_model=ProductRead)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product with its ordered image list.
    """
    return service.create_product(session, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Update a product.

    The image list is replaced with `images`; always resend the full set.
    """
    return service.update_product(session, product_id, payload)


@router.delete("/{product_id}", response_model=MessageRead)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete a product and its images.
    """
    service.delete_product(session, product_id)
    return MessageRead(message="Product deleted successfully")
