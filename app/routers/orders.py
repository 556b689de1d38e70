# app/routers/orders.py
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.database import get_session
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.common import MessageRead
from app.schemas.order import (
    OrderCreate,
    OrderPage,
    OrderRead,
    OrderStatusUpdate,
)
from app.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])

order_repo = OrderRepository()
product_repo = ProductRepository()
service = OrderService(order_repo, product_repo)


# -------- Checkout --------


@router.post("", response_model=OrderRead)
def create_order(
    payload: OrderCreate,
    session: Session = Depends(get_session),
):
    """
    Create an order from the storefront cart.
    """
    return service.create_order(session, payload)


# -------- Admin endpoints --------


@router.get("", response_model=OrderPage)
def list_orders(
    session: Session = Depends(get_session),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    status: str | None = None,
):
    """
    List orders, newest first, optionally filtered by status.
    """
    return service.list_orders(
        session, page=page, limit=limit, status_filter=status or None
    )


@router.get("/{order_id}", response_model=OrderRead)
def get_order(
    order_id: int,
    session: Session = Depends(get_session),
):
    """
    Get an order with its items.
    """
    return service.get_order(session, order_id)


@router.put("/{order_id}", response_model=OrderRead)
def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    session: Session = Depends(get_session),
):
    """
    Set the order status.

    Any of pending, confirmed, processing, shipped, delivered, cancelled
    is accepted regardless of the current status.
    """
    return service.update_status(session, order_id, payload)


@router.delete("/{order_id}", response_model=MessageRead)
def delete_order(
    order_id: int,
    session: Session = Depends(get_session),
):
    """
    Delete an order and its items.
    """
    service.delete_order(session, order_id)
    return MessageRead(message="Order deleted successfully")
