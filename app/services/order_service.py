# app/services/order_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.errors import persistence_guard
from app.models.order import Order, OrderItem
from app.models.product import Product
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.schemas.base import page_window
from app.schemas.order import (
    OrderCreate,
    OrderItemRead,
    OrderPage,
    OrderPagination,
    OrderRead,
    OrderStatusUpdate,
)
from app.schemas.product import ProductSummaryRead

logger = logging.getLogger(__name__)


class OrderService:
    """
    Business logic for orders.

    Responsibilities:
      - Create an order and its items from a checkout payload (one transaction)
      - Paginated admin listing with an optional status filter
      - Status updates: any known status over any current status
      - Compose order DTOs with their items and product summaries

    Totals and item prices are stored as sent by the client; nothing is
    recomputed from current product prices and stock is not touched.
    """

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ):
        self.order_repo = order_repo
        self.product_repo = product_repo

    def _get_or_404(self, session: Session, order_id: int) -> Order:
        order = self.order_repo.get_by_id(session, order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return order

    # -------- Checkout --------

    def create_order(
        self,
        session: Session,
        payload: OrderCreate,
    ) -> OrderRead:
        """
        Create an order from the storefront cart.

        Steps:
          1. Reject an empty item list.
          2. Create Order row (status='pending').
          3. Create one OrderItem per cart line (quantity + price snapshot).
          4. Commit both in one transaction and return the full order.
        """
        if not payload.items:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Order must contain at least one item",
            )

        with persistence_guard(session, "create order"):
            order = self.order_repo.create_order(
                session,
                Order(
                    customer_name=payload.customer_name,
                    customer_email=payload.customer_email,
                    customer_phone=payload.customer_phone,
                    customer_address=payload.customer_address,
                    total_amount=payload.total_amount,
                    status="pending",
                ),
            )
            items = self.order_repo.create_items(
                session,
                [
                    OrderItem(
                        order_id=order.id,
                        product_id=line.product_id,
                        quantity=line.quantity,
                        price=line.price,
                    )
                    for line in payload.items
                ],
            )
            session.commit()
            session.refresh(order)

        logger.info(f"Created order {order.id} with {len(items)} items")
        return self._build_order_dtos(session, [order], {order.id: items})[0]

    # -------- Admin operations --------

    def list_orders(
        self,
        session: Session,
        page: int = 1,
        limit: int = 10,
        status_filter: str | None = None,
    ) -> OrderPage:
        total = self.order_repo.count(session, status=status_filter)
        orders = self.order_repo.list_all(
            session,
            skip=(page - 1) * limit,
            limit=limit,
            status=status_filter,
        )
        items = self.order_repo.list_items_for_orders(session, [o.id for o in orders])

        return OrderPage(
            orders=self._build_order_dtos(session, orders, items),
            pagination=OrderPagination(
                total_orders=total,
                **page_window(page, limit, total),
            ),
        )

    def get_order(self, session: Session, order_id: int) -> OrderRead:
        order = self._get_or_404(session, order_id)
        items = self.order_repo.list_items_for_order(session, order.id)
        return self._build_order_dtos(session, [order], {order.id: items})[0]

    def update_status(
        self,
        session: Session,
        order_id: int,
        payload: OrderStatusUpdate,
    ) -> OrderRead:
        """
        Overwrite the order status.

        Only membership in the status enum is checked (by the schema);
        e.g. pending -> shipped or delivered -> pending are both accepted.
        """
        order = self._get_or_404(session, order_id)

        if order.status != payload.status:
            logger.info(f"Order {order_id} status: {order.status} -> {payload.status}")

        order.status = payload.status
        order.updated_at = datetime.now(timezone.utc)

        with persistence_guard(session, "update order"):
            self.order_repo.update_order(session, order)
            session.commit()
            session.refresh(order)

        return self.get_order(session, order_id)

    def delete_order(self, session: Session, order_id: int) -> None:
        order = self._get_or_404(session, order_id)

        with persistence_guard(session, "delete order"):
            self.order_repo.delete_order(session, order)
            session.commit()

        logger.info(f"Deleted order {order_id}")

    # -------- Helper DTO builder --------

    def _build_order_dtos(
        self,
        session: Session,
        orders: list[Order],
        items_by_order: dict[int, list[OrderItem]],
    ) -> list[OrderRead]:
        """
        Compose OrderRead DTOs, attaching a product summary to every item.
        Items whose product no longer exists get `product=None`.
        """
        product_ids = sorted(
            {it.product_id for items in items_by_order.values() for it in items}
        )
        products: dict[int, Product] = {
            p.id: p for p in self.product_repo.get_many(session, product_ids)
        }

        dtos: list[OrderRead] = []
        for order in orders:
            item_dtos: list[OrderItemRead] = []
            for it in items_by_order.get(order.id, []):
                product = products.get(it.product_id)
                item_dtos.append(
                    OrderItemRead(
                        id=it.id,
                        order_id=it.order_id,
                        product_id=it.product_id,
                        quantity=it.quantity,
                        price=it.price,
                        product=(
                            ProductSummaryRead.model_validate(product)
                            if product is not None
                            else None
                        ),
                    )
                )

            dtos.append(
                OrderRead(
                    id=order.id,
                    customer_name=order.customer_name,
                    customer_email=order.customer_email,
                    customer_phone=order.customer_phone,
                    customer_address=order.customer_address,
                    total_amount=order.total_amount,
                    status=order.status,  # Literal
                    items=item_dtos,
                    created_at=order.created_at,
                    updated_at=order.updated_at,
                )
            )
        return dtos
