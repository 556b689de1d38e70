# app/repositories/order_repo.py
from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.order import Order, OrderItem


class OrderRepository:
    """
    Data access layer for orders and order_items.

    NOTE:
      - No commits here; order creation is a multi-step transaction.
        The service is responsible for calling session.commit().
    """

    # ---- Orders ----

    def count(self, session: Session, status: str | None = None) -> int:
        stmt = select(func.count()).select_from(Order)
        if status:
            stmt = stmt.where(Order.status == status)
        value = session.exec(stmt).one()
        return int(value or 0)

    def list_all(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 10,
        status: str | None = None,
    ) -> list[Order]:
        stmt = select(Order)
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = (
            stmt.order_by(col(Order.created_at).desc(), col(Order.id).desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def get_by_id(self, session: Session, order_id: int) -> Order | None:
        return session.get(Order, order_id)

    def create_order(self, session: Session, order: Order) -> Order:
        """
        Insert an Order without committing, but ensure id is populated.
        """
        session.add(order)
        session.flush()  # Assign PK
        session.refresh(order)
        return order

    def update_order(self, session: Session, order: Order) -> Order:
        session.add(order)
        session.flush()
        session.refresh(order)
        return order

    def delete_order(self, session: Session, order: Order) -> None:
        for item in self.list_items_for_order(session, order.id):
            session.delete(item)
        session.delete(order)
        session.flush()

    # ---- Order items ----

    def list_items_for_order(
        self,
        session: Session,
        order_id: int,
    ) -> list[OrderItem]:
        stmt = (
            select(OrderItem)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        return list(session.exec(stmt).all())

    def list_items_for_orders(
        self,
        session: Session,
        order_ids: list[int],
    ) -> dict[int, list[OrderItem]]:
        grouped: dict[int, list[OrderItem]] = {oid: [] for oid in order_ids}
        if not order_ids:
            return grouped
        stmt = (
            select(OrderItem)
            .where(col(OrderItem.order_id).in_(order_ids))
            .order_by(OrderItem.order_id, OrderItem.id)
        )
        for item in session.exec(stmt).all():
            grouped[item.order_id].append(item)
        return grouped

    def create_items(
        self,
        session: Session,
        items: list[OrderItem],
    ) -> list[OrderItem]:
        session.add_all(items)
        session.flush()
        for item in items:
            session.refresh(item)
        return items
