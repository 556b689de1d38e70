# app/repositories/product_repo.py
from sqlalchemy import func, or_
from sqlmodel import Session, col, select

from app.models.product import Product, ProductImage


class ProductRepository:
    """
    Data access layer for Product & ProductImage.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    # ----- Products -----

    @staticmethod
    def _apply_filters(stmt, search: str = "", category: str = ""):
        """
        Substring search on name/description, exact category match.
        `all` (or empty) means no category filter.
        """
        if search:
            stmt = stmt.where(
                or_(
                    col(Product.name).contains(search, autoescape=True),
                    col(Product.description).contains(search, autoescape=True),
                )
            )
        if category and category != "all":
            stmt = stmt.where(Product.category == category)
        return stmt

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def get_many(self, session: Session, product_ids: list[int]) -> list[Product]:
        if not product_ids:
            return []
        stmt = select(Product).where(col(Product.id).in_(product_ids))
        return list(session.exec(stmt).all())

    def count(self, session: Session, search: str = "", category: str = "") -> int:
        stmt = self._apply_filters(
            select(func.count()).select_from(Product), search, category
        )
        value = session.exec(stmt).one()
        return int(value or 0)

    def list_products(
        self,
        session: Session,
        skip: int = 0,
        limit: int = 12,
        search: str = "",
        category: str = "",
    ) -> list[Product]:
        stmt = self._apply_filters(select(Product), search, category)
        stmt = (
            stmt.order_by(col(Product.created_at).desc(), col(Product.id).desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def list_categories(self, session: Session) -> list[str]:
        stmt = select(Product.category).distinct().order_by(Product.category)
        return list(session.exec(stmt).all())

    def create(self, session: Session, product: Product) -> Product:
        """Insert without committing; the service owns the transaction."""
        session.add(product)
        session.flush()  # Assign PK
        session.refresh(product)
        return product

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.flush()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.flush()

    # ----- Product images -----

    def list_images_for_product(
        self,
        session: Session,
        product_id: int,
    ) -> list[ProductImage]:
        stmt = (
            select(ProductImage)
            .where(ProductImage.product_id == product_id)
            .order_by(ProductImage.sort_order, ProductImage.id)
        )
        return list(session.exec(stmt).all())

    def list_images_for_products(
        self,
        session: Session,
        product_ids: list[int],
    ) -> dict[int, list[ProductImage]]:
        """
        Batch-load galleries for a page of products, keyed by product id.
        """
        grouped: dict[int, list[ProductImage]] = {pid: [] for pid in product_ids}
        if not product_ids:
            return grouped
        stmt = (
            select(ProductImage)
            .where(col(ProductImage.product_id).in_(product_ids))
            .order_by(ProductImage.product_id, ProductImage.sort_order, ProductImage.id)
        )
        for image in session.exec(stmt).all():
            grouped[image.product_id].append(image)
        return grouped

    def create_images(
        self,
        session: Session,
        images: list[ProductImage],
    ) -> list[ProductImage]:
        session.add_all(images)
        session.flush()
        for image in images:
            session.refresh(image)
        return images

    def delete_images_for_product(
        self,
        session: Session,
        product_id: int,
    ) -> None:
        for image in self.list_images_for_product(session, product_id):
            session.delete(image)
        session.flush()
