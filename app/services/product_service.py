# app/services/product_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.errors import persistence_guard
from app.models.product import Product, ProductImage
from app.repositories.product_repo import ProductRepository
from app.schemas.base import page_window
from app.schemas.product import (
    ProductCreate,
    ProductImageRead,
    ProductPage,
    ProductPagination,
    ProductRead,
    ProductUpdate,
)

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for Product & ProductImage.

    Responsibilities:
      - paginated, filtered catalog listing
      - create/update with ordered image galleries (update is replace-all)
      - delete a product together with its images
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Helpers -----

    def _get_or_404(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    @staticmethod
    def _build_images(product_id: int, urls: list[str]) -> list[ProductImage]:
        return [
            ProductImage(product_id=product_id, url=url, sort_order=idx)
            for idx, url in enumerate(urls)
        ]

    @staticmethod
    def _build_product_dto(
        product: Product,
        images: list[ProductImage],
    ) -> ProductRead:
        return ProductRead(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            image=product.image,
            images=[ProductImageRead.model_validate(img) for img in images],
            category=product.category,
            in_stock=product.in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    # ----- Queries -----

    def list_products(
        self,
        session: Session,
        page: int = 1,
        limit: int = 12,
        search: str = "",
        category: str = "",
    ) -> ProductPage:
        total = self.repo.count(session, search=search, category=category)
        products = self.repo.list_products(
            session,
            skip=(page - 1) * limit,
            limit=limit,
            search=search,
            category=category,
        )
        galleries = self.repo.list_images_for_products(
            session, [p.id for p in products]
        )

        return ProductPage(
            products=[
                self._build_product_dto(p, galleries.get(p.id, [])) for p in products
            ],
            pagination=ProductPagination(
                total_products=total,
                **page_window(page, limit, total),
            ),
        )

    def list_categories(self, session: Session) -> list[str]:
        """
        Category filter values for the storefront, `all` first.
        """
        return ["all", *self.repo.list_categories(session)]

    def get_product(self, session: Session, product_id: int) -> ProductRead:
        product = self._get_or_404(session, product_id)
        images = self.repo.list_images_for_product(session, product_id)
        return self._build_product_dto(product, images)

    # ----- Commands -----

    def create_product(
        self,
        session: Session,
        payload: ProductCreate,
    ) -> ProductRead:
        """
        Create a product and its gallery in one transaction.
        """
        with persistence_guard(session, "create product"):
            product = self.repo.create(
                session,
                Product(
                    name=payload.name,
                    description=payload.description,
                    price=payload.price,
                    image=payload.image,
                    category=payload.category,
                    in_stock=payload.in_stock,
                ),
            )
            images = self.repo.create_images(
                session, self._build_images(product.id, payload.images)
            )
            session.commit()
            session.refresh(product)

        logger.info(f"Created product {product.id} with {len(images)} images")
        return self._build_product_dto(product, images)

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate,
    ) -> ProductRead:
        """
        Update a product.

        - Scalar fields: only those provided are changed; null clears
          `description` and `image`.
        - Images: existing rows are deleted and `payload.images` recreated,
          so an update without `images` leaves the product with none.
        """
        product = self._get_or_404(session, product_id)

        if payload.name is not None:
            product.name = payload.name

        if "description" in payload.model_fields_set:
            product.description = payload.description

        if payload.price is not None:
            product.price = payload.price

        if "image" in payload.model_fields_set:
            product.image = payload.image

        if payload.category is not None:
            product.category = payload.category

        if payload.in_stock is not None:
            product.in_stock = payload.in_stock

        product.updated_at = datetime.now(timezone.utc)

        with persistence_guard(session, "update product"):
            self.repo.delete_images_for_product(session, product_id)
            product = self.repo.update(session, product)
            images = self.repo.create_images(
                session, self._build_images(product_id, payload.images)
            )
            session.commit()
            session.refresh(product)

        return self._build_product_dto(product, images)

    def delete_product(
        self,
        session: Session,
        product_id: int,
    ) -> None:
        """
        Delete a product and all its gallery images.
        """
        product = self._get_or_404(session, product_id)

        with persistence_guard(session, "delete product"):
            self.repo.delete_images_for_product(session, product_id)
            self.repo.delete(session, product)
            session.commit()

        logger.info(f"Deleted product {product_id}")
