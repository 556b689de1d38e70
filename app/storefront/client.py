# app/storefront/client.py
"""Storefront / admin client for the catalog, order and upload APIs."""

import logging
from typing import Any, Optional

import httpx

from app.core.config import get_settings
from app.schemas.order import OrderCreate, OrderPage, OrderRead, OrderStatus
from app.schemas.product import ProductCreate, ProductPage, ProductRead, ProductUpdate
from app.schemas.upload import UploadRead

logger = logging.getLogger(__name__)


class StorefrontClient:
    """Client for the storefront HTTP API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        api_prefix: Optional[str] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url: API root (default: settings.STOREFRONT_API_URL)
            client: Pre-built httpx client (e.g. FastAPI's TestClient);
                    `base_url` is ignored when given
            api_prefix: Route prefix (default: settings.API_PREFIX)
        """
        settings = get_settings()
        self.api_prefix = api_prefix if api_prefix is not None else settings.API_PREFIX
        self.client = client or httpx.Client(
            base_url=base_url or settings.STOREFRONT_API_URL,
            timeout=30.0,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "StorefrontClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.api_prefix}{path}"
        response = self.client.request(method, url, **kwargs)
        if response.is_error:
            logger.error(f"{method} {url} failed: {response.status_code} {response.text}")
        response.raise_for_status()
        return response.json()

    # ---- catalog ----

    def list_products(
        self,
        page: int = 1,
        limit: int = 12,
        search: str = "",
        category: str = "all",
    ) -> ProductPage:
        params = {"page": page, "limit": limit, "category": category}
        if search:
            params["search"] = search
        return ProductPage.model_validate(self._request("GET", "/products", params=params))

    def list_categories(self) -> list[str]:
        return self._request("GET", "/products/categories")

    def get_product(self, product_id: int) -> ProductRead:
        return ProductRead.model_validate(self._request("GET", f"/products/{product_id}"))

    def create_product(self, payload: ProductCreate) -> ProductRead:
        data = self._request(
            "POST", "/products", json=payload.model_dump(mode="json", by_alias=True)
        )
        return ProductRead.model_validate(data)

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductRead:
        """Send the fields set on `payload`; `images` replaces the whole gallery."""
        data = self._request(
            "PUT",
            f"/products/{product_id}",
            json=payload.model_dump(mode="json", by_alias=True, exclude_unset=True),
        )
        return ProductRead.model_validate(data)

    def delete_product(self, product_id: int) -> str:
        return self._request("DELETE", f"/products/{product_id}")["message"]

    def upload_image(self, filename: str, content: bytes, content_type: str) -> UploadRead:
        data = self._request(
            "POST", "/upload", files={"file": (filename, content, content_type)}
        )
        return UploadRead.model_validate(data)

    # ---- orders ----

    def create_order(self, payload: OrderCreate) -> OrderRead:
        data = self._request(
            "POST", "/orders", json=payload.model_dump(mode="json", by_alias=True)
        )
        return OrderRead.model_validate(data)

    def list_orders(
        self,
        page: int = 1,
        limit: int = 10,
        status: Optional[OrderStatus] = None,
    ) -> OrderPage:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if status:
            params["status"] = status
        return OrderPage.model_validate(self._request("GET", "/orders", params=params))

    def get_order(self, order_id: int) -> OrderRead:
        return OrderRead.model_validate(self._request("GET", f"/orders/{order_id}"))

    def update_order_status(self, order_id: int, status: OrderStatus) -> OrderRead:
        data = self._request("PUT", f"/orders/{order_id}", json={"status": status})
        return OrderRead.model_validate(data)

    def delete_order(self, order_id: int) -> str:
        return self._request("DELETE", f"/orders/{order_id}")["message"]
