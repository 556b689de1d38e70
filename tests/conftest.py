import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_KEY", "test-anon-key")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.schemas.product import ProductImageRead, ProductRead
from app.storefront.client import StorefrontClient


@pytest.fixture(name="session")
def session_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="storefront")
def storefront_fixture(client: TestClient):
    return StorefrontClient(client=client)


@pytest.fixture(name="create_product")
def create_product_fixture(client: TestClient):
    def _create(**overrides) -> dict:
        body = {
            "name": "Mechanical Keyboard",
            "description": "RGB backlit, brown switches",
            "price": "4500",
            "images": [],
            "category": "keyboards",
            "inStock": True,
        }
        body.update(overrides)
        response = client.post("/api/products", json=body)
        assert response.status_code == 200, response.text
        return response.json()

    return _create


def make_product(
    product_id: int,
    price: float,
    name: str | None = None,
    image: str | None = None,
    images: list[str] | None = None,
) -> ProductRead:
    now = datetime.now(timezone.utc)
    return ProductRead(
        id=product_id,
        name=name or f"Product {product_id}",
        price=price,
        image=image,
        images=[
            ProductImageRead(id=idx + 1, product_id=product_id, url=url, sort_order=idx)
            for idx, url in enumerate(images or [])
        ],
        category="accessories",
        in_stock=True,
        created_at=now,
        updated_at=now,
    )
