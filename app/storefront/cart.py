# app/storefront/cart.py
"""
Shopping cart held by the storefront session.

The cart is an ordered list of line items keyed by product id. Totals are
never stored on their own: every transition rebuilds the item list and
recomputes `total_items` / `total_amount` from it.

A `Cart` optionally owns a storage object; it loads the stored items once on
construction and saves the item list after every mutation.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import Field

from app.schemas.base import CamelModel
from app.schemas.product import ProductRead

if TYPE_CHECKING:
    from app.storefront.cart_storage import LocalCartStorage

logger = logging.getLogger(__name__)


class CartItem(CamelModel):
    """
    One cart line. `price` is the product price when it was first added.
    """

    id: int
    name: str
    price: float
    image: str | None = None
    quantity: int = Field(default=1, ge=1)

    @classmethod
    def from_product(cls, product: ProductRead) -> "CartItem":
        """Snapshot a catalog product; the image falls back to the first gallery image."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            image=product.main_image,
        )


class CartState(CamelModel):
    items: list[CartItem] = []
    total_items: int = 0
    total_amount: float = 0.0


def calculate_totals(items: list[CartItem]) -> CartState:
    return CartState(
        items=items,
        total_items=sum(item.quantity for item in items),
        total_amount=sum(item.price * item.quantity for item in items),
    )


class Cart:
    """
    Cart state machine.

    Transitions (all synchronous, none can fail):
      - add(product)            same id -> quantity + 1, else append with 1
      - remove(id)              drop the line
      - set_quantity(id, q)     q <= 0 behaves like remove
      - clear()                 empty cart
      - load(items)             replace the lines wholesale
    """

    def __init__(self, storage: LocalCartStorage | None = None):
        self.storage = storage
        self._state = CartState()

        if storage is not None:
            stored = storage.load()
            if stored is not None:
                self._state = calculate_totals(stored)

    # ---- read side ----

    @property
    def state(self) -> CartState:
        return self._state

    @property
    def items(self) -> list[CartItem]:
        return self._state.items

    @property
    def total_items(self) -> int:
        return self._state.total_items

    @property
    def total_amount(self) -> float:
        return self._state.total_amount

    def __len__(self) -> int:
        return len(self._state.items)

    # ---- transitions ----

    def add(self, product: ProductRead | CartItem) -> CartState:
        """
        Add one unit of `product`.

        Accepts a catalog product or a pre-built line (its quantity is ignored).
        """
        if isinstance(product, ProductRead):
            line = CartItem.from_product(product)
        else:
            line = product.model_copy(update={"quantity": 1})

        if any(item.id == line.id for item in self.items):
            items = [
                item.model_copy(update={"quantity": item.quantity + 1})
                if item.id == line.id
                else item
                for item in self.items
            ]
        else:
            items = [*self.items, line]
        return self._commit(items)

    def remove(self, product_id: int) -> CartState:
        return self._commit([item for item in self.items if item.id != product_id])

    def set_quantity(self, product_id: int, quantity: int) -> CartState:
        if quantity <= 0:
            return self.remove(product_id)
        return self._commit(
            [
                item.model_copy(update={"quantity": quantity})
                if item.id == product_id
                else item
                for item in self.items
            ]
        )

    def clear(self) -> CartState:
        return self._commit([])

    def load(self, items: list[CartItem]) -> CartState:
        return self._commit(list(items))

    def _commit(self, items: list[CartItem]) -> CartState:
        self._state = calculate_totals(items)
        if self.storage is not None:
            self.storage.save(self._state.items)
        return self._state
