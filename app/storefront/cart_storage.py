# app/storefront/cart_storage.py
"""Local persistence for the storefront cart."""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from app.core.config import get_settings
from app.storefront.cart import CartItem

logger = logging.getLogger(__name__)

_items_adapter = TypeAdapter(list[CartItem])


class LocalCartStorage:
    """
    Key/value JSON file acting as the browser's local storage.

    The cart lines are stored as a JSON array under `key`; other keys in the
    same file are left untouched.
    """

    def __init__(self, path: Optional[str] = None, key: Optional[str] = None) -> None:
        """
        Args:
            path: Storage file (default: settings.CART_STORAGE_FILE)
            key: Entry holding the cart (default: settings.CART_STORAGE_KEY)
        """
        settings = get_settings()
        self.path = Path(path or settings.CART_STORAGE_FILE)
        self.key = key or settings.CART_STORAGE_KEY

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read cart storage {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def load(self) -> list[CartItem] | None:
        """
        Return the stored cart lines, or None when nothing usable is stored.

        Unparseable or invalid data is discarded.
        """
        raw = self._read_all().get(self.key)
        if raw is None:
            return None
        try:
            return _items_adapter.validate_python(raw)
        except ValidationError as e:
            logger.warning(f"Discarding malformed cart data: {e.error_count()} errors")
            return None

    def _write_all(self, data: dict) -> bool:
        try:
            if data:
                with open(self.path, "w") as f:
                    json.dump(data, f, indent=2)
            elif self.path.exists():
                os.remove(self.path)
        except OSError as e:
            logger.warning(f"Could not write cart storage {self.path}: {e}")
            return False
        return True

    def save(self, items: list[CartItem]) -> None:
        """Store the cart lines; a write failure is logged and the cart stays in memory."""
        data = self._read_all()
        data[self.key] = _items_adapter.dump_python(items, by_alias=True, exclude_none=True)
        if self._write_all(data):
            logger.debug(f"Cart saved to {self.path} ({len(items)} lines)")

    def clear(self) -> None:
        """Remove the cart entry from the file."""
        data = self._read_all()
        if data.pop(self.key, None) is not None or not data:
            self._write_all(data)
