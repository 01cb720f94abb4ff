# app/repositories/cart_repo.py
import json
from pathlib import Path

from app.models.cart import CartLineItem

CART_STORAGE_KEY = "marxiaCartProduct"


class LocalStorage:
    """
    Minimal localStorage: string keys -> string values.

    With a path, every write is flushed to a JSON file so the cart
    survives restarts; without one, it lives in memory.
    """

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else None
        self._items: dict[str, str] = {}
        if self.path and self.path.exists():
            self._items = json.loads(self.path.read_text(encoding="utf-8"))

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        if self.path:
            self.path.write_text(json.dumps(self._items), encoding="utf-8")


class CartRepository:
    """
    Reads/writes the single cart line item under CART_STORAGE_KEY.

    No business rules here; see CartService.
    """

    def __init__(self, storage: LocalStorage):
        self.storage = storage

    def get(self) -> CartLineItem | None:
        raw = self.storage.get_item(CART_STORAGE_KEY)
        if not raw:
            return None
        return CartLineItem.model_validate_json(raw)

    def upsert(self, item: CartLineItem) -> CartLineItem:
        """Write the item, replacing whatever was in the cart."""
        self.storage.set_item(CART_STORAGE_KEY, item.model_dump_json(by_alias=True))
        return item
