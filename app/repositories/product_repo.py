# app/repositories/product_repo.py
from app.database import MockStore
from app.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure store operations (get / list / upsert + id allocation).
    - No FastAPI, no validation.
    """

    def get(self, store: MockStore, product_id: str) -> Product | None:
        for product in store.products:
            if product.id == product_id:
                return product
        return None

    def list(self, store: MockStore) -> list[Product]:
        """All products, in insertion order."""
        return list(store.products)

    def count(self, store: MockStore) -> int:
        return len(store.products)

    def next_asset_id(self, store: MockStore, prefix: str) -> str:
        """
        Allocate the next sequential asset id, e.g. MARXIA-0003.

        Atomic within the process; a number is never handed out twice,
        even if the create that asked for it fails afterwards.
        """
        with store.lock:
            store.asset_counter += 1
            number = store.asset_counter
        return f"{prefix}-{number:04d}"

    def upsert(self, store: MockStore, product: Product) -> Product:
        """Insert a new product, or replace the one with the same id."""
        with store.lock:
            for idx, existing in enumerate(store.products):
                if existing.id == product.id:
                    store.products[idx] = product
                    break
            else:
                store.products.append(product)
        return product
