# app/database.py
import threading

from app.models.product import Product
from app.models.profile import BusinessProfile

# ---------------------------------------------------------
# In-memory mock store
#
# Stands in for a real database: a process-wide object holding
# the product list, the single business profile and the asset id
# counter. Nothing is durable; a restart (or init_store()) brings
# back the seed data below.
#
# Repositories receive the store the same way they would receive
# a DB session, so swapping in a SQL backend only touches
# app/repositories and this module.
# ---------------------------------------------------------


class MockStore:
    def __init__(self) -> None:
        self.products: list[Product] = []
        self.profile: BusinessProfile | None = None
        self.asset_counter: int = 0
        # guards asset_counter + products appends across worker threads
        self.lock = threading.Lock()


def _seed_products() -> list[Product]:
    return [
        Product(
            id="mock-prod-1",
            asset_id="MARXIA-0001",
            product_name="Pre-existing Gadget",
            description="A gadget from the void.",
            price=99.99,
            quantity_available=10,
            tax_name="VAT",
            tax_rate=10,
        ),
        Product(
            id="mock-prod-2",
            asset_id="MARXIA-0002",
            product_name="Another Pre-existing Item",
            description="It also came from the void.",
            price=49.50,
            quantity_available=5,
            tax_name="Sales Tax",
            tax_rate=5,
        ),
    ]


def _seed_profile() -> BusinessProfile:
    return BusinessProfile(
        id="db-uuid-987",
        owner_user_id="auth-user-id-007",
        business_name="DB Stored Business Name",
        tax_id="DBTAXID123",
        registration_number="DBREG456",
        address_line_1="456 Database Drive",
        address_line_2="Unit B",
        city="DataCity",
        zip_code="D4T 4B4",
        phone_number="555-987-6543",
        social_media_links={
            "facebook": "https://facebook.com/dbprofile",
            "twitter": "https://twitter.com/dbprofile",
        },
    )


store = MockStore()


def init_store() -> None:
    """
    Reset the store to its seed data.

    Called once on application startup (and by tests between cases).
    The asset counter continues right after the seeded products.
    """
    with store.lock:
        store.products = _seed_products()
        store.profile = _seed_profile()
        store.asset_counter = len(store.products)


def get_store():
    """
    FastAPI dependency that yields the mock store.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(store: MockStore = Depends(get_store)):
            ...
    """
    yield store


init_store()
