# app/models/product.py
import uuid
from datetime import datetime, timezone

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


def generate_product_id() -> str:
    return f"mock-prod-{uuid.uuid4().hex[:12]}"


class Product(SQLModel):
    """
    Product catalog entry for a Marxia business.

    Lives in the in-memory store (app.database). Not a table yet:
    switching to `table=True` is all a SQL backend needs on this side.

      - id: opaque internal id, never reused
      - asset_id: human readable PREFIX-NNNN, assigned once, immutable
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(
        default_factory=generate_product_id,
        description="Internal record id",
    )

    asset_id: str = Field(
        description="Sequential human-readable id, e.g. MARXIA-0003",
    )

    product_name: str = Field(
        max_length=255,
        description="Display name of the product",
    )

    description: str = Field(
        default="",
        description="Optional long description",
    )

    price: float = Field(
        gt=0,
        description="Unit price, 2 decimal places",
    )

    quantity_available: int = Field(
        default=0,
        ge=0,
        description="How many units are available",
    )

    tax_name: str | None = Field(
        default=None,
        max_length=100,
        description="e.g. VAT, Sales Tax",
    )

    tax_rate: float | None = Field(
        default=None,
        ge=0,
        le=100,
        description="Percentage, e.g. 20 for 20%",
    )

    photo_url: str | None = Field(
        default=None,
        max_length=2048,
        description="Product image URL",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
