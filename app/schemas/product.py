# app/schemas/product.py
from datetime import datetime
from typing import Any

from pydantic import AnyUrl, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

_url_adapter = TypeAdapter(AnyUrl)

# Messages for built-in errors (missing / wrong type / range / length),
# keyed by the camelCase field name clients send.
PRODUCT_FIELD_MESSAGES: dict[str, str] = {
    "productName": "Product name is required and must be a string up to 255 characters.",
    "price": "Price is required and must be a positive number.",
    "quantityAvailable": "Quantity available is required and must be a non-negative integer.",
    "description": "Description must be a string.",
    "taxName": "Tax name must be a string up to 100 characters.",
    "taxRate": "Tax rate must be a number between 0 and 100.",
    "photoUrl": "Photo URL must be a string up to 2048 characters.",
}


class ProductCreate(SQLModel):
    """
    Payload for creating a product.

    Strict mode: "9.99" is not a price and 3.5 is not a quantity
    (3.0 is, it has no fractional part). Infinity / NaN are rejected.
    Unknown fields (e.g. a client-side id) are ignored.
    Field order == validation order; the first failing field is reported.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    product_name: str = Field(max_length=255)
    price: float = Field(gt=0)
    quantity_available: int = Field(ge=0)
    description: str | None = None
    tax_name: str | None = Field(default=None, max_length=100)
    tax_rate: float | None = Field(default=None, ge=0, le=100)
    photo_url: str | None = Field(default=None, max_length=2048)

    @field_validator("product_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(PRODUCT_FIELD_MESSAGES["productName"])
        return v

    @field_validator("quantity_available", mode="before")
    @classmethod
    def integral_float_quantity(cls, v: Any) -> Any:
        # JSON has one number type; 3.0 is the integer 3
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v

    @field_validator("tax_name")
    @classmethod
    def blank_tax_name(cls, v: str | None) -> str | None:
        return v or None

    @field_validator("photo_url")
    @classmethod
    def validate_photo_url(cls, v: str | None) -> str | None:
        if not v:
            return None
        try:
            _url_adapter.validate_python(v)
        except ValidationError:
            raise ValueError("Photo URL must be a valid URL.")
        # keep the URL exactly as the owner typed it
        return v


class ProductRead(SQLModel):
    """
    Product representation for clients (camelCase JSON).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    asset_id: str
    product_name: str
    description: str = ""
    price: float
    quantity_available: int
    tax_name: str | None = None
    tax_rate: float | None = None
    photo_url: str | None = None
    created_at: datetime
