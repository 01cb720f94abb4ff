# app/models/cart.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class CartLineItem(SQLModel):
    """
    The one item in a shopper's cart.

    Kept client-side (local storage), never in the API store.
    Stored as camelCase JSON:

        {"name", "assetId", "price", "quantity", "description", "subtotal"}

    subtotal is price * quantity, computed when the item is added.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    asset_id: str
    price: float = Field(gt=0)
    quantity: int = Field(default=1, ge=1)
    description: str = ""
    subtotal: float
