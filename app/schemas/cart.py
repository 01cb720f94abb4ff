# app/schemas/cart.py
from datetime import datetime

from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

from app.models.cart import CartLineItem


class CartItemDraft(SQLModel):
    """
    State of the product form before "Add to cart".

    Quantity starts at 1 and never drops below it. A negative or
    unreadable price is treated as 0 (and then refused by add_to_cart).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    asset_id: str = ""
    price: float = 0.0
    quantity: int = Field(default=1, ge=1)
    description: str = ""

    @property
    def subtotal(self) -> float:
        return self.quantity * self.price

    def increment(self) -> int:
        self.quantity += 1
        return self.quantity

    def decrement(self) -> int:
        if self.quantity > 1:
            self.quantity -= 1
        return self.quantity

    def set_price(self, raw: str | float | None) -> float:
        try:
            price = float(raw)
        except (TypeError, ValueError):
            price = 0.0
        if price != price or price < 0:  # NaN or negative
            price = 0.0
        self.price = price
        return self.price


class CartTotals(SQLModel):
    """
    Totals shown on the cart page.

    If the VAT input was rejected, `error` carries the message and
    final_total falls back to total_amount.
    """

    total_amount: float = 0.0
    vat_percentage: float | None = None
    vat_amount: float = 0.0
    final_total: float = 0.0
    error: str | None = None


class CheckoutPayload(SQLModel):
    """What "Proceed to checkout" hands on (currently: logged)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product: CartLineItem
    total_amount: float
    vat_percentage: float
    final_total: float
    timestamp: datetime
