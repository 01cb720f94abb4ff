# app/services/cart_service.py
import logging
from datetime import datetime, timezone

from app.core.config import get_settings
from app.models.cart import CartLineItem
from app.repositories.cart_repo import CartRepository, LocalStorage
from app.schemas.cart import CartItemDraft, CartTotals, CheckoutPayload

logger = logging.getLogger(__name__)

INVALID_ITEM_MESSAGE = (
    "Please fill in all required product details and ensure price is positive."
)
INVALID_VAT_MESSAGE = "Please enter a valid, non-negative VAT percentage."


class CartValidationError(ValueError):
    """The product form is incomplete or has a non-positive price."""


class CartEmptyError(Exception):
    """Checkout was attempted with nothing in the cart."""

    def __init__(self, message: str = "Your cart is empty."):
        super().__init__(message)


def format_money(value: float) -> str:
    """Render an amount the way the cart page shows it, e.g. $120.00."""
    return f"${value:.2f}"


def parse_vat_percentage(raw: str | float | None) -> float | None:
    """
    Parse the VAT box. Returns None if it is empty, not a number or negative.
    """
    if raw is None:
        return None
    try:
        vat = float(raw)
    except (TypeError, ValueError):
        return None
    if vat != vat or vat < 0:
        return None
    return vat


class CartService:
    """
    Storefront cart logic (single line item).

    Responsibilities:
      - turn the product form into a CartLineItem (with subtotal)
      - replace the stored item on every add
      - compute total / VAT / final total
      - build and log the checkout payload
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    # ---- add / read ----

    def add_to_cart(self, draft: CartItemDraft) -> CartLineItem:
        """
        Put the drafted product in the cart.

        Rules:
          - name and asset id are required
          - price must be > 0
          - any item already in the cart is replaced
        """
        if not draft.name or not draft.asset_id or draft.price <= 0:
            raise CartValidationError(INVALID_ITEM_MESSAGE)

        item = CartLineItem(
            name=draft.name,
            asset_id=draft.asset_id,
            price=draft.price,
            quantity=draft.quantity,
            description=draft.description,
            subtotal=draft.subtotal,
        )
        return self.cart_repo.upsert(item)

    def get_cart(self) -> CartLineItem | None:
        return self.cart_repo.get()

    # ---- totals ----

    @staticmethod
    def _totals_for(item: CartLineItem | None) -> CartTotals:
        if item is None:
            return CartTotals()
        return CartTotals(total_amount=item.subtotal, final_total=item.subtotal)

    def summary(self) -> CartTotals:
        """Totals before any VAT is applied."""
        return self._totals_for(self.get_cart())

    def calculate_vat(self, vat_input: str | float | None) -> CartTotals:
        """
        Apply a VAT percentage to the cart total.

        An invalid percentage is rejected: the result carries the error
        message and final_total stays equal to total_amount.
        """
        item = self.get_cart()
        totals = self._totals_for(item)
        if item is None:
            return totals

        vat = parse_vat_percentage(vat_input)
        if vat is None:
            totals.error = INVALID_VAT_MESSAGE
            return totals

        vat_amount = totals.total_amount * (vat / 100)
        totals.vat_percentage = vat
        totals.vat_amount = round(vat_amount, 2)
        totals.final_total = round(totals.total_amount + vat_amount, 2)
        return totals

    # ---- checkout ----

    def checkout(self, vat_input: str | float | None = None) -> CheckoutPayload:
        """
        Build the checkout payload and log it.

        There is no payment step yet; the payload is only logged.
        An invalid VAT entry is checked out as 0%, so vatPercentage always
        matches the VAT actually applied to finalTotal (the cart page sends
        whatever number was typed, e.g. -5).

        Raises:
            CartEmptyError: if the cart has no item.
        """
        item = self.get_cart()
        if item is None:
            raise CartEmptyError()

        totals = self.calculate_vat(vat_input)
        payload = CheckoutPayload(
            product=item,
            total_amount=totals.total_amount,
            vat_percentage=totals.vat_percentage or 0,
            final_total=totals.final_total,
            timestamp=datetime.now(timezone.utc),
        )
        logger.info(
            "Proceeding to checkout with: %s",
            payload.model_dump_json(by_alias=True),
        )
        return payload


def get_cart_service(path: str | None = None) -> CartService:
    """
    Build a CartService on top of local storage.

    Args:
        path: JSON file backing the storage. Defaults to CART_STORAGE_PATH;
              if that is unset too, the cart is kept in memory.
    """
    storage = LocalStorage(path or get_settings().CART_STORAGE_PATH)
    return CartService(CartRepository(storage))
