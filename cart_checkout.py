# cart_checkout.py

import argparse

from app.schemas.cart import CartItemDraft
from app.services.cart_service import (
    CartValidationError,
    format_money,
    get_cart_service,
)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Add one product to the cart and check out.")
    parser.add_argument("--name", default="Pre-existing Gadget")
    parser.add_argument("--asset-id", default="MARXIA-0001")
    parser.add_argument("--price", default="99.99")
    parser.add_argument("--quantity", type=int, default=1)
    parser.add_argument("--description", default="")
    parser.add_argument("--vat", default="20")
    parser.add_argument("--cart-file", default=None, help="defaults to CART_STORAGE_PATH")
    args = parser.parse_args(argv)

    cart = get_cart_service(args.cart_file)

    draft = CartItemDraft(name=args.name, asset_id=args.asset_id, description=args.description)
    draft.set_price(args.price)
    for _ in range(args.quantity - 1):
        draft.increment()

    try:
        item = cart.add_to_cart(draft)
    except CartValidationError as e:
        print(e)
        return None
    print(f"Added {item.quantity} x {item.name} ({item.asset_id}) - subtotal {format_money(item.subtotal)}")

    totals = cart.calculate_vat(args.vat)
    if totals.error:
        print(totals.error)
    print(f"Total: {format_money(totals.total_amount)}")
    print(f"VAT:   {format_money(totals.vat_amount)}")
    print(f"Final: {format_money(totals.final_total)}")

    payload = cart.checkout(args.vat)
    print("Checkout payload:")
    print(payload.model_dump_json(by_alias=True, indent=2))
    return payload


if __name__ == "__main__":
    main()
