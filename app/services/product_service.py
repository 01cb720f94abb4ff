# app/services/product_service.py
import logging
from typing import Any

from fastapi import BackgroundTasks, HTTPException, status

from app.core.sheets_client import AppendStatus, append_rows
from app.core.validation import validate_payload
from app.database import MockStore
from app.models.product import Product
from app.repositories.product_repo import ProductRepository
from app.schemas.product import PRODUCT_FIELD_MESSAGES, ProductCreate

logger = logging.getLogger(__name__)


def product_log_row(product: Product) -> list[Any]:
    """
    Row written to the product log sheet:

      assetId, productName, price, quantityAvailable, createdAt,
      description, taxName, taxRate, photoUrl
    """
    return [
        product.asset_id,
        product.product_name,
        product.price,
        product.quantity_available,
        product.created_at.isoformat(),
        product.description or "",
        product.tax_name or "",
        product.tax_rate if product.tax_rate is not None else "",
        product.photo_url or "",
    ]


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - validate raw payloads (schema + per-field messages)
      - id / asset id assignment
      - normalisation (trimmed name, 2-decimal money values)
      - hand the new product to the sheet logger as a background task
    """

    def __init__(
        self,
        repo: ProductRepository,
        asset_prefix: str,
        sheet_id: str | None = None,
        sheet_range: str = "ProductLog!A1",
    ):
        self.repo = repo
        self.asset_prefix = asset_prefix
        self.sheet_id = sheet_id
        self.sheet_range = sheet_range

    # ----- Side channel -----

    def log_to_sheet(self, product: Product) -> AppendStatus:
        """
        Best-effort: append the product to the log sheet.

        Runs after the response has been sent; the outcome is only logged.
        """
        result = append_rows(self.sheet_id, self.sheet_range, [product_log_row(product)])

        if result.status == AppendStatus.APPENDED:
            logger.info("Logged product %s to Google Sheets.", product.asset_id)
        else:
            logger.warning(
                "Product %s was not logged to Google Sheets (%s).",
                product.asset_id,
                result.status.value,
            )
        return result.status

    # ----- Products -----

    def list_products(self, store: MockStore) -> list[Product]:
        return self.repo.list(store)

    def create_product(
        self,
        store: MockStore,
        payload: Any,
        background_tasks: BackgroundTasks,
    ) -> Product:
        """
        Validate and create a new product.

        - Fails on the first invalid field (400) before anything is written.
        - description defaults to "".
        - price / taxRate are rounded to 2 decimals.
        """
        result = validate_payload(ProductCreate, payload, PRODUCT_FIELD_MESSAGES)
        if not result.ok:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=result.first_message,
            )
        data = result.value

        product = Product(
            asset_id=self.repo.next_asset_id(store, self.asset_prefix),
            product_name=data.product_name,
            description=data.description or "",
            price=round(data.price, 2),
            quantity_available=data.quantity_available,
            tax_name=data.tax_name,
            tax_rate=round(data.tax_rate, 2) if data.tax_rate is not None else None,
            photo_url=data.photo_url,
        )
        self.repo.upsert(store, product)

        logger.info(
            "New product added with asset_id %s. Store size: %d",
            product.asset_id,
            self.repo.count(store),
        )

        background_tasks.add_task(self.log_to_sheet, product)
        return product
