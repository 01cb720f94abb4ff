# app/routers/products.py
import logging
from typing import Any

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Body,
    Depends,
    HTTPException,
    status,
)

from app.core.config import get_settings
from app.database import MockStore, get_store
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductRead
from app.services.product_service import ProductService

# This API must be served over HTTPS in production.

router = APIRouter(prefix="/owner/products", tags=["Products"])

logger = logging.getLogger(__name__)
settings = get_settings()

repo = ProductRepository()
service = ProductService(
    repo,
    asset_prefix=settings.ASSET_ID_PREFIX,
    sheet_id=settings.GOOGLE_SHEET_ID,
    sheet_range=settings.PRODUCT_LOG_RANGE,
)

@router.get("", response_model=list[ProductRead])
def list_products(store: MockStore = Depends(get_store)):
    """
    List all products in insertion order.

    No pagination or filtering (yet).
    """
    logger.info("GET /owner/products received")
    return service.list_products(store)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    background_tasks: BackgroundTasks,
    payload: Any = Body(...),
    store: MockStore = Depends(get_store),
):
    """
    Create a new product.

    - 400 with a field-specific message on invalid input.
    - The new product is logged to Google Sheets after the response
      is sent (if configured); that never affects this request.
    """
    logger.info("POST /owner/products received: %s", payload)
    try:
        return service.create_product(store, payload, background_tasks)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error processing POST request for new product")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error while creating product.",
        )

