# app/routers/profile.py
import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, status

from app.database import MockStore, get_store
from app.repositories.profile_repo import ProfileRepository
from app.schemas.profile import ProfileRead
from app.services.profile_service import ProfileService

# This API must be served over HTTPS in production.

router = APIRouter(prefix="/owner/profile", tags=["Profile"])

logger = logging.getLogger(__name__)

repo = ProfileRepository()
service = ProfileService(repo)

@router.get("", response_model=ProfileRead)
def read_profile(store: MockStore = Depends(get_store)):
    """
    Return the owner's business profile.
    """
    logger.info("GET /owner/profile received")
    return service.get_profile(store)


@router.post("", response_model=ProfileRead)
def save_profile(
    payload: Any = Body(...),
    store: MockStore = Depends(get_store),
):
    """
    Create or update the business profile (always a full upsert).

    Fields present in the body replace stored values; id and ownerUserId
    are kept as they are.
    """
    logger.info("POST /owner/profile received: %s", payload)
    try:
        return service.upsert_profile(store, payload)
    except HTTPException:
        raise
    except Exception:
        logger.exception("Error processing POST request for profile")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error while processing profile data.",
        )

