# app/services/profile_service.py
import logging
import uuid
from typing import Any

from fastapi import HTTPException, status

from app.core.validation import validate_payload
from app.database import MockStore
from app.models.profile import BusinessProfile
from app.repositories.profile_repo import ProfileRepository
from app.schemas.profile import (
    PROFILE_FIELD_MESSAGES,
    PROFILE_ITEM_MESSAGES,
    ProfileUpdate,
)

logger = logging.getLogger(__name__)

# Used only if the store somehow has no profile yet.
DEFAULT_OWNER_USER_ID = "auth-user-id-for-post"


class ProfileService:
    """
    Business logic for the owner's BusinessProfile.

    Responsibilities:
      - validate raw payloads
      - merge the payload over the single stored profile
      - keep id / ownerUserId stable
    """

    def __init__(self, repo: ProfileRepository):
        self.repo = repo

    def get_profile(self, store: MockStore) -> BusinessProfile:
        """
        Return the current profile.

        Raises:
            HTTPException(404): if the store holds no profile.
        """
        profile = self.repo.get(store)
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Profile not found",
            )
        return profile

    def upsert_profile(self, store: MockStore, payload: Any) -> BusinessProfile:
        """
        Create-or-update the profile.

        Only fields present in the payload override stored values;
        identifiers are never taken from the payload.
        """
        result = validate_payload(
            ProfileUpdate,
            payload,
            PROFILE_FIELD_MESSAGES,
            PROFILE_ITEM_MESSAGES,
        )
        if not result.ok:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=result.first_message,
            )

        changes = result.value.model_dump(exclude_unset=True)
        current = self.repo.get(store)

        if current is None:
            merged = BusinessProfile(
                id=str(uuid.uuid4()),
                owner_user_id=DEFAULT_OWNER_USER_ID,
                **changes,
            )
        else:
            merged = current.model_copy(update=changes)

        self.repo.upsert(store, merged)
        logger.info("Profile %s saved for owner %s", merged.id, merged.owner_user_id)
        return merged
