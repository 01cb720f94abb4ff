# app/repositories/profile_repo.py
from app.database import MockStore
from app.models.profile import BusinessProfile


class ProfileRepository:
    """
    Data access layer for BusinessProfile.

    Responsibilities:
      - Pure store operations (get / list / upsert)
      - No FastAPI, no HTTP, no business logic
    """

    def get(self, store: MockStore) -> BusinessProfile | None:
        """Return the single profile, or None if the store has none yet."""
        return store.profile

    def list(self, store: MockStore) -> list[BusinessProfile]:
        return [store.profile] if store.profile is not None else []

    def upsert(self, store: MockStore, profile: BusinessProfile) -> BusinessProfile:
        """Replace the single profile record."""
        with store.lock:
            store.profile = profile
        return profile
