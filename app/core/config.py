# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Everything has a default so the API runs with no .env at all.

    Google Sheets logging (optional):
      - GOOGLE_APPLICATION_CREDENTIALS (path to a service account JSON)
      - GOOGLE_SHEET_ID (target spreadsheet)

    If either is missing, product logging to Sheets is skipped silently.
    """

    PROJECT_NAME: str = "Marxia Owner API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Owner dashboard front end(s)
    CORS_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Asset ids look like MARXIA-0003
    ASSET_ID_PREFIX: str = "MARXIA"

    # Google Sheets product log
    GOOGLE_APPLICATION_CREDENTIALS: str | None = None
    GOOGLE_SHEET_ID: str | None = None
    PRODUCT_LOG_RANGE: str = "ProductLog!A1"

    # Storefront cart (None => keep it in memory)
    CART_STORAGE_PATH: str | None = None

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
