# app/models/profile.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field


class BusinessProfile(SQLModel):
    """
    The business profile of the (single) shop owner.

    Identity:
      - id, owner_user_id are fixed per process. There is no auth layer,
        so every request sees and edits the same profile.

    Exactly one of these lives in the store at any time.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(description="Profile id")

    owner_user_id: str = Field(description="Owner's user id")

    business_name: str = Field(max_length=255)

    tax_id: str | None = Field(default=None, max_length=100)
    registration_number: str | None = Field(default=None, max_length=100)

    address_line_1: str | None = Field(default=None, max_length=255)
    address_line_2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)

    phone_number: str | None = Field(default=None, max_length=50)

    # platform name -> URL, e.g. {"facebook": "https://facebook.com/shop"}
    social_media_links: dict[str, str | None] | None = None
