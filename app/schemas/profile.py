# app/schemas/profile.py
from typing import Annotated

from pydantic import ConfigDict, StringConstraints, field_validator
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel, Field

SocialLink = Annotated[str, StringConstraints(max_length=2048)]

PROFILE_FIELD_MESSAGES: dict[str, str] = {
    "businessName": "Business name is required and must be a string up to 255 characters.",
    "taxId": "Tax ID must be a string up to 100 characters.",
    "registrationNumber": "Registration number must be a string up to 100 characters.",
    "addressLine1": "Address Line 1 must be a string up to 255 characters.",
    "addressLine2": "Address Line 2 must be a string up to 255 characters.",
    "city": "City must be a string up to 100 characters.",
    "zipCode": "Zip code must be a string up to 20 characters.",
    "phoneNumber": "Phone number must be a string up to 50 characters.",
    "socialMediaLinks": "Social media links must be an object.",
}

# Errors on a single link, formatted with the platform name.
PROFILE_ITEM_MESSAGES: dict[str, str] = {
    "socialMediaLinks": "Social media link for {key} must be a string up to 2048 characters.",
}


class ProfileUpdate(SQLModel):
    """
    Payload for POST /owner/profile (create-or-update).

    Validation rules:
      - businessName is required and cannot be blank
      - every other field is optional and length-capped
      - socialMediaLinks values are optional strings (<= 2048 chars)

    id / ownerUserId (and any other unknown field) are ignored, so a client
    can send back exactly what GET returned.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    business_name: str = Field(max_length=255)
    tax_id: str | None = Field(default=None, max_length=100)
    registration_number: str | None = Field(default=None, max_length=100)
    address_line_1: str | None = Field(default=None, max_length=255)
    address_line_2: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=100)
    zip_code: str | None = Field(default=None, max_length=20)
    phone_number: str | None = Field(default=None, max_length=50)
    social_media_links: dict[str, SocialLink | None] | None = None

    @field_validator("business_name")
    @classmethod
    def normalize_business_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(PROFILE_FIELD_MESSAGES["businessName"])
        return v


class ProfileRead(SQLModel):
    """Response schema returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    owner_user_id: str
    business_name: str
    tax_id: str | None = None
    registration_number: str | None = None
    address_line_1: str | None = None
    address_line_2: str | None = None
    city: str | None = None
    zip_code: str | None = None
    phone_number: str | None = None
    social_media_links: dict[str, str | None] | None = None
