"""Address form schemas used to validate raw create/update payloads."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

from ..models import AddressType

ADDRESS_FIELD_MAP: dict[str, str] = {
    "address_type": "addressType",
    "post_code": "postCode",
    "country_code": "countryCode",
    "building_number": "buildingNumber",
    "user_id": "userId",
    "valid_from": "validFrom",
}

_POST_CODE_PATTERN = re.compile(r"[0-9A-Z\-\s]+", re.IGNORECASE | re.ASCII)
_COUNTRY_CODE_PATTERN = re.compile(r"[A-Z]{3}", re.IGNORECASE | re.ASCII)


def _check_required_text(value: str, label: str, max_length: int) -> str:
    if not value:
        raise PydanticCustomError("required", f"{label} is required")
    if len(value) > max_length:
        raise PydanticCustomError("too_long", f"{label} must be at most {max_length} characters")
    return value


class AddressForm(BaseModel):
    """Validated address attributes shared by create and update."""

    model_config = ConfigDict(extra="ignore")

    address_type: AddressType = Field(default=None, validate_default=True)
    post_code: str = Field(default="", validate_default=True)
    city: str = Field(default="", validate_default=True)
    country_code: str = Field(default="", validate_default=True)
    street: str = Field(default="", validate_default=True)
    building_number: str = Field(default="", validate_default=True)

    @field_validator("address_type", mode="before")
    @classmethod
    def _check_address_type(cls, value: object) -> object:
        allowed = [address_type.value for address_type in AddressType]
        if value not in allowed:
            raise PydanticCustomError(
                "invalid_enum",
                "Invalid address type. Expected {expected}",
                {"expected": " | ".join(allowed)},
            )
        return value

    @field_validator("post_code")
    @classmethod
    def _check_post_code(cls, value: str) -> str:
        _check_required_text(value, "Post code", 6)
        if not _POST_CODE_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "pattern",
                "Post code must contain only letters, numbers, spaces, and hyphens",
            )
        return value

    @field_validator("city")
    @classmethod
    def _check_city(cls, value: str) -> str:
        return _check_required_text(value, "City", 60)

    @field_validator("country_code")
    @classmethod
    def _check_country_code(cls, value: str) -> str:
        if len(value) != 3:
            raise PydanticCustomError("length", "Country code must be exactly 3 characters")
        if not _COUNTRY_CODE_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "pattern",
                "Country code must be 3 uppercase letters (ISO3166-1 alpha-3)",
            )
        return value.upper()

    @field_validator("street")
    @classmethod
    def _check_street(cls, value: str) -> str:
        return _check_required_text(value, "Street", 100)

    @field_validator("building_number")
    @classmethod
    def _check_building_number(cls, value: str) -> str:
        return _check_required_text(value, "Building number", 60)


@dataclass(frozen=True, slots=True)
class AddressKey:
    """Composite identity of a stored address."""

    user_id: int
    address_type: AddressType
    valid_from: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "address_type", AddressType(self.address_type))


class UserAddressForm(AddressForm):
    """Address attributes plus the owning user and the validity start.

    The owner and validity start are also read from the ``userId`` and
    ``validFrom`` keys used by form payloads.
    """

    user_id: int = Field(
        default=None,
        validate_default=True,
        validation_alias=AliasChoices("user_id", "userId"),
    )
    valid_from: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("valid_from", "validFrom"),
    )

    @field_validator("user_id", mode="before")
    @classmethod
    def _check_user_id(cls, value: object) -> object:
        if not value:
            raise PydanticCustomError("required", "User ID is required")
        return value


__all__ = ["ADDRESS_FIELD_MAP", "AddressForm", "AddressKey", "UserAddressForm"]
