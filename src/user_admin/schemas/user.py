"""User form schema used to validate raw create/update payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from ..models import UserStatus

USER_FIELD_MAP: dict[str, str] = {
    "first_name": "firstName",
    "last_name": "lastName",
}


def _too_long(label: str, max_length: int) -> PydanticCustomError:
    return PydanticCustomError("too_long", f"{label} must be at most {max_length} characters")


class UserForm(BaseModel):
    """Validated user attributes ready to be persisted."""

    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str = Field(default="", validate_default=True)
    initials: str | None = None
    email: str = Field(default="", validate_default=True)
    status: UserStatus = Field(default=None, validate_default=True)

    @field_validator("first_name")
    @classmethod
    def _check_first_name(cls, value: str | None) -> str | None:
        if value is not None and len(value) > 60:
            raise _too_long("First name", 60)
        return value or None

    @field_validator("last_name")
    @classmethod
    def _check_last_name(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "Last name is required")
        if len(value) > 100:
            raise _too_long("Last name", 100)
        return value

    @field_validator("initials")
    @classmethod
    def _check_initials(cls, value: str | None) -> str | None:
        if value is not None and len(value) > 30:
            raise _too_long("Initials", 30)
        return value or None

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("required", "Email is required")
        if len(value) > 100:
            raise _too_long("Email", 100)
        try:
            _, address = validate_email(value)
        except PydanticCustomError as exc:
            raise PydanticCustomError("invalid_email", "Invalid email format") from exc
        # display-name forms such as "Doe <d@x.com>" parse but are not bare addresses
        if address.casefold() != value.casefold():
            raise PydanticCustomError("invalid_email", "Invalid email format")
        return value

    @field_validator("status", mode="before")
    @classmethod
    def _check_status(cls, value: object) -> object:
        allowed = [status.value for status in UserStatus]
        if value not in allowed:
            raise PydanticCustomError(
                "invalid_enum",
                "Invalid status. Expected {expected}",
                {"expected": " | ".join(allowed)},
            )
        return value


__all__ = ["USER_FIELD_MAP", "UserForm"]
