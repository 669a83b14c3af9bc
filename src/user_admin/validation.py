"""Schema validation returning field errors instead of raising."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .schemas import ADDRESS_FIELD_MAP, USER_FIELD_MAP, FieldError, UserAddressForm, UserForm
from .schemas.results import GENERAL_FIELD

FormType = TypeVar("FormType", bound=BaseModel)


def _to_field_errors(exc: ValidationError, field_map: Mapping[str, str]) -> list[FieldError]:
    errors: list[FieldError] = []
    for error in exc.errors():
        location = error.get("loc") or (GENERAL_FIELD,)
        field = str(location[0])
        errors.append(FieldError(field=field_map.get(field, field), message=error["msg"]))
    return errors


def _validate(
    form_type: type[FormType],
    data: Mapping[str, Any],
    field_map: Mapping[str, str],
) -> tuple[FormType | None, list[FieldError]]:
    try:
        form = form_type.model_validate(data)
    except ValidationError as exc:
        return None, _to_field_errors(exc, field_map)
    return form, []


def validate_user_data(data: Mapping[str, Any]) -> tuple[UserForm | None, list[FieldError]]:
    """Validate a raw user payload, collecting every field error in one pass."""
    return _validate(UserForm, data, USER_FIELD_MAP)


def validate_address_data(
    data: Mapping[str, Any],
) -> tuple[UserAddressForm | None, list[FieldError]]:
    """Validate a raw address payload including its owning user id."""
    return _validate(UserAddressForm, data, ADDRESS_FIELD_MAP)


__all__ = ["validate_address_data", "validate_user_data"]
