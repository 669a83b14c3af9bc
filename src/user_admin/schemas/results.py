"""Result containers returned by the service layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import User, UserAddress

GENERAL_FIELD = "general"


@dataclass(frozen=True, slots=True)
class FieldError:
    """A single field-scoped validation or business-rule failure."""

    field: str
    message: str


@dataclass(slots=True)
class UserResult:
    user: User | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(slots=True)
class AddressResult:
    address: UserAddress | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(slots=True)
class DeleteResult:
    success: bool
    error: str | None = None


def general_error(message: str) -> list[FieldError]:
    """Wrap ``message`` as the single ``general`` error of a failed call."""
    return [FieldError(field=GENERAL_FIELD, message=message)]


__all__ = [
    "GENERAL_FIELD",
    "AddressResult",
    "DeleteResult",
    "FieldError",
    "UserResult",
    "general_error",
]
