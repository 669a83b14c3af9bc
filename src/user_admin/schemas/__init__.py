"""Pydantic forms, pagination and result containers."""

from __future__ import annotations

from .address import ADDRESS_FIELD_MAP, AddressForm, AddressKey, UserAddressForm
from .pagination import Page, PaginationParams, build_page, offset_for, total_pages
from .results import AddressResult, DeleteResult, FieldError, UserResult, general_error
from .user import USER_FIELD_MAP, UserForm

__all__ = [
    "ADDRESS_FIELD_MAP",
    "USER_FIELD_MAP",
    "AddressForm",
    "AddressKey",
    "AddressResult",
    "DeleteResult",
    "FieldError",
    "Page",
    "PaginationParams",
    "UserAddressForm",
    "UserForm",
    "UserResult",
    "build_page",
    "general_error",
    "offset_for",
    "total_pages",
]
