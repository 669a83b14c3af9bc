"""Domain models for users and their addresses."""

from __future__ import annotations

from .address import AddressType, UserAddress, UserAddressBase
from .common import TimestampMixin, utcnow
from .user import User, UserBase, UserStatus

__all__ = [
    "AddressType",
    "TimestampMixin",
    "User",
    "UserAddress",
    "UserAddressBase",
    "UserBase",
    "UserStatus",
    "utcnow",
]
