"""Service layer exposing the user and address CRUD contracts."""

from __future__ import annotations

from .addresses import AddressService
from .users import UserService

__all__ = ["AddressService", "UserService"]
