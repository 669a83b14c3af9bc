"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .addresses import AddressRepository
from .users import UserRepository

__all__ = ["AddressRepository", "UserRepository"]
