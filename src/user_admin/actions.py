"""In-process operations consumed by the presentation layer.

Every call opens its own session on the injected ``Database`` and hands it
to the matching service, so no state survives between calls.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .db import Database
from .models import User, UserAddress
from .schemas import (
    AddressKey,
    AddressResult,
    DeleteResult,
    Page,
    PaginationParams,
    UserResult,
)
from .schemas.pagination import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from .services import AddressService, UserService


class AdminActions:
    """Facade over ``UserService`` and ``AddressService``."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def list_users(self, page: int = DEFAULT_PAGE, page_size: int = DEFAULT_PAGE_SIZE) -> Page[User]:
        pagination = PaginationParams(page=page, page_size=page_size)
        async with self._database.session() as session:
            return await UserService(session).list_users(pagination)

    async def get_user(self, user_id: int) -> User | None:
        async with self._database.session() as session:
            return await UserService(session).get_user(user_id)

    async def create_user(self, data: Mapping[str, Any]) -> UserResult:
        async with self._database.session() as session:
            return await UserService(session).create_user(data)

    async def update_user(self, user_id: int, data: Mapping[str, Any]) -> UserResult:
        async with self._database.session() as session:
            return await UserService(session).update_user(user_id, data)

    async def delete_user(self, user_id: int) -> DeleteResult:
        async with self._database.session() as session:
            return await UserService(session).delete_user(user_id)

    async def list_addresses(
        self,
        user_id: int,
        page: int = DEFAULT_PAGE,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> Page[UserAddress]:
        pagination = PaginationParams(page=page, page_size=page_size)
        async with self._database.session() as session:
            return await AddressService(session).list_addresses(user_id, pagination)

    async def get_address(self, key: AddressKey) -> UserAddress | None:
        async with self._database.session() as session:
            return await AddressService(session).get_address(key)

    async def create_address(self, data: Mapping[str, Any]) -> AddressResult:
        async with self._database.session() as session:
            return await AddressService(session).create_address(data)

    async def update_address(self, key: AddressKey, data: Mapping[str, Any]) -> AddressResult:
        async with self._database.session() as session:
            return await AddressService(session).update_address(key, data)

    async def delete_address(self, key: AddressKey) -> DeleteResult:
        async with self._database.session() as session:
            return await AddressService(session).delete_address(key)


__all__ = ["AdminActions"]
