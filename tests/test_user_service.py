from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from user_admin.models import UserStatus
from user_admin.schemas import FieldError, PaginationParams
from user_admin.services import AddressService, UserService

pytestmark = pytest.mark.asyncio

PayloadFactory = Callable[..., dict[str, Any]]


async def test_create_user_persists_normalised_values(session: AsyncSession) -> None:
    service = UserService(session)

    result = await service.create_user(
        {"first_name": "", "last_name": "Doe", "initials": "", "email": "d@x.com", "status": "ACTIVE"}
    )

    assert result.ok
    assert result.user is not None
    assert result.user.id is not None
    assert result.user.first_name is None
    assert result.user.initials is None
    assert result.user.status == UserStatus.ACTIVE
    assert result.user.created_at is not None

    fetched = await service.get_user(result.user.id)
    assert fetched is not None
    assert fetched.email == "d@x.com"


async def test_create_user_rejects_duplicate_email(session: AsyncSession, user_payload: PayloadFactory) -> None:
    service = UserService(session)
    await service.create_user(user_payload(email="taken@example.com"))

    result = await service.create_user(user_payload(email="taken@example.com"))

    assert result.user is None
    assert result.errors == [FieldError(field="email", message="Email already in use")]
    page = await service.list_users()
    assert page.total_items == 1


async def test_create_user_with_invalid_payload_writes_nothing(session: AsyncSession) -> None:
    service = UserService(session)

    result = await service.create_user({"email": "broken", "status": "ACTIVE"})

    assert not result.ok
    assert {error.field for error in result.errors} == {"lastName", "email"}
    page = await service.list_users()
    assert page.total_items == 0


async def test_list_users_orders_by_last_name_and_paginates(
    session: AsyncSession,
    user_payload: PayloadFactory,
) -> None:
    service = UserService(session)
    for last_name in ["Evans", "Adams", "Clark", "Brown", "Davis"]:
        await service.create_user(user_payload(last_name=last_name))

    first = await service.list_users(PaginationParams(page=1, page_size=2))
    last = await service.list_users(PaginationParams(page=3, page_size=2))
    beyond = await service.list_users(PaginationParams(page=4, page_size=2))

    assert [user.last_name for user in first.items] == ["Adams", "Brown"]
    assert [user.last_name for user in last.items] == ["Evans"]
    assert beyond.items == []
    assert first.total_items == 5
    assert first.total_pages == 3
    assert last.current_page == 3


async def test_update_user_replaces_mutable_fields(session: AsyncSession, user_payload: PayloadFactory) -> None:
    service = UserService(session)
    created = await service.create_user(user_payload())
    assert created.user is not None
    user_id = created.user.id

    result = await service.update_user(
        user_id,
        {"first_name": "", "last_name": "Renamed", "email": "renamed@example.com", "status": "INACTIVE"},
    )

    assert result.ok
    assert result.user is not None
    assert result.user.id == user_id
    assert result.user.first_name is None
    assert result.user.last_name == "Renamed"
    assert result.user.email == "renamed@example.com"
    assert result.user.status == UserStatus.INACTIVE


async def test_update_user_keeps_own_email(session: AsyncSession, user_payload: PayloadFactory) -> None:
    service = UserService(session)
    payload = user_payload()
    created = await service.create_user(payload)
    assert created.user is not None

    result = await service.update_user(created.user.id, {**payload, "last_name": "Same Email"})

    assert result.ok
    assert result.user is not None
    assert result.user.last_name == "Same Email"


async def test_update_user_rejects_email_of_another_user(
    session: AsyncSession,
    user_payload: PayloadFactory,
) -> None:
    service = UserService(session)
    await service.create_user(user_payload(email="first@example.com"))
    second = await service.create_user(user_payload(email="second@example.com"))
    assert second.user is not None

    result = await service.update_user(second.user.id, user_payload(email="first@example.com"))

    assert result.errors == [FieldError(field="email", message="Email already in use")]
    unchanged = await service.get_user(second.user.id)
    assert unchanged is not None
    assert unchanged.email == "second@example.com"


async def test_update_missing_user_reports_not_found(session: AsyncSession, user_payload: PayloadFactory) -> None:
    service = UserService(session)

    result = await service.update_user(9999, user_payload())

    assert result.errors == [FieldError(field="general", message="User not found")]


async def test_update_user_validates_before_lookup(session: AsyncSession) -> None:
    service = UserService(session)

    result = await service.update_user(9999, {"last_name": "", "email": "x@example.com", "status": "ACTIVE"})

    assert result.errors == [FieldError(field="lastName", message="Last name is required")]


async def test_delete_user_cascades_to_addresses(
    session: AsyncSession,
    user_payload: PayloadFactory,
    address_payload: PayloadFactory,
) -> None:
    users = UserService(session)
    addresses = AddressService(session)
    created = await users.create_user(user_payload())
    assert created.user is not None
    user_id = created.user.id
    for address_type in ["HOME", "WORK", "POSTAL"]:
        result = await addresses.create_address(address_payload(user_id, address_type=address_type))
        assert result.ok

    deleted = await users.delete_user(user_id)

    assert deleted.success is True
    assert deleted.error is None
    assert await users.get_user(user_id) is None
    remaining = await addresses.list_addresses(user_id)
    assert remaining.total_items == 0
    assert remaining.items == []


async def test_delete_missing_user_reports_failure(session: AsyncSession) -> None:
    result = await UserService(session).delete_user(4242)

    assert result.success is False
    assert result.error == "Failed to delete user"
