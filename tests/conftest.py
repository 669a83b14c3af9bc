from __future__ import annotations

from collections.abc import AsyncIterator, Callable
from datetime import datetime, timezone
from itertools import count
from typing import Any

import pytest
import pytest_asyncio
from sqlalchemy.pool import StaticPool
from sqlmodel.ext.asyncio.session import AsyncSession

from user_admin.actions import AdminActions
from user_admin.db import Database
from user_admin.models import AddressType, UserStatus


@pytest_asyncio.fixture
async def database() -> AsyncIterator[Database]:
    database = Database(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await database.connect()
    await database.create_all()
    try:
        yield database
    finally:
        await database.disconnect()


@pytest_asyncio.fixture
async def session(database: Database) -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


@pytest.fixture
def actions(database: Database) -> AdminActions:
    return AdminActions(database)


@pytest.fixture
def user_payload() -> Callable[..., dict[str, Any]]:
    counter = count(1)

    def _factory(**overrides: Any) -> dict[str, Any]:
        number = next(counter)
        payload: dict[str, Any] = {
            "first_name": f"First{number}",
            "last_name": f"Last{number}",
            "initials": f"F{number}",
            "email": f"user{number}@example.com",
            "status": UserStatus.ACTIVE.value,
        }
        payload.update(overrides)
        return payload

    return _factory


@pytest.fixture
def address_payload() -> Callable[..., dict[str, Any]]:
    def _factory(user_id: int, **overrides: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "user_id": user_id,
            "address_type": AddressType.HOME.value,
            "valid_from": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "post_code": "00-950",
            "city": "Warsaw",
            "country_code": "POL",
            "street": "Marszalkowska",
            "building_number": "10A",
        }
        payload.update(overrides)
        return payload

    return _factory
