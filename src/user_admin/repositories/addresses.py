"""Repository for interacting with address persistence models."""

from __future__ import annotations

from datetime import datetime

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import AddressType, UserAddress
from .base import BaseRepository


class AddressRepository(BaseRepository[UserAddress]):
    """Concrete repository for ``UserAddress`` rows keyed by user, type and validity."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, UserAddress)

    async def get_by_key(
        self,
        user_id: int,
        address_type: AddressType,
        valid_from: datetime,
    ) -> UserAddress | None:
        """Return the address matching the exact composite key."""
        result = await self.session.execute(
            select(UserAddress).where(
                UserAddress.user_id == user_id,
                UserAddress.address_type == address_type,
                UserAddress.valid_from == valid_from,
            )
        )
        return result.scalar_one_or_none()

    async def list_paginated_for_user(
        self,
        user_id: int,
        *,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[UserAddress], int]:
        """Return a slice of a user's addresses, most recent of each type first."""
        query = (
            select(UserAddress)
            .where(UserAddress.user_id == user_id)
            .order_by(col(UserAddress.address_type).asc(), col(UserAddress.valid_from).desc())
        )
        count_query = self._count_query().where(UserAddress.user_id == user_id)
        return await self._paginate(query, count_query, limit=limit, offset=offset)
