"""Repository for interacting with user persistence models."""

from __future__ import annotations

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Concrete repository for CRUD operations on ``User`` entities."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, User)

    async def get_by_email(self, email: str) -> User | None:
        """Return a user matching the supplied email if it exists."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def list_paginated(self, *, limit: int = 10, offset: int = 0) -> tuple[list[User], int]:
        """Return a slice of users ordered by last name along with the total count."""
        query = select(User).order_by(User.last_name, User.id)
        return await self._paginate(query, self._count_query(), limit=limit, offset=offset)

    async def list_existing_emails(self, emails: list[str]) -> set[str]:
        """Return the subset of ``emails`` already registered."""
        if not emails:
            return set()
        result = await self.session.execute(select(User.email).where(User.email.in_(emails)))
        return set(result.scalars().all())
