"""Service layer implementing the user CRUD contract."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import User
from ..repositories import UserRepository
from ..schemas import DeleteResult, FieldError, Page, PaginationParams, UserResult, build_page, general_error
from ..validation import validate_user_data

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email already in use"
USER_NOT_FOUND = "User not found"


class UserService:
    """Validate, persist and report on ``User`` entities.

    Write operations never raise: validation problems, business-rule
    conflicts and store failures all come back as ``FieldError`` lists.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = UserRepository(session)

    @property
    def repository(self) -> UserRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def list_users(self, pagination: PaginationParams | None = None) -> Page[User]:
        """Return one page of users ordered by last name."""
        params = pagination or PaginationParams()
        users, total = await self._repository.list_paginated(limit=params.page_size, offset=params.offset)
        return build_page(users, total, params)

    async def get_user(self, user_id: int) -> User | None:
        """Fetch a user by primary key."""
        return await self._repository.get(user_id)

    async def create_user(self, data: Mapping[str, Any]) -> UserResult:
        """Create a user after validating ``data`` and checking email uniqueness."""
        try:
            form, errors = validate_user_data(data)
            if form is None:
                return UserResult(errors=errors)

            if await self._repository.get_by_email(form.email) is not None:
                return UserResult(errors=[FieldError(field="email", message=EMAIL_IN_USE)])

            user = User(
                first_name=form.first_name or None,
                last_name=form.last_name,
                initials=form.initials or None,
                email=form.email,
                status=form.status,
            )
            await self._repository.add(user)
            await self._session.commit()
            await self._repository.refresh(user)
        except Exception:
            await self._session.rollback()
            logger.exception("Error creating user")
            return UserResult(errors=general_error("Failed to create user"))

        logger.info("User created", extra={"user_id": user.id})
        return UserResult(user=user)

    async def update_user(self, user_id: int, data: Mapping[str, Any]) -> UserResult:
        """Replace the mutable attributes of user ``user_id``.

        Existence is checked by id; the submitted email must not belong to
        any other user.
        """
        try:
            form, errors = validate_user_data(data)
            if form is None:
                return UserResult(errors=errors)

            user = await self._repository.get(user_id)
            if user is None:
                return UserResult(errors=general_error(USER_NOT_FOUND))

            owner = await self._repository.get_by_email(form.email)
            if owner is not None and owner.id != user_id:
                return UserResult(errors=[FieldError(field="email", message=EMAIL_IN_USE)])

            user.first_name = form.first_name or None
            user.last_name = form.last_name
            user.initials = form.initials or None
            user.email = form.email
            user.status = form.status
            await self._session.commit()
            await self._repository.refresh(user)
        except Exception:
            await self._session.rollback()
            logger.exception("Error updating user", extra={"user_id": user_id})
            return UserResult(errors=general_error("Failed to update user"))

        logger.info("User updated", extra={"user_id": user_id})
        return UserResult(user=user)

    async def delete_user(self, user_id: int) -> DeleteResult:
        """Delete user ``user_id``; the store removes the user's addresses."""
        try:
            user = await self._repository.get(user_id)
            if user is None:
                logger.warning("User to delete does not exist", extra={"user_id": user_id})
                return DeleteResult(success=False, error="Failed to delete user")
            await self._repository.delete(user)
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            logger.exception("Error deleting user", extra={"user_id": user_id})
            return DeleteResult(success=False, error="Failed to delete user")

        logger.info("User deleted", extra={"user_id": user_id})
        return DeleteResult(success=True)


__all__ = ["EMAIL_IN_USE", "USER_NOT_FOUND", "UserService"]
