"""Service layer implementing the address CRUD contract."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlmodel.ext.asyncio.session import AsyncSession

from ..models import UserAddress, utcnow
from ..repositories import AddressRepository
from ..schemas import AddressKey, AddressResult, DeleteResult, Page, PaginationParams, build_page, general_error
from ..validation import validate_address_data

logger = logging.getLogger(__name__)


class AddressService:
    """Validate, persist and report on the addresses owned by users."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._repository = AddressRepository(session)

    @property
    def repository(self) -> AddressRepository:
        """Expose the underlying repository for advanced scenarios."""
        return self._repository

    async def list_addresses(self, user_id: int, pagination: PaginationParams | None = None) -> Page[UserAddress]:
        """Return one page of a user's addresses, grouped by type, newest first."""
        params = pagination or PaginationParams()
        addresses, total = await self._repository.list_paginated_for_user(
            user_id,
            limit=params.page_size,
            offset=params.offset,
        )
        return build_page(addresses, total, params)

    async def get_address(self, key: AddressKey) -> UserAddress | None:
        """Fetch the address identified by ``key``."""
        return await self._repository.get_by_key(key.user_id, key.address_type, key.valid_from)

    async def create_address(self, data: Mapping[str, Any]) -> AddressResult:
        """Create an address; ``valid_from`` defaults to the current time."""
        try:
            form, errors = validate_address_data(data)
            if form is None:
                return AddressResult(errors=errors)

            address = UserAddress(
                user_id=form.user_id,
                address_type=form.address_type,
                valid_from=form.valid_from or utcnow(),
                post_code=form.post_code,
                city=form.city,
                country_code=form.country_code,
                street=form.street,
                building_number=form.building_number,
            )
            await self._repository.add(address)
            await self._session.commit()
            await self._repository.refresh(address)
        except Exception:
            await self._session.rollback()
            logger.exception("Error creating address")
            return AddressResult(errors=general_error("Failed to create address"))

        logger.info(
            "Address created",
            extra={"user_id": address.user_id, "address_type": address.address_type.value},
        )
        return AddressResult(address=address)

    async def update_address(self, key: AddressKey, data: Mapping[str, Any]) -> AddressResult:
        """Update the address stored under ``key``.

        The key fields are identity: ``address_type`` and ``valid_from`` are
        never changed, whatever the payload carries.
        """
        merged = {
            "address_type": key.address_type,
            **data,
            "user_id": key.user_id,
            "valid_from": key.valid_from,
        }
        try:
            form, errors = validate_address_data(merged)
            if form is None:
                return AddressResult(errors=errors)

            address = await self._repository.get_by_key(key.user_id, key.address_type, key.valid_from)
            if address is None:
                logger.warning("Address to update does not exist", extra={"user_id": key.user_id})
                return AddressResult(errors=general_error("Failed to update address"))

            address.post_code = form.post_code
            address.city = form.city
            address.country_code = form.country_code
            address.street = form.street
            address.building_number = form.building_number
            await self._session.commit()
            await self._repository.refresh(address)
        except Exception:
            await self._session.rollback()
            logger.exception("Error updating address", extra={"user_id": key.user_id})
            return AddressResult(errors=general_error("Failed to update address"))

        logger.info(
            "Address updated",
            extra={"user_id": key.user_id, "address_type": key.address_type.value},
        )
        return AddressResult(address=address)

    async def delete_address(self, key: AddressKey) -> DeleteResult:
        """Delete exactly the address stored under ``key``."""
        try:
            address = await self._repository.get_by_key(key.user_id, key.address_type, key.valid_from)
            if address is None:
                logger.warning("Address to delete does not exist", extra={"user_id": key.user_id})
                return DeleteResult(success=False, error="Failed to delete address")
            await self._repository.delete(address)
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            logger.exception("Error deleting address", extra={"user_id": key.user_id})
            return DeleteResult(success=False, error="Failed to delete address")

        logger.info(
            "Address deleted",
            extra={"user_id": key.user_id, "address_type": key.address_type.value},
        )
        return DeleteResult(success=True)


__all__ = ["AddressService"]
