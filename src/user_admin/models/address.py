"""Address domain models built with SQLModel."""

from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

from .common import TimestampMixin, utcnow

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from .user import User


class AddressType(str, Enum):
    """Kinds of addresses a user may keep a history of."""

    HOME = "HOME"
    WORK = "WORK"
    INVOICE = "INVOICE"
    POSTAL = "POSTAL"

    @property
    def label(self) -> str:
        """Human readable name of the address type."""
        return self.value.capitalize()


class UserAddressBase(SQLModel, table=False):
    """Shared attributes for address models."""

    post_code: str = Field(
        max_length=6,
        sa_column=sa.Column(sa.String(length=6), nullable=False),
    )
    city: str = Field(
        max_length=60,
        sa_column=sa.Column(sa.String(length=60), nullable=False),
    )
    country_code: str = Field(
        max_length=3,
        sa_column=sa.Column(sa.String(length=3), nullable=False),
    )
    street: str = Field(
        max_length=100,
        sa_column=sa.Column(sa.String(length=100), nullable=False),
    )
    building_number: str = Field(
        max_length=60,
        sa_column=sa.Column(sa.String(length=60), nullable=False),
    )


class UserAddress(UserAddressBase, TimestampMixin, table=True):
    """Persistent address model identified by user, type and validity start."""

    __tablename__ = "users_addresses"
    __table_args__ = (sa.Index("ix_users_addresses_user_id", "user_id"),)

    user_id: int = Field(
        sa_column=sa.Column(
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )
    address_type: AddressType = Field(
        sa_column=sa.Column(
            sa.Enum(AddressType, name="address_type", native_enum=False, validate_strings=True),
            primary_key=True,
        ),
    )
    valid_from: datetime = Field(
        default_factory=utcnow,
        sa_column=sa.Column(sa.DateTime(timezone=True), primary_key=True),
    )
    user: "User" = Relationship(back_populates="addresses")


__all__ = ["AddressType", "UserAddress", "UserAddressBase"]
