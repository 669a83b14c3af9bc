"""User domain models built with SQLModel."""

from enum import Enum
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlmodel import Field, Relationship, SQLModel

from .common import TimestampMixin

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from .address import UserAddress


class UserStatus(str, Enum):
    """Lifecycle states of an administered user."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

    @property
    def label(self) -> str:
        """Human readable name of the status."""
        return self.value.capitalize()


class UserBase(SQLModel, table=False):
    """Shared attributes for user models."""

    first_name: str | None = Field(
        default=None,
        max_length=60,
        sa_column=sa.Column(sa.String(length=60), nullable=True),
    )
    last_name: str = Field(
        max_length=100,
        sa_column=sa.Column(sa.String(length=100), nullable=False),
    )
    initials: str | None = Field(
        default=None,
        max_length=30,
        sa_column=sa.Column(sa.String(length=30), nullable=True),
    )
    email: str = Field(
        max_length=100,
        sa_column=sa.Column(
            sa.String(length=100),
            nullable=False,
            unique=True,
        ),
    )
    status: UserStatus = Field(
        default=UserStatus.ACTIVE,
        sa_column=sa.Column(
            sa.Enum(UserStatus, name="user_status", native_enum=False, validate_strings=True),
            nullable=False,
            server_default=UserStatus.ACTIVE.value,
        ),
    )


class User(UserBase, TimestampMixin, table=True):
    """Persistent user model."""

    __tablename__ = "users"
    __table_args__ = (sa.Index("ix_users_last_name", "last_name"),)

    id: int | None = Field(default=None, primary_key=True)
    addresses: list["UserAddress"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "passive_deletes": True},
    )


__all__ = ["User", "UserBase", "UserStatus"]
