"""create users and users_addresses tables"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4c1d2e7a9b30"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("first_name", sa.String(length=60), nullable=True),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("initials", sa.String(length=30), nullable=True),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column(
            "status",
            sa.Enum(
                "ACTIVE",
                "INACTIVE",
                name="user_status",
                native_enum=False,
                validate_strings=True,
            ),
            nullable=False,
            server_default="ACTIVE",
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            server_onupdate=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )
    op.create_index("ix_users_last_name", "users", ["last_name"], unique=False)

    op.create_table(
        "users_addresses",
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column(
            "address_type",
            sa.Enum(
                "HOME",
                "WORK",
                "INVOICE",
                "POSTAL",
                name="address_type",
                native_enum=False,
                validate_strings=True,
            ),
            nullable=False,
        ),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=False),
        sa.Column("post_code", sa.String(length=6), nullable=False),
        sa.Column("city", sa.String(length=60), nullable=False),
        sa.Column("country_code", sa.String(length=3), nullable=False),
        sa.Column("street", sa.String(length=100), nullable=False),
        sa.Column("building_number", sa.String(length=60), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
            server_onupdate=sa.func.now(),
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_users_addresses_user_id_users",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("user_id", "address_type", "valid_from", name="pk_users_addresses"),
    )
    op.create_index("ix_users_addresses_user_id", "users_addresses", ["user_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_users_addresses_user_id", table_name="users_addresses")
    op.drop_table("users_addresses")
    op.drop_index("ix_users_last_name", table_name="users")
    op.drop_table("users")
