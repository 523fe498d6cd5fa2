"""Create users and destinations tables.

Revision ID: 20251207000000
Revises:
Create Date: 2025-12-07

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20251207000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DESTINATION_TYPES = ("Beach", "Mountain", "City", "Cultural", "Adventure")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    op.create_table(
        "destinations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=500), nullable=False),
        sa.Column("country_code", sa.String(length=2), nullable=False),
        sa.Column(
            "type",
            sa.Enum(*DESTINATION_TYPES, name="destination_type"),
            nullable=False,
        ),
        sa.Column(
            "last_modif",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            ondelete="CASCADE",
            onupdate="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_destinations_user_id"), "destinations", ["user_id"])
    op.create_index(op.f("ix_destinations_type"), "destinations", ["type"])
    op.create_index(op.f("ix_destinations_country_code"), "destinations", ["country_code"])
    op.create_index(op.f("ix_destinations_created_at"), "destinations", ["created_at"])


def downgrade() -> None:
    op.drop_index(op.f("ix_destinations_created_at"), table_name="destinations")
    op.drop_index(op.f("ix_destinations_country_code"), table_name="destinations")
    op.drop_index(op.f("ix_destinations_type"), table_name="destinations")
    op.drop_index(op.f("ix_destinations_user_id"), table_name="destinations")
    op.drop_table("destinations")
    sa.Enum(name="destination_type").drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
