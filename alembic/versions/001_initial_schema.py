"""Initial schema: users, plants, calendar_events.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TOKEN_STATUS = sa.Enum("ACTIVE", "REVOKED", name="tokenstatus")
PLANT_TYPE = sa.Enum(
    "FOLIAGE", "FLOWERING", "SUCCULENT", "CACTUS", "FERN",
    "HERB", "PALM", "TREE", "VEGETABLE", "OTHER",
    name="planttype",
)
PLACEMENT = sa.Enum("INDOOR", "OUTDOOR", name="placement")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("access_token", sa.String(length=256), nullable=False),
        sa.Column("token_status", TOKEN_STATUS, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_access_token"), "users", ["access_token"], unique=True)

    op.create_table(
        "plants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("plant_name", sa.String(length=255), nullable=False),
        sa.Column("type_of_plant", PLANT_TYPE, nullable=True),
        sa.Column("indoor_or_outdoor", PLACEMENT, nullable=True),
        sa.Column("image", sa.String(length=2048), nullable=True),
        sa.Column("information", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by_user", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["created_by_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_plants_owner_created", "plants", ["created_by_user", "created_at"])

    op.create_table(
        "calendar_events",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("event_title", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by_user", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["created_by_user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_calendar_events_owner_created", "calendar_events", ["created_by_user", "created_at"]
    )


def downgrade() -> None:
    op.drop_index("ix_calendar_events_owner_created", table_name="calendar_events")
    op.drop_table("calendar_events")
    op.drop_index("ix_plants_owner_created", table_name="plants")
    op.drop_table("plants")
    op.drop_index(op.f("ix_users_access_token"), table_name="users")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
    PLACEMENT.drop(op.get_bind(), checkfirst=True)
    PLANT_TYPE.drop(op.get_bind(), checkfirst=True)
    TOKEN_STATUS.drop(op.get_bind(), checkfirst=True)
