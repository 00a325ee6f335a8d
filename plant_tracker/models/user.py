"""User model - login credentials and the long-lived access token."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plant_tracker.core.constants import ACCESS_TOKEN_LENGTH
from plant_tracker.core.enums import TokenStatus
from plant_tracker.db.base import Base


class User(Base):
    """Registered user. The token is issued once at creation and never rotated."""

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    access_token: Mapped[str] = mapped_column(
        String(ACCESS_TOKEN_LENGTH), nullable=False, unique=True, index=True
    )
    token_status: Mapped[TokenStatus] = mapped_column(
        Enum(TokenStatus), nullable=False, default=TokenStatus.ACTIVE
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )

    plants: Mapped[list["Plant"]] = relationship(
        "Plant", back_populates="owner", cascade="all, delete-orphan"
    )
    calendar_events: Mapped[list["CalendarEvent"]] = relationship(
        "CalendarEvent", back_populates="owner", cascade="all, delete-orphan"
    )
