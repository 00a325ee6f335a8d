"""Plant model."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from plant_tracker.core.enums import Placement, PlantType
from plant_tracker.db.base import Base


class Plant(Base):
    """A plant owned by the user who created it."""

    __tablename__ = "plants"
    __table_args__ = (
        Index("ix_plants_owner_created", "created_by_user", "created_at"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    plant_name: Mapped[str] = mapped_column(String(255), nullable=False)
    type_of_plant: Mapped[PlantType | None] = mapped_column(Enum(PlantType), nullable=True)
    indoor_or_outdoor: Mapped[Placement | None] = mapped_column(Enum(Placement), nullable=True)
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)  # URL
    information: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    created_by_user: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    owner: Mapped["User"] = relationship("User", back_populates="plants")
