"""Calendar event schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from plant_tracker.schemas.common import CamelModel


class CalendarEventCreate(CamelModel):
    event_title: str = Field(..., min_length=1, max_length=255)
    start_date: datetime


class CalendarEventComplete(CamelModel):
    is_completed: bool


class CalendarEventRead(CamelModel):
    id: UUID
    event_title: str
    start_date: datetime
    is_completed: bool
    created_at: datetime
    created_by_user: UUID
