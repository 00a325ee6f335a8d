"""ORM models - import all so Base.metadata is complete for migrations."""

from plant_tracker.models.calendar_event import CalendarEvent
from plant_tracker.models.plant import Plant
from plant_tracker.models.user import User

__all__ = [
    "CalendarEvent",
    "Plant",
    "User",
]
