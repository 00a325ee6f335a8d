"""Calendar event endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from plant_tracker.api.deps import (
    ensure_owner,
    get_app_settings,
    get_by_id_caller,
    get_current_user,
    owner_filter,
    owner_stamp,
)
from plant_tracker.core.config import Settings
from plant_tracker.core.errors import NotFoundError
from plant_tracker.db.collection import Collection
from plant_tracker.db.session import get_db
from plant_tracker.models.calendar_event import CalendarEvent
from plant_tracker.models.user import User
from plant_tracker.schemas.calendar_event import (
    CalendarEventComplete,
    CalendarEventCreate,
    CalendarEventRead,
)
from plant_tracker.schemas.common import Envelope

router = APIRouter()

EVENT_NOT_FOUND = "Sorry! Can't find an event with that id."


async def _get_event(db: AsyncSession, event_id: str, caller: User | None) -> CalendarEvent:
    event = await Collection(db, CalendarEvent).find_by_id(event_id)
    if event is None:
        raise NotFoundError(EVENT_NOT_FOUND)
    ensure_owner(event, caller, EVENT_NOT_FOUND)
    return event


@router.get("/calendarevents", response_model=Envelope[list[CalendarEventRead]])
async def list_events(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """The caller's events, newest first."""
    events = await Collection(db, CalendarEvent).find(
        order_by=CalendarEvent.created_at.desc(),
        limit=settings.page_size,
        **owner_filter(user),
    )
    return Envelope[list[CalendarEventRead]](
        response=[CalendarEventRead.model_validate(e) for e in events]
    )


@router.post("/calendarevents", response_model=Envelope[CalendarEventRead], status_code=201)
async def create_event(
    payload: CalendarEventCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    event = await Collection(db, CalendarEvent).insert_one(owner_stamp(user, payload.model_dump()))
    return Envelope[CalendarEventRead](response=CalendarEventRead.model_validate(event))


@router.patch("/calendarevents/{event_id}/completed", response_model=Envelope[CalendarEventRead])
async def complete_event(
    event_id: str,
    payload: CalendarEventComplete,
    caller: User | None = Depends(get_by_id_caller),
    db: AsyncSession = Depends(get_db),
):
    """Mark an event done (or not done)."""
    event = await _get_event(db, event_id, caller)
    event = await Collection(db, CalendarEvent).update(event, {"is_completed": payload.is_completed})
    return Envelope[CalendarEventRead](response=CalendarEventRead.model_validate(event))


@router.delete("/event/{event_id}", response_model=Envelope[CalendarEventRead])
async def delete_event(
    event_id: str,
    caller: User | None = Depends(get_by_id_caller),
    db: AsyncSession = Depends(get_db),
):
    event = await _get_event(db, event_id, caller)
    deleted = CalendarEventRead.model_validate(event)
    await Collection(db, CalendarEvent).delete(event)
    return Envelope[CalendarEventRead](response=deleted)
