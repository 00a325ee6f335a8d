"""Plant endpoints: owner-scoped list/create plus by-id read, update and delete."""

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
from plant_tracker.core.errors import NotFoundError, ValidationError
from plant_tracker.db.collection import Collection
from plant_tracker.db.session import get_db
from plant_tracker.models.plant import Plant
from plant_tracker.models.user import User
from plant_tracker.schemas.common import Envelope
from plant_tracker.schemas.plant import PlantCreate, PlantDetail, PlantRead, PlantUpdate

router = APIRouter()

PLANT_NOT_FOUND = "Sorry! Can't find a plant with that id."


async def _get_plant(db: AsyncSession, plant_id: str, caller: User | None) -> Plant:
    plant = await Collection(db, Plant).find_by_id(plant_id)
    if plant is None:
        raise NotFoundError(PLANT_NOT_FOUND)
    ensure_owner(plant, caller, PLANT_NOT_FOUND)
    return plant


@router.get("/plants", response_model=Envelope[list[PlantRead]])
async def list_plants(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    """The caller's plants, newest first."""
    plants = await Collection(db, Plant).find(
        order_by=Plant.created_at.desc(),
        limit=settings.page_size,
        **owner_filter(user),
    )
    return Envelope[list[PlantRead]](response=[PlantRead.model_validate(p) for p in plants])


@router.post("/plants", response_model=Envelope[PlantRead], status_code=201)
async def create_plant(
    payload: PlantCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    plant = await Collection(db, Plant).insert_one(owner_stamp(user, payload.model_dump()))
    return Envelope[PlantRead](response=PlantRead.model_validate(plant))


@router.get("/plant/{plant_id}", response_model=PlantDetail)
async def get_plant(
    plant_id: str,
    caller: User | None = Depends(get_by_id_caller),
    db: AsyncSession = Depends(get_db),
):
    plant = await _get_plant(db, plant_id, caller)
    return PlantDetail(data=PlantRead.model_validate(plant))


@router.patch("/plant/{plant_id}/updated", response_model=Envelope[PlantRead])
async def update_plant(
    plant_id: str,
    payload: PlantUpdate,
    caller: User | None = Depends(get_by_id_caller),
    db: AsyncSession = Depends(get_db),
):
    """Partial update of name, type, placement and information only."""
    plant = await _get_plant(db, plant_id, caller)
    values = payload.model_dump(exclude_unset=True)
    if "plant_name" in values and values["plant_name"] is None:
        raise ValidationError(details=[{"field": "plantName", "message": "cannot be empty"}])
    plant = await Collection(db, Plant).update(plant, values)
    return Envelope[PlantRead](response=PlantRead.model_validate(plant))


@router.delete("/plant/{plant_id}", response_model=Envelope[PlantRead])
async def delete_plant(
    plant_id: str,
    caller: User | None = Depends(get_by_id_caller),
    db: AsyncSession = Depends(get_db),
):
    """Delete a plant; the removed document is returned."""
    plant = await _get_plant(db, plant_id, caller)
    deleted = PlantRead.model_validate(plant)
    await Collection(db, Plant).delete(plant)
    return Envelope[PlantRead](response=deleted)
