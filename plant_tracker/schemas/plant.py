"""Plant schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field, field_validator

from plant_tracker.core.enums import Placement, PlantType
from plant_tracker.schemas.common import CamelModel, blank_to_none


class PlantBase(CamelModel):
    plant_name: str = Field(..., min_length=1, max_length=255)
    type_of_plant: PlantType | None = None
    indoor_or_outdoor: Placement | None = None
    image: str | None = Field(None, max_length=2048)
    information: str | None = None

    @field_validator("type_of_plant", "indoor_or_outdoor", mode="before")
    @classmethod
    def _normalize_choice(cls, v):
        return blank_to_none(v)


class PlantCreate(PlantBase):
    pass


class PlantUpdate(CamelModel):
    """Only these fields can be changed after creation."""

    plant_name: str | None = Field(None, min_length=1, max_length=255)
    type_of_plant: PlantType | None = None
    indoor_or_outdoor: Placement | None = None
    information: str | None = None

    @field_validator("type_of_plant", "indoor_or_outdoor", mode="before")
    @classmethod
    def _normalize_choice(cls, v):
        return blank_to_none(v)


class PlantRead(PlantBase):
    id: UUID
    created_at: datetime
    created_by_user: UUID


class PlantDetail(CamelModel):
    """GET /plant/{id} uses ``data`` instead of ``response``."""

    data: PlantRead
    success: bool = True
