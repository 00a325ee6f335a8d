"""Shared schema pieces: camelCase wire format and the success envelope."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON; unknown fields are ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class Envelope(CamelModel, Generic[T]):
    success: bool = True
    response: T


def blank_to_none(value: Any) -> Any:
    """Optional choice fields: "" means unset, matching is case-insensitive."""
    if isinstance(value, str):
        value = value.strip().lower()
        return value or None
    return value
