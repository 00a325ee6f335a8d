"""Shared enums for models and API."""

from enum import Enum


class PlantType(str, Enum):
    """Kind of plant (free choice in the client dropdown)."""

    FOLIAGE = "foliage"
    FLOWERING = "flowering"
    SUCCULENT = "succulent"
    CACTUS = "cactus"
    FERN = "fern"
    HERB = "herb"
    PALM = "palm"
    TREE = "tree"
    VEGETABLE = "vegetable"
    OTHER = "other"


class Placement(str, Enum):
    """Where the plant lives."""

    INDOOR = "indoor"
    OUTDOOR = "outdoor"


class TokenStatus(str, Enum):
    """Access token lifecycle: issued as active, only an operator revokes."""

    ACTIVE = "active"
    REVOKED = "revoked"
