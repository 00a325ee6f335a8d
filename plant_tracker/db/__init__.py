"""Database package: engine handle, session dependency, collections."""

from plant_tracker.db.collection import Collection
from plant_tracker.db.session import Database, get_db

__all__ = ["Collection", "Database", "get_db"]
