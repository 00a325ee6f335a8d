"""Create all tables directly from the ORM metadata (dev databases; use Alembic elsewhere)."""

import asyncio
import os
import sys

# Add parent directory to path so we can import plant_tracker
sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from plant_tracker.core.config import get_settings
from plant_tracker.db.session import Database


async def main(drop: bool = False):
    database = Database(get_settings())
    try:
        if drop:
            print("Dropping all tables...")
            await database.drop_tables()
        print("Creating tables...")
        await database.create_tables()
        print("Done.")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main(drop="--drop" in sys.argv[1:]))
