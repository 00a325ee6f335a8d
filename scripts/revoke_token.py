"""Revoke (or reactivate) a user's access token.

Usage:
    python scripts/revoke_token.py <username> [--reactivate]

There is no HTTP endpoint for this; a revoked token is rejected with 401 by
every owner-scoped route and the user can no longer log in.
"""

import asyncio
import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), ".."))

from plant_tracker.core.config import get_settings
from plant_tracker.core.enums import TokenStatus
from plant_tracker.db.session import Database
from plant_tracker.services.accounts import set_token_status


async def main(argv: list[str]) -> int:
    if not argv:
        print(__doc__)
        return 2
    username = argv[0]
    status = TokenStatus.ACTIVE if "--reactivate" in argv[1:] else TokenStatus.REVOKED
    database = Database(get_settings())
    try:
        async with database.session_maker() as session:
            user = await set_token_status(session, username, status)
            await session.commit()
    finally:
        await database.dispose()
    if user is None:
        print(f"No user named {username!r}")
        return 1
    print(f"Token for {username!r} is now {status.value}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:])))
