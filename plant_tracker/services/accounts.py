"""Account maintenance that has no HTTP surface (operator scripts, tests)."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from plant_tracker.core.enums import TokenStatus
from plant_tracker.db.collection import Collection
from plant_tracker.models import User  # registers every mapper

logger = logging.getLogger(__name__)


async def set_token_status(db: AsyncSession, username: str, status: TokenStatus) -> User | None:
    """Move a user's token to ``status``; returns None when no such user exists."""
    users = Collection(db, User)
    user = await users.find_one(username=username)
    if user is None:
        return None
    if user.token_status != status:
        user = await users.update(user, {"token_status": status})
        logger.info("Token for user %s is now %s", user.id, status.value)
    return user
