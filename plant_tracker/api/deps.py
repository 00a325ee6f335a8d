"""Request dependencies: settings, authentication and ownership scoping.

Each route lists its interceptors through FastAPI dependencies; an interceptor
short-circuits by raising an AppError, which never reaches the handler body.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends, Header, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from plant_tracker.core.config import Settings
from plant_tracker.core.enums import TokenStatus
from plant_tracker.core.errors import AuthenticationError, BackendUnavailableError, NotFoundError
from plant_tracker.db.collection import Collection
from plant_tracker.db.session import get_db
from plant_tracker.models.user import User

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


async def resolve_token(db: AsyncSession, token: str | None) -> User | None:
    """Find the active user holding ``token``; the header value is compared verbatim."""
    if not token:
        return None
    try:
        return await Collection(db, User).find_one(
            access_token=token, token_status=TokenStatus.ACTIVE
        )
    except SQLAlchemyError as exc:
        logger.error("Token lookup failed", exc_info=exc)
        raise BackendUnavailableError() from exc


async def get_current_user(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Gate for owner-scoped routes: 401 unless the token resolves to a user."""
    user = await resolve_token(db, authorization)
    if user is None:
        logger.debug("Rejected request: %s", "no token" if not authorization else "unknown token")
        raise AuthenticationError()
    logger.debug("Authenticated user %s", user.id)
    return user


async def get_by_id_caller(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> User | None:
    """Caller for get/update/delete by id.

    Legacy mode (strict_ownership off) does not authenticate at all and
    returns None. Strict mode requires a valid token.
    """
    if not settings.strict_ownership:
        return None
    return await get_current_user(authorization=authorization, db=db)


def owner_filter(user: User) -> dict[str, Any]:
    """Predicate restricting a listing to the caller's documents."""
    return {"created_by_user": user.id}


def owner_stamp(user: User, values: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``values`` carrying the caller as owner (any client value is overwritten)."""
    return {**values, "created_by_user": user.id}


def ensure_owner(resource: Any, caller: User | None, message: str = "Not found") -> None:
    """In strict mode, another user's resource is reported as missing."""
    if caller is not None and resource.created_by_user != caller.id:
        logger.warning("User %s tried to access %s owned by another user", caller.id, resource.id)
        raise NotFoundError(message)
