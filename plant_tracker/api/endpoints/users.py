"""Registration and login."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from plant_tracker.core.enums import TokenStatus
from plant_tracker.core.errors import AuthenticationError, CredentialMismatchError, ValidationError
from plant_tracker.core.security import (
    hash_password,
    issue_access_token,
    validate_password_policy,
    verify_password,
)
from plant_tracker.db.collection import Collection
from plant_tracker.db.session import get_db
from plant_tracker.models.user import User
from plant_tracker.schemas.common import Envelope
from plant_tracker.schemas.user import LoginResponse, RegisteredUser, UserLogin, UserRegister

logger = logging.getLogger(__name__)
router = APIRouter()

USERNAME_TAKEN = "Username already exists"


@router.post("/register", response_model=Envelope[RegisteredUser], status_code=201)
async def register_user(
    payload: UserRegister,
    db: AsyncSession = Depends(get_db),
):
    """Create a user and hand out its access token (issued once, never rotated)."""
    validate_password_policy(payload.password)

    users = Collection(db, User)
    if await users.find_one(username=payload.username):
        raise ValidationError(USERNAME_TAKEN, details=[{"field": "username", "message": "already taken"}])

    # bcrypt is CPU bound
    password_hash = await run_in_threadpool(hash_password, payload.password)
    try:
        user = await users.insert_one(
            {
                "username": payload.username,
                "password_hash": password_hash,
                "email": payload.email,
                "access_token": issue_access_token(),
            }
        )
    except IntegrityError as exc:
        # Lost a race with a concurrent registration of the same name
        raise ValidationError(USERNAME_TAKEN) from exc

    logger.info("Registered user %s", user.id)
    return Envelope[RegisteredUser](
        response=RegisteredUser(
            username=user.username,
            access_token=user.access_token,
            user_id=user.id,
            email=user.email,
        )
    )


@router.post("/login", response_model=LoginResponse)
async def login_user(
    payload: UserLogin,
    db: AsyncSession = Depends(get_db),
):
    """Exchange username/password for the stored access token."""
    user = await Collection(db, User).find_one(username=payload.username)
    if user is None or not await run_in_threadpool(verify_password, payload.password, user.password_hash):
        raise CredentialMismatchError()
    if user.token_status != TokenStatus.ACTIVE:
        raise AuthenticationError("Access token has been revoked")
    return LoginResponse(user_id=user.id, username=user.username, access_token=user.access_token)
