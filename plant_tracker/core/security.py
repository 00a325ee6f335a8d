"""Security utilities: password hashing and access token issuance."""

import secrets

from passlib.context import CryptContext

from plant_tracker.core.constants import ACCESS_TOKEN_BYTES, MIN_PASSWORD_LENGTH
from plant_tracker.core.errors import ValidationError

password_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def validate_password_policy(plain: str) -> None:
    """Reject passwords shorter than MIN_PASSWORD_LENGTH before any hashing."""
    if len(plain) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            details=[{"field": "password", "message": "too short"}],
        )


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    """Constant-time bcrypt check. Unknown or malformed digests verify as False."""
    if not hashed:
        return False
    try:
        return password_context.verify(plain, hashed)
    except (ValueError, TypeError):
        return False


def issue_access_token() -> str:
    return secrets.token_hex(ACCESS_TOKEN_BYTES)
