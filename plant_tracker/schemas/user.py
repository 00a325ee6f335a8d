"""Registration and login schemas."""

from uuid import UUID

from pydantic import Field

from plant_tracker.schemas.common import CamelModel


class UserRegister(CamelModel):
    username: str = Field(..., min_length=1, max_length=255)
    # Length policy is enforced by core.security so the 400 carries our message
    password: str = Field(..., max_length=255)
    email: str = Field(..., min_length=1, max_length=255)


class UserLogin(CamelModel):
    username: str
    password: str


class RegisteredUser(CamelModel):
    username: str
    access_token: str
    user_id: UUID
    email: str


class LoginResponse(CamelModel):
    success: bool = True
    user_id: UUID
    username: str
    access_token: str
