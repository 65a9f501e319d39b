"""Pydantic DTOs for login, registration and user profiles."""

from datetime import datetime

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials for ``POST /auth/login``."""

    username: str = Field(..., min_length=3, examples=["admin"])
    password: str = Field(..., min_length=6, examples=["password123"])


class RegisterRequest(BaseModel):
    """Payload for ``POST /auth/register``. Any role other than "admin" registers a user."""

    username: str = Field(..., min_length=3, max_length=100)
    password: str = Field(..., min_length=6)
    role: str = Field("user", examples=["user", "admin"])
    email: str | None = None


class AuthUser(BaseModel):
    """The user block embedded in login/register responses."""

    id: int
    username: str
    role: str
    email: str | None = None

    model_config = {"from_attributes": True}

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


class AuthResult(BaseModel):
    """Token plus user, returned by login and register."""

    token: str
    user: AuthUser


class UserProfile(AuthUser):
    """Full profile returned by ``GET /user/profile``."""

    created_at: datetime
    updated_at: datetime


class ProfileUpdate(BaseModel):
    """Schema for updating the current profile: all fields optional."""

    username: str | None = Field(None, min_length=3, max_length=100)
    email: str | None = None
    role: str | None = None


class AuthActionResult(BaseModel):
    """Outcome of an AuthSession action."""

    success: bool
    message: str | None = None
