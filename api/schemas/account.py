"""
Account request schemas.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from domain.models import Number, User

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class GoalsRequest(BaseModel):
    pushups: Number = Field(default=0, ge=0)
    situps: Number = Field(default=0, ge=0)
    run_m: Number = Field(default=0, ge=0)


class RegisterRequest(BaseModel):
    """Body of POST /auth/register."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)
    age: Number = Field(default=0, ge=0)
    height: Number = Field(default=0, ge=0)
    weight: Number = Field(default=0, ge=0)
    goals: GoalsRequest = Field(default_factory=GoalsRequest)


class LoginRequest(BaseModel):
    """Body of POST /auth/login."""

    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class GoalsUpdateRequest(BaseModel):
    pushups: Optional[Number] = Field(default=None, ge=0)
    situps: Optional[Number] = Field(default=None, ge=0)
    run_m: Optional[Number] = Field(default=None, ge=0)


class ProfileUpdateRequest(BaseModel):
    """Body of PATCH /profile. Omitted fields keep their stored values."""

    name: Optional[str] = None
    email: Optional[str] = Field(default=None, pattern=EMAIL_PATTERN)
    age: Optional[Number] = Field(default=None, ge=0)
    height: Optional[Number] = Field(default=None, ge=0)
    weight: Optional[Number] = Field(default=None, ge=0)
    goals: Optional[GoalsUpdateRequest] = None


def user_response(user: User) -> Dict[str, Any]:
    """Public view of a user; the password digest is never returned."""
    return user.model_dump(mode="json", exclude={"password_hash"})
