"""
Request schemas for the HTTP surface.

These carry the presentation-layer validation rules (email shape, counter
ranges, date format). Name and password length policies come from Settings
and are checked in the routers.
"""

from api.schemas.account import (
    EMAIL_PATTERN,
    GoalsRequest,
    GoalsUpdateRequest,
    LoginRequest,
    ProfileUpdateRequest,
    RegisterRequest,
    user_response,
)
from api.schemas.entries import DATE_PATTERN, EntryPatchRequest, EntryRequest

__all__ = [
    "EMAIL_PATTERN",
    "GoalsRequest",
    "GoalsUpdateRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "RegisterRequest",
    "user_response",
    "DATE_PATTERN",
    "EntryRequest",
    "EntryPatchRequest",
]
