"""
User aggregate: identity, credentials digest, body profile and daily goals.

A User owns its workout entries exclusively. Partial-update models
(GoalsUpdate, ProfileUpdate) carry only the fields a caller wants to change;
every field is optional and ``None`` means "keep the stored value".
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.entry import Entry, Number


class Goals(BaseModel):
    """Daily targets for each tracked exercise."""

    pushups: Number = Field(default=0, description="Push-up repetitions per day")
    situps: Number = Field(default=0, description="Sit-up repetitions per day")
    run_m: Number = Field(default=0, description="Running distance in metres per day")


class Profile(BaseModel):
    """Body measurements and goals for a user."""

    age: Number = Field(default=0, description="Age in years")
    height: Number = Field(default=0, description="Height in centimetres")
    weight: Number = Field(default=0, description="Weight in kilograms")
    goals: Goals = Field(default_factory=Goals)


class User(BaseModel):
    """
    A registered account.

    ``password_hash`` is serialized as ``passwordHash`` so that documents keep
    the same shape as the browser build of the diary.

    Examples:
        >>> user = User(
        ...     id="a1b2c3d4e5f60718",
        ...     email="a@x.com",
        ...     name="Alex",
        ...     passwordHash="9f86d0...",
        ... )
        >>> user.model_dump(by_alias=True)["passwordHash"]
        '9f86d0...'
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="Generated hexadecimal identifier")
    email: str = Field(..., description="Login email, unique case-insensitively")
    name: str = Field(..., description="Display name")
    password_hash: str = Field(..., alias="passwordHash")
    profile: Profile = Field(default_factory=Profile)
    entries: List[Entry] = Field(default_factory=list)

    def email_matches(self, email: str) -> bool:
        """Case-insensitive email comparison."""
        return self.email.lower() == email.lower()


class GoalsUpdate(BaseModel):
    """Partial update for Goals."""

    pushups: Optional[Number] = None
    situps: Optional[Number] = None
    run_m: Optional[Number] = None


class ProfileUpdate(BaseModel):
    """
    Partial update for a user's name, email and profile.

    Fields left unset (or set to ``None``) fall back to the stored values.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[Number] = None
    height: Optional[Number] = None
    weight: Optional[Number] = None
    goals: Optional[GoalsUpdate] = None
