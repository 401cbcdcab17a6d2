"""
Document: the single persisted root object holding every user and the
session pointer.
"""

import json
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from domain.models.user import User


class Session(BaseModel):
    """The one active session of a document."""

    model_config = ConfigDict(populate_by_name=True)

    current_user_id: Optional[str] = Field(default=None, alias="currentUserId")


class Document(BaseModel):
    """
    Root of the persisted data.

    Always serialized whole; there are no partial writes.

    Examples:
        >>> doc = Document.empty()
        >>> doc.to_json()
        '{"users":{},"sessions":{"currentUserId":null}}'
        >>> Document.from_json(doc.to_json()) == doc
        True
    """

    model_config = ConfigDict(populate_by_name=True)

    users: Dict[str, User] = Field(default_factory=dict)
    sessions: Session = Field(default_factory=Session)

    @classmethod
    def empty(cls) -> "Document":
        """A fresh document with no users and no session."""
        return cls(users={}, sessions=Session(current_user_id=None))

    @classmethod
    def from_json(cls, raw: str) -> "Document":
        """Parse a serialized document. Raises pydantic.ValidationError."""
        return cls.model_validate_json(raw)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        if indent is None:
            return self.model_dump_json(by_alias=True)
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def find_user_by_email(self, email: str) -> Optional[User]:
        """First user whose email matches case-insensitively."""
        for user in self.users.values():
            if user.email_matches(email):
                return user
        return None
