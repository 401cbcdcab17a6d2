"""
Account Service.

Registration, authentication, session management and profile updates over
the persisted document. Every operation is one load -> mutate -> save cycle.
"""

import logging
from typing import Mapping, Optional, Union

from application.errors import DuplicateEmail, InvalidCredentials, UserNotFound
from application.ports import DigestProvider, DocumentStore, IdGenerator
from domain.models import Goals, Number, Profile, ProfileUpdate, User
from domain.services import merge_profile

logger = logging.getLogger(__name__)


class AccountService:
    """
    Account operations for the workout diary.

    The session is a single pointer in the document, so registering or
    logging in replaces whoever was logged in before.

    Usage:
        >>> accounts = AccountService(store=store, digest=sha256_hex, new_id=generate_user_id)
        >>> user = accounts.register(
        ...     name="Alex",
        ...     email="a@x.com",
        ...     password_hash=accounts.hash_password("secret1"),
        ...     age=30, height=180, weight=75,
        ...     goals={"pushups": 20, "situps": 20, "run_m": 1000},
        ... )
        >>> accounts.current_user().id == user.id
        True
    """

    def __init__(
        self,
        store: DocumentStore,
        digest: DigestProvider,
        new_id: IdGenerator,
    ) -> None:
        """
        Initialize the service with required dependencies.

        Args:
            store: Document store holding users and the session
            digest: One-way digest used for passwords
            new_id: Generator for user identifiers
        """
        self._store = store
        self._digest = digest
        self._new_id = new_id

    def hash_password(self, password: str) -> str:
        """Digest a plaintext password. The plaintext is never stored."""
        return self._digest(password)

    def register(
        self,
        name: str,
        email: str,
        password_hash: str,
        age: Number,
        height: Number,
        weight: Number,
        goals: Union[Goals, Mapping[str, Number]],
    ) -> User:
        """
        Create a user and log them in.

        Raises:
            DuplicateEmail: If any user already has this email (case-insensitive)
        """
        doc = self._store.load()
        if doc.find_user_by_email(email) is not None:
            logger.warning("Registration rejected: email already in use")
            raise DuplicateEmail()

        if not isinstance(goals, Goals):
            goals = Goals.model_validate(dict(goals))

        user_id = self._new_id()
        while user_id in doc.users:
            user_id = self._new_id()

        user = User(
            id=user_id,
            email=email,
            name=name,
            password_hash=password_hash,
            profile=Profile(age=age, height=height, weight=weight, goals=goals),
            entries=[],
        )
        doc.users[user_id] = user
        doc.sessions.current_user_id = user_id
        self._store.save(doc)

        logger.info(f"User registered: {user_id}")
        return user.model_copy(deep=True)

    def login(self, email: str, password_hash: str) -> User:
        """
        Start a session for the user with this email.

        Raises:
            UserNotFound: If no user has this email (case-insensitive)
            InvalidCredentials: If the password digest does not match
        """
        doc = self._store.load()
        user = doc.find_user_by_email(email)
        if user is None:
            logger.warning("Login rejected: unknown email")
            raise UserNotFound()
        if user.password_hash != password_hash:
            logger.warning(f"Login rejected for user {user.id}: invalid password")
            raise InvalidCredentials()

        doc.sessions.current_user_id = user.id
        self._store.save(doc)

        logger.info(f"User logged in: {user.id}")
        return user.model_copy(deep=True)

    def logout(self) -> None:
        """End the current session. Safe to call with no active session."""
        doc = self._store.load()
        doc.sessions.current_user_id = None
        self._store.save(doc)

    def current_user(self) -> Optional[User]:
        """
        The user the session points to.

        Returns:
            A copy of the user, or None if there is no session or the
            referenced user no longer exists
        """
        doc = self._store.load()
        user_id = doc.sessions.current_user_id
        if not user_id:
            return None
        user = doc.users.get(user_id)
        return user.model_copy(deep=True) if user else None

    def find_by_email(self, email: str) -> Optional[User]:
        """Look up a user by email, case-insensitively."""
        user = self._store.load().find_user_by_email(email)
        return user.model_copy(deep=True) if user else None

    def update_profile(
        self,
        user_id: str,
        update: Union[ProfileUpdate, Mapping[str, object]],
    ) -> User:
        """
        Apply a partial profile update.

        Unset fields keep their stored values. Changing the email keeps the
        case-insensitive uniqueness rule.

        Raises:
            UserNotFound: If the user id does not exist
            DuplicateEmail: If the new email belongs to another user
        """
        if not isinstance(update, ProfileUpdate):
            update = ProfileUpdate.model_validate(dict(update))

        doc = self._store.load()
        user = doc.users.get(user_id)
        if user is None:
            raise UserNotFound()

        if update.email is not None:
            owner = doc.find_user_by_email(update.email)
            if owner is not None and owner.id != user_id:
                logger.warning(f"Profile update rejected for user {user_id}: email in use")
                raise DuplicateEmail()

        updated = merge_profile(user, update)
        doc.users[user_id] = updated
        self._store.save(doc)

        logger.info(f"Profile updated for user {user_id}")
        return updated.model_copy(deep=True)
