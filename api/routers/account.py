"""
Account router.

Handles registration, login/logout, the current session and profile
updates. Passwords are digested here, before any service call; plaintext
never reaches storage or logs.

Endpoints:
- POST /auth/register: Create an account and log in
- POST /auth/login: Log in with email and password
- POST /auth/logout: End the current session
- GET /auth/me: The logged-in user
- PATCH /profile: Partially update the logged-in user's profile
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.deps import document_lock, get_account_service, get_current_user, get_settings
from api.errors import to_http_exception
from api.schemas import LoginRequest, ProfileUpdateRequest, RegisterRequest, user_response
from application.errors import StoreError
from application.services import AccountService
from backend.settings import Settings
from domain.models import ProfileUpdate, User

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["account"],
)


def _check_name(name: str, settings: Settings) -> None:
    if len(name.strip()) < settings.min_name_length:
        raise HTTPException(
            status_code=422,
            detail=f"Name must be at least {settings.min_name_length} characters",
        )


def _check_password(password: str, settings: Settings) -> None:
    if len(password) < settings.min_password_length:
        raise HTTPException(
            status_code=422,
            detail=f"Password must be at least {settings.min_password_length} characters",
        )


@router.post("/auth/register", status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new account.

    Registration logs the new user in, replacing any previous session.
    Returns 409 if the email is already used (case-insensitive).
    """
    _check_name(body.name, settings)
    _check_password(body.password, settings)

    password_hash = accounts.hash_password(body.password)
    try:
        with document_lock:
            user = accounts.register(
                name=body.name.strip(),
                email=body.email.strip(),
                password_hash=password_hash,
                age=body.age,
                height=body.height,
                weight=body.weight,
                goals=body.goals.model_dump(),
            )
    except StoreError as e:
        raise to_http_exception(e)
    return user_response(user)


@router.post("/auth/login")
def login(
    body: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
):
    """
    Log in.

    Returns 404 for an unknown email and 401 for a wrong password.
    """
    _check_password(body.password, settings)

    password_hash = accounts.hash_password(body.password)
    try:
        with document_lock:
            user = accounts.login(body.email.strip(), password_hash)
    except StoreError as e:
        raise to_http_exception(e)
    return user_response(user)


@router.post("/auth/logout")
def logout(accounts: AccountService = Depends(get_account_service)):
    """End the current session. Succeeds even when nobody is logged in."""
    with document_lock:
        accounts.logout()
    return {"success": True}


@router.get("/auth/me")
def me(user: User = Depends(get_current_user)):
    """The logged-in user, or 401."""
    return user_response(user)


@router.patch("/profile")
def update_profile(
    body: ProfileUpdateRequest,
    user: User = Depends(get_current_user),
    accounts: AccountService = Depends(get_account_service),
    settings: Settings = Depends(get_settings),
):
    """
    Partially update the logged-in user's name, email, body profile or goals.

    Omitted fields keep their stored values.
    """
    if body.name is not None:
        _check_name(body.name, settings)

    update = ProfileUpdate.model_validate(body.model_dump(exclude_unset=True))
    try:
        with document_lock:
            updated = accounts.update_profile(user.id, update)
    except StoreError as e:
        raise to_http_exception(e)
    return user_response(updated)
