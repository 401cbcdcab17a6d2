"""
HTTP mapping for service errors.
"""

from fastapi import HTTPException, status

from application.errors import (
    DuplicateEmail,
    EntryNotFound,
    InvalidCredentials,
    InvalidFormat,
    StoreError,
    UserNotFound,
)

STATUS_BY_ERROR = {
    DuplicateEmail: status.HTTP_409_CONFLICT,
    UserNotFound: status.HTTP_404_NOT_FOUND,
    EntryNotFound: status.HTTP_404_NOT_FOUND,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    InvalidFormat: status.HTTP_400_BAD_REQUEST,
}


def to_http_exception(error: StoreError) -> HTTPException:
    """Convert a service error into the matching HTTPException."""
    status_code = STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=error.message)
