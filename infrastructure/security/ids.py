"""
Random hexadecimal identifiers.

Users get 8 random bytes (16 hex characters) and entries 10 bytes
(20 hex characters).
"""
import secrets

USER_ID_BYTES = 8
ENTRY_ID_BYTES = 10


def generate_id(nbytes: int = USER_ID_BYTES) -> str:
    """Cryptographically random identifier of ``2 * nbytes`` hex characters."""
    return secrets.token_hex(nbytes)


def generate_user_id() -> str:
    return generate_id(USER_ID_BYTES)


def generate_entry_id() -> str:
    return generate_id(ENTRY_ID_BYTES)
