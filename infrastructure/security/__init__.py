"""
Digest and identifier adapters.
"""

from infrastructure.security.digest import sha256_hex
from infrastructure.security.ids import generate_entry_id, generate_id, generate_user_id

__all__ = [
    "sha256_hex",
    "generate_id",
    "generate_user_id",
    "generate_entry_id",
]
