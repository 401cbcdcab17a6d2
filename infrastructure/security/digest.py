"""
SHA-256 digest provider for password storage.
"""
import hashlib


def sha256_hex(text: str) -> str:
    """
    SHA-256 of the UTF-8 encoding of ``text`` as lowercase hex.

    Examples:
        >>> sha256_hex("test")
        '9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08'
    """
    return hashlib.sha256(text.encode("utf-8")).hexdigest()
