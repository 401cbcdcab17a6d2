"""
Digest and Identifier Interfaces (Ports).

Both are plain callables so that a module-level function satisfies them.
"""

from typing import Protocol


class DigestProvider(Protocol):
    """
    Deterministic one-way digest of a UTF-8 string.

    Used only for password storage and comparison. The same input always
    yields the same lowercase hexadecimal output.
    """

    def __call__(self, text: str) -> str:
        ...


class IdGenerator(Protocol):
    """Random hexadecimal identifier with negligible collision probability."""

    def __call__(self) -> str:
        ...
