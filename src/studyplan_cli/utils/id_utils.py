"""Identifier utilities for the study planner.

Ids are a base-36 millisecond timestamp followed by a random base-36 suffix,
e.g. ``lrx3k2a0f9q1z7m2c4``. They sort roughly by creation time and are
unique within a process with overwhelming probability.
"""

from __future__ import annotations

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase

# Random part length; 36**11 possible suffixes per millisecond
_SUFFIX_LENGTH = 11


def to_base36(number: int) -> str:
    """Encode a non-negative integer in lowercase base 36.

    Args:
        number: Integer to encode

    Returns:
        Base-36 representation (``"0"`` for zero)
    """
    if number < 0:
        raise ValueError("number must be non-negative")
    if number == 0:
        return "0"

    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))


def new_id() -> str:
    """Generate a new entity id."""
    prefix = to_base36(time.time_ns() // 1_000_000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return prefix + suffix


def shorten_id(entity_id: str, length: int = 8) -> str:
    """Get shortened version of an id for display.

    Args:
        entity_id: Full id string
        length: Number of characters to return (default 8)

    Returns:
        First N characters of the id
    """
    return entity_id[:length]
