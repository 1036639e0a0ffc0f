"""Whitespace helpers shared by the argument parser."""

from typing import Optional

# Same set libpq and the C locale treat as blank.
WHITESPACE = " \t\n\r\f\v"


def trim(value: str) -> str:
    """Strip leading and trailing ASCII whitespace.

    Only the characters in ``WHITESPACE`` are removed, unlike
    ``str.strip()`` with no argument which also eats unicode spaces.
    """
    return value.strip(WHITESPACE)


def is_empty(value: Optional[str]) -> bool:
    return value is None or len(value) == 0
