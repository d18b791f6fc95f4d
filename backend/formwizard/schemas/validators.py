"""Reusable field validators for the wizard step schemas.

Each validator raises ``PydanticCustomError`` so the message surfaced next
to the offending input is exactly the one given here (no "Value error, "
prefix).

Patterns:
- Email address
- US ZIP / ZIP+4 code
- Minimum-length strings
"""

import re

from pydantic_core import PydanticCustomError


# Regex patterns
EMAIL_REGEX = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
ZIP_CODE_REGEX = re.compile(r"^\d{5}(-\d{4})?$")


def validate_min_length(value: str, min_length: int, message: str) -> str:
    """Reject strings shorter than ``min_length``.

    The value is returned untouched (no stripping) so the stored record
    equals what the user submitted.
    """
    if len(value) < min_length:
        raise PydanticCustomError("string_too_short", message)
    return value


def validate_email(value: str) -> str:
    """Validate email address.

    Args:
        value: Email address

    Returns:
        The email address, unchanged

    Raises:
        PydanticCustomError: If email is invalid
    """
    if len(value) > 254:  # RFC 5321
        raise PydanticCustomError("email_too_long", "Email address too long")

    if not EMAIL_REGEX.fullmatch(value):
        raise PydanticCustomError("invalid_email", "Invalid email address")

    return value


def validate_zip_code(value: str) -> str:
    """Validate a five digit ZIP code with optional +4 suffix."""
    if not ZIP_CODE_REGEX.fullmatch(value):
        raise PydanticCustomError("invalid_zip_code", "Invalid ZIP code")
    return value
