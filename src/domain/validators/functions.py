"""Centralized validation functions (DRY principle).

Validators are pure functions. `validate_*` functions raise ValueError on
failure; `password_strength_errors` reports every violated rule at once so
the WEAK_PASSWORD response can list them all.
"""

import re

from src.core.constants import MIN_NAME_LENGTH

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

PASSWORD_MIN_LENGTH = 8
# bcrypt only reads the first 72 bytes and rejects longer input
PASSWORD_MAX_BYTES = 72


def normalize_email(v: str) -> str:
    """Trim and lower-case an email address.

    Example:
        >>> normalize_email("  Ada@Example.COM ")
        'ada@example.com'
    """
    return v.strip().lower()


def validate_email(v: str) -> str:
    """Validate email format.

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (trimmed, lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format
    """
    email = normalize_email(v)
    if not EMAIL_PATTERN.match(email):
        raise ValueError("Invalid email format")
    return email


def validate_name(v: str) -> str:
    """Validate display name.

    Raises:
        ValueError: If the trimmed name is shorter than two characters.
    """
    name = v.strip()
    if len(name) < MIN_NAME_LENGTH:
        raise ValueError(
            f"Name must be at least {MIN_NAME_LENGTH} characters long"
        )
    return name


def password_strength_errors(v: str) -> list[str]:
    """List every password rule the candidate violates.

    Rules: at least 8 characters, one uppercase letter, one lowercase
    letter and one digit, at most 72 bytes once UTF-8 encoded. Special
    characters are not required.

    Args:
        v: Candidate password.

    Returns:
        Violation messages (empty when the password is acceptable).

    Example:
        >>> password_strength_errors("Passw0rd")
        []
        >>> password_strength_errors("short")
        ['Password must be at least 8 characters long', ...]
    """
    errors: list[str] = []
    if len(v) < PASSWORD_MIN_LENGTH:
        errors.append(
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
        )
    if len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        errors.append(
            f"Password must be at most {PASSWORD_MAX_BYTES} bytes long"
        )
    if not re.search(r"[A-Z]", v):
        errors.append("Password must contain at least one uppercase letter")
    if not re.search(r"[a-z]", v):
        errors.append("Password must contain at least one lowercase letter")
    if not re.search(r"[0-9]", v):
        errors.append("Password must contain at least one number")
    return errors

