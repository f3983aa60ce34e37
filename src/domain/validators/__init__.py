"""Validators package exports."""

from src.domain.validators.functions import (
    EMAIL_PATTERN,
    normalize_email,
    password_strength_errors,
    validate_email,
    validate_name,
)

__all__ = [
    "EMAIL_PATTERN",
    "normalize_email",
    "password_strength_errors",
    "validate_email",
    "validate_name",
]
