"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_pagination_settings,
    ValidationError,
    PAGINATION_SETTINGS_SCHEMA,
)

__all__ = [
    "validate_pagination_settings",
    "ValidationError",
    "PAGINATION_SETTINGS_SCHEMA",
]
