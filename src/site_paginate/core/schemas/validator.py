"""
Schema Validation Utilities

Validates the pagination keys of a site settings mapping against the
bundled JSON schema before they are turned into a PaginationConfig.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

PAGINATION_SETTINGS_SCHEMA = "pagination_settings"


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""
    
    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_pagination_settings(data: Mapping[str, Any]) -> None:
    """
    Validate pagination settings against the schema.
    
    Every violation is collected; the first (by document path) becomes the
    exception message.
    
    Args:
        data: Site settings mapping (keys other than the paginate_* ones
            are ignored)
        
    Raises:
        ValidationError: If any pagination key is malformed
    """
    schema = _load_schema(PAGINATION_SETTINGS_SCHEMA)
    validator = jsonschema.Draft7Validator(schema)
    found = sorted(validator.iter_errors(dict(data)), key=lambda e: list(map(str, e.absolute_path)))
    if not found:
        return
    
    first = found[0]
    path = ".".join(str(p) for p in first.absolute_path)
    raise ValidationError(
        f"Schema validation failed at {path or '<root>'}: {first.message}",
        path=path,
        errors=[e.message for e in found],
    )
