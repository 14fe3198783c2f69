"""
Schema Validation Utilities

Validates parsed dependency manifests against the bundled JSON Schema
before the differ reads them.

Only the fields the verifier consumes are constrained: the document must
be an object and `dependencies` / `devDependencies`, when present, must
map package names to specifier strings. Everything else in a
package.json is ignored.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


_SCHEMAS: dict[str, dict] = {}


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


def validate_manifest_data(data: Any) -> None:
    """
    Validate a parsed manifest document.

    All schema errors are collected so the report lists every offending
    entry, not just the first.

    Args:
        data: Result of json.loads() on the manifest file

    Raises:
        ValidationError: If data does not match the manifest schema
    """
    schema = _load_schema("manifest")
    validator = jsonschema.Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
    if not errors:
        return

    first = errors[0]
    raise ValidationError(
        f"Schema validation failed: {first.message}",
        path=".".join(str(p) for p in first.absolute_path),
        errors=[
            f"{'.'.join(str(p) for p in e.absolute_path) or '<root>'}: {e.message}"
            for e in errors
        ],
    )
