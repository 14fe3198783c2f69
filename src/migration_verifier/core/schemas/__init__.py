"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import validate_manifest_data, ValidationError

__all__ = [
    "validate_manifest_data",
    "ValidationError",
]
