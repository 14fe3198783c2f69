"""
Module: core.errors

Purpose:
    Infrastructure exceptions. These abort the property being evaluated
    and are reported separately from domain violations, which are values
    (see core.models.report) rather than exceptions.

Key Classes:
    - VerifierError: Base class for infrastructure failures
    - FilesystemError: Required directory or file absent/unreadable
    - ManifestParseError: Dependency manifest is not valid structured data

Used By:
    - walking.walker
    - manifest.loader
    - symbols.extractor
    - properties.runner
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class VerifierError(Exception):
    """Base class for infrastructure errors raised during verification."""
    pass


class FilesystemError(VerifierError):
    """Raised when a required directory or file is absent or unreadable."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ManifestParseError(VerifierError):
    """Raised when a dependency manifest cannot be parsed as structured data."""

    def __init__(self, message: str, root: Path, errors: Optional[list[str]] = None):
        super().__init__(message)
        self.root = root
        self.errors = errors or []
