"""
Migration Verifier Core Package

Shared data models, infrastructure errors and manifest schema
validation used by every verification component.
"""

from .errors import VerifierError, FilesystemError, ManifestParseError
from .models import (
    ProjectRoot,
    FileEntry,
    ImportReference,
    ReferenceKind,
    DependencySpec,
    ViolationKind,
    ViolationReport,
    PropertyResult,
    VerificationReport,
)

__all__ = [
    "VerifierError",
    "FilesystemError",
    "ManifestParseError",
    "ProjectRoot",
    "FileEntry",
    "ImportReference",
    "ReferenceKind",
    "DependencySpec",
    "ViolationKind",
    "ViolationReport",
    "PropertyResult",
    "VerificationReport",
]
