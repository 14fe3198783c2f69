"""
Core Models Package

Immutable data models shared by every component. All models are frozen
dataclasses derived fresh from the file system on each run; nothing is
cached or mutated between runs.
"""

from .entries import ProjectRoot, FileEntry
from .references import ImportReference, ReferenceKind
from .manifest import (
    DependencySpec,
    DiscrepancyReason,
    ManifestDiscrepancy,
    is_valid_version,
)
from .report import (
    ViolationKind,
    ViolationReport,
    PropertyOutcome,
    PropertyResult,
    VerificationReport,
)

__all__ = [
    "ProjectRoot",
    "FileEntry",
    "ImportReference",
    "ReferenceKind",
    "DependencySpec",
    "DiscrepancyReason",
    "ManifestDiscrepancy",
    "is_valid_version",
    "ViolationKind",
    "ViolationReport",
    "PropertyOutcome",
    "PropertyResult",
    "VerificationReport",
]
