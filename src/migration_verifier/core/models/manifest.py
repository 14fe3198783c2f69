"""
Module: manifest

Purpose:
    Provides DependencySpec and ManifestDiscrepancy - a single package
    entry from a dependency manifest and the reason it fails the
    completeness check.

Key Functions:
    - is_valid_version(spec): Range prefix plus three numeric components
    - DependencySpec.is_valid: Same check bound to an entry

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - manifest.differ
    - properties.suite
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional


# Optional caret/tilde followed by MAJOR.MINOR.PATCH. Anchored at the
# start only: "^1.2.3-beta.1" is accepted.
VERSION_PATTERN = re.compile(r"^[\^~]?\d+\.\d+\.\d+")

ManifestSide = Literal["source", "target"]


def is_valid_version(spec: object) -> bool:
    """
    Check a version specifier's syntax.

    Examples:
        >>> is_valid_version("^1.0.0")
        True
        >>> is_valid_version("latest")
        False
    """
    return isinstance(spec, str) and VERSION_PATTERN.match(spec) is not None


@dataclass(frozen=True, slots=True)
class DependencySpec:
    """
    One entry of a manifest's dependencies mapping.

    Attributes:
        name: Package name, unique within one manifest
        version: Version specifier string as written
    """

    name: str
    version: str

    @property
    def is_valid(self) -> bool:
        return is_valid_version(self.version)


class DiscrepancyReason(str, Enum):
    ABSENT_IN_TARGET = "AbsentInTarget"
    INVALID_VERSION_SYNTAX = "InvalidVersionSyntax"


@dataclass(frozen=True, slots=True)
class ManifestDiscrepancy:
    """
    Why a source dependency fails the completeness check.

    Attributes:
        name: Package name
        reason: ABSENT_IN_TARGET or INVALID_VERSION_SYNTAX
        side: Which manifest holds the invalid specifier (None when absent)
        version: The offending specifier, if any
    """

    name: str
    reason: DiscrepancyReason
    side: Optional[ManifestSide] = None
    version: Optional[str] = None

    def describe(self) -> str:
        if self.reason is DiscrepancyReason.ABSENT_IN_TARGET:
            return f"{self.name} is absent from the target manifest"
        return (
            f"{self.name} has an invalid version specifier in the {self.side} "
            f"manifest: {self.version!r}"
        )
