"""
Module: references

Purpose:
    Provides ImportReference - a raw module specifier taken from a
    source file's import syntax together with the file it came from.

Key Classes:
    - ReferenceKind: EXTERNAL / ALIAS / RELATIVE
    - ImportReference: Raw specifier plus originating FileEntry

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .entries.FileEntry

Used By:
    - resolution.imports
    - resolution.resolver
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from .entries import FileEntry


_QUERY_SUFFIX = re.compile(r"[?#].*$")


class ReferenceKind(str, Enum):
    """How a module specifier is resolved."""
    EXTERNAL = "external"
    ALIAS = "alias"
    RELATIVE = "relative"


@dataclass(frozen=True, slots=True)
class ImportReference:
    """
    A module reference found in a project file.

    Only ALIAS and RELATIVE references are checked for resolution;
    EXTERNAL references belong to the package registry.

    Attributes:
        raw: Specifier exactly as written, e.g. "@/components/ui/button"
        origin: The file containing the import statement
        kind: Classification of raw by prefix

    Example:
        >>> ref = ImportReference("../styles.css?url", origin, ReferenceKind.RELATIVE)
        >>> ref.specifier
        '../styles.css'
    """

    raw: str
    origin: FileEntry
    kind: ReferenceKind

    @property
    def specifier(self) -> str:
        """raw with any bundler query or fragment suffix removed."""
        return _QUERY_SUFFIX.sub("", self.raw)

    @property
    def is_checked(self) -> bool:
        return self.kind is not ReferenceKind.EXTERNAL

    def __str__(self) -> str:
        return f"{self.origin.path}: {self.raw!r}"
