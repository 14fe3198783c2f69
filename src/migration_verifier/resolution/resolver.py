"""
Module: resolution.resolver

Purpose:
    Decide whether an import reference denotes an existing artifact in
    the target tree, following conventional module-resolution fallbacks.

Key Functions:
    - candidate_paths(): Ordered fallback candidates for a reference
    - resolve(): Resolution with the first matching candidate
    - resolves(): Boolean shortcut

Key Classes:
    - Resolution: Outcome plus the candidates tried

Algorithm:
    1. EXTERNAL references always resolve (delegated to the package
       registry; not checked here)
    2. ALIAS: strip the alias marker, substitute the source-root marker,
       join onto the target root
    3. RELATIVE: join onto the directory of the referencing file
    4. Try, in order: literal path, path + each module extension,
       path/index + each module extension. First hit wins.
    5. No hit -> unresolved. This is a checkable outcome, not an error.

Dependencies:
    - os.path (std): normpath, so ".." segments collapse lexically
    - config.ProjectLayout
    - core.models: ImportReference, ProjectRoot, ReferenceKind

Used By:
    - properties.suite: import_resolution property
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from migration_verifier.config import ProjectLayout
from migration_verifier.core.models import ImportReference, ProjectRoot, ReferenceKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """
    Result of resolving one reference.

    Attributes:
        reference: The reference that was resolved
        resolved: Whether any candidate exists
        matched: First existing candidate (None if unresolved or external)
        candidates: Every candidate in fallback order
    """

    reference: ImportReference
    resolved: bool
    matched: Optional[Path] = None
    candidates: Tuple[Path, ...] = ()

    def describe(self) -> str:
        if self.resolved:
            if self.matched is None:
                return f"{self.reference.raw!r} is an external package reference"
            return f"{self.reference.raw!r} resolves to {self.matched}"
        tried = ", ".join(str(c) for c in self.candidates)
        return (
            f"{self.reference.raw!r} imported from {self.reference.origin.path} "
            f"does not resolve (tried: {tried})"
        )


def _base_path(
    reference: ImportReference,
    target_root: ProjectRoot,
    layout: ProjectLayout,
) -> Path:
    specifier = reference.specifier
    if reference.kind is ReferenceKind.ALIAS:
        remainder = specifier[len(layout.alias_prefix):]
        joined = os.path.join(target_root.path, layout.alias_target, remainder)
    else:
        joined = os.path.join(reference.origin.path.parent, specifier)
    return Path(os.path.normpath(joined))


def candidate_paths(
    reference: ImportReference,
    target_root: ProjectRoot,
    layout: ProjectLayout,
) -> Tuple[Path, ...]:
    """
    Build the fallback candidates for an alias or relative reference.

    Example:
        For "./utils/helpers" imported from /t/src/components/Nav.tsx:
        /t/src/components/utils/helpers
        /t/src/components/utils/helpers.ts
        /t/src/components/utils/helpers.tsx
        /t/src/components/utils/helpers/index.ts
        /t/src/components/utils/helpers/index.tsx

    Raises:
        ValueError: If the reference is external
    """
    if reference.kind is ReferenceKind.EXTERNAL:
        raise ValueError(f"External references have no candidates: {reference.raw!r}")

    base = _base_path(reference, target_root, layout)
    with_ext = [Path(f"{base}{ext}") for ext in layout.module_extensions]
    index = [base / f"{layout.index_name}{ext}" for ext in layout.module_extensions]
    return (base, *with_ext, *index)


def resolve(
    reference: ImportReference,
    target_root: ProjectRoot,
    layout: ProjectLayout,
) -> Resolution:
    """
    Resolve a reference against the target tree.

    A literal candidate that exists as a directory counts as resolved,
    matching plain existence checks.

    Args:
        reference: Reference to resolve
        target_root: Root of the Target Project
        layout: Alias mapping and module extensions

    Returns:
        Resolution; never raises for unresolved references
    """
    if reference.kind is ReferenceKind.EXTERNAL:
        return Resolution(reference=reference, resolved=True)

    candidates = candidate_paths(reference, target_root, layout)
    for candidate in candidates:
        if candidate.exists():
            logger.debug(f"{reference.raw!r} -> {candidate}")
            return Resolution(
                reference=reference,
                resolved=True,
                matched=candidate,
                candidates=candidates,
            )

    return Resolution(reference=reference, resolved=False, candidates=candidates)


def resolves(
    reference: ImportReference,
    target_root: ProjectRoot,
    layout: Optional[ProjectLayout] = None,
) -> bool:
    """True if the reference is external or any fallback candidate exists."""
    return resolve(reference, target_root, layout or ProjectLayout()).resolved
