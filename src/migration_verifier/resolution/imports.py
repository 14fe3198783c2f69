"""
Module: resolution.imports

Purpose:
    Extract module references from JS/TS source text and classify them
    as external, alias or relative.

Key Functions:
    - classify_reference(): Prefix-based classification
    - extract_references(): All references of one file's text
    - read_references(): Read a FileEntry and extract its references

Dependencies:
    - re (std)
    - core.models: FileEntry, ImportReference, ReferenceKind
    - config.ProjectLayout: Alias and relative markers

Used By:
    - properties.suite: import_resolution universe

Recognised statements:
    import x from '...'           import { a, b } from "..."
    import * as ns from '...'     import type { T } from '...'
    export { a } from '...'       export * from '...'
    import '...'                  (side effect)

    Statements may span several lines. Dynamic import() and require()
    are not recognised.
"""

from __future__ import annotations

import logging
import re
from typing import List

from migration_verifier.config import ProjectLayout
from migration_verifier.core.errors import FilesystemError
from migration_verifier.core.models import FileEntry, ImportReference, ReferenceKind

logger = logging.getLogger(__name__)


# Clause between the keyword and "from": identifiers, braces, commas,
# "* as ns", "type" and whitespace (newlines included).
_FROM_STATEMENT = re.compile(
    r"""\b(?:import|export)\s+(?:type\s+)?[\w$*{},\s]*?\s*\bfrom\s*['"]([^'"\n]+)['"]"""
)
_SIDE_EFFECT_IMPORT = re.compile(r"""\bimport\s*['"]([^'"\n]+)['"]""")


def classify_reference(raw: str, layout: ProjectLayout) -> ReferenceKind:
    """
    Classify a module specifier by its prefix.

    Examples:
        >>> classify_reference("./Button", ProjectLayout())
        <ReferenceKind.RELATIVE: 'relative'>
        >>> classify_reference("@/lib/utils", ProjectLayout())
        <ReferenceKind.ALIAS: 'alias'>
        >>> classify_reference("@radix-ui/react-dialog", ProjectLayout())
        <ReferenceKind.EXTERNAL: 'external'>
    """
    if raw.startswith(layout.relative_prefix):
        return ReferenceKind.RELATIVE
    if raw.startswith(layout.alias_prefix):
        return ReferenceKind.ALIAS
    return ReferenceKind.EXTERNAL


def extract_references(
    text: str,
    origin: FileEntry,
    layout: ProjectLayout,
) -> List[ImportReference]:
    """
    Extract every module reference from source text.

    Args:
        text: Contents of a .ts/.tsx file
        origin: File the text was read from
        layout: Provides the alias/relative markers

    Returns:
        References in order of appearance (duplicates kept)
    """
    found: List[tuple[int, str]] = []
    for pattern in (_FROM_STATEMENT, _SIDE_EFFECT_IMPORT):
        for match in pattern.finditer(text):
            found.append((match.start(1), match.group(1)))
    found.sort()

    return [
        ImportReference(raw=raw, origin=origin, kind=classify_reference(raw, layout))
        for _, raw in found
    ]


def read_references(entry: FileEntry, layout: ProjectLayout) -> List[ImportReference]:
    """
    Read a file and extract its module references.

    Raises:
        FilesystemError: If the file cannot be read
    """
    try:
        text = entry.path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FilesystemError(f"Cannot read {entry.path}: {e}", path=entry.path) from e
    refs = extract_references(text, entry, layout)
    logger.debug(f"{entry.path}: {len(refs)} references")
    return refs


def is_deferred(reference: ImportReference, layout: ProjectLayout) -> bool:
    """True if the reference targets an artifact class not migrated yet."""
    return any(reference.raw.startswith(p) for p in layout.deferred_prefixes)
