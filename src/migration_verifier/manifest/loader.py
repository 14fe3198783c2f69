"""
Module: manifest.loader

Purpose:
    Read a project's dependency manifest (package.json) and return its
    dependencies mapping after schema validation.

Key Functions:
    - load_manifest(): Parsed dependencies of one project root
    - parse_manifest_text(): Same, from already-read text

Dependencies:
    - json (std)
    - core.schemas.validator: jsonschema-backed manifest validation
    - core.errors: FilesystemError, ManifestParseError

Used By:
    - properties.suite: dependency_completeness property
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from migration_verifier.config import ProjectLayout
from migration_verifier.core.errors import FilesystemError, ManifestParseError
from migration_verifier.core.models import ProjectRoot
from migration_verifier.core.schemas import validate_manifest_data, ValidationError

logger = logging.getLogger(__name__)


def parse_manifest_text(text: str, root: Path) -> Dict[str, str]:
    """
    Parse manifest text and return its dependencies mapping.

    A manifest without a `dependencies` key has no dependencies.

    Args:
        text: Raw manifest document
        root: Project root the manifest belongs to (for error messages)

    Returns:
        Mapping of package name to version specifier

    Raises:
        ManifestParseError: If text is not JSON or fails the schema
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestParseError(
            f"Manifest of {root} is not valid JSON: {e}", root=root
        ) from e

    try:
        validate_manifest_data(data)
    except ValidationError as e:
        raise ManifestParseError(
            f"Manifest of {root} is malformed: {e}", root=root, errors=e.errors
        ) from e

    return dict(data.get("dependencies") or {})


def load_manifest(
    root: ProjectRoot | Path,
    layout: Optional[ProjectLayout] = None,
) -> Dict[str, str]:
    """
    Load the dependencies mapping of a project.

    Args:
        root: Project root containing the manifest
        layout: Supplies the manifest file name (default package.json)

    Returns:
        Mapping of package name to version specifier

    Raises:
        FilesystemError: If the manifest is missing or unreadable
        ManifestParseError: If the manifest is not valid structured data

    Example:
        >>> load_manifest(ProjectRoot.source("/work/app"))
        {'@radix-ui/react-dialog': '^1.0.0', 'react': '^18.2.0'}
    """
    layout = layout or ProjectLayout()
    root_path = root.path if isinstance(root, ProjectRoot) else Path(root)
    manifest_path = root_path / layout.manifest_name

    try:
        text = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FilesystemError(f"Manifest not found: {manifest_path}", path=manifest_path) from e
    except OSError as e:
        raise FilesystemError(f"Cannot read manifest {manifest_path}: {e}", path=manifest_path) from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(
            f"Manifest of {root_path} is not valid UTF-8: {e}", root=root_path
        ) from e

    dependencies = parse_manifest_text(text, root_path)
    logger.debug(f"Loaded {len(dependencies)} dependencies from {manifest_path}")
    return dependencies
