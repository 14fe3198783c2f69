"""
Module: walking.walker

Purpose:
    Recursively enumerate every file under a directory, returning a flat
    list of FileEntry objects. Read-only; never follows a directory that
    fails its existence check.

Key Functions:
    - list_files(): Walk a directory tree

Dependencies:
    - os (std): scandir for single-syscall type checks
    - pathlib (std)
    - core.models.FileEntry
    - core.errors.FilesystemError

Used By:
    - properties.suite: Universes for file presence and import resolution

Ordering:
    Entries come back in filesystem-enumeration order, which differs
    between platforms and runs. Callers must treat the result as a set;
    the property driver sorts universes before sampling.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Set

from migration_verifier.core.errors import FilesystemError
from migration_verifier.core.models import FileEntry, ProjectRoot

logger = logging.getLogger(__name__)


def list_files(
    root: ProjectRoot | Path,
    base: Optional[Path] = None,
    *,
    tolerant: bool = False,
) -> List[FileEntry]:
    """
    Recursively list all files under root.

    Symbolic links to files are listed like regular files. Symbolic
    links to directories are followed. A directory whose real path is
    one of its own ancestors is skipped, so link cycles terminate while
    several links to the same directory are each listed.

    Args:
        root: Directory to walk (a ProjectRoot or a plain path)
        base: Directory relative paths are computed against. Usually a
            subtree such as the components directory; defaults to no
            relative path (entry.relative is then just the file name).
        tolerant: Skip directories that vanish or cannot be read instead
            of raising

    Returns:
        List of FileEntry, one per non-directory entry

    Raises:
        FilesystemError: If root (or a sub-directory met during the walk)
            does not exist or cannot be read, and tolerant is False

    Example:
        >>> entries = list_files(Path("/p/src/components"), base=Path("/p/src/components"))
        >>> sorted(str(e.relative) for e in entries)
        ['Navbar.tsx', 'ui/button.tsx']
    """
    directory = root.path if isinstance(root, ProjectRoot) else Path(root)
    if base is not None:
        base = Path(base)

    files: List[FileEntry] = []
    ancestors: Set[str] = set()  # real paths of the directories being walked
    _walk(directory, base, tolerant, ancestors, files)
    logger.debug(f"Listed {len(files)} files under {directory}")
    return files


def _walk(
    directory: Path,
    base: Optional[Path],
    tolerant: bool,
    ancestors: Set[str],
    files: List[FileEntry],
) -> None:
    if not directory.is_dir():
        if tolerant:
            logger.debug(f"Skipping missing directory {directory}")
            return
        raise FilesystemError(f"Directory does not exist: {directory}", path=directory)

    real = os.path.realpath(directory)
    if real in ancestors:
        logger.debug(f"Skipping symlink cycle at {directory} (-> {real})")
        return

    try:
        with os.scandir(directory) as it:
            children = list(it)
    except (FileNotFoundError, NotADirectoryError) as e:
        if tolerant:
            logger.debug(f"Directory vanished during walk: {directory}")
            return
        raise FilesystemError(f"Directory vanished during walk: {directory}", path=directory) from e
    except PermissionError as e:
        if tolerant:
            logger.debug(f"Skipping unreadable directory {directory}")
            return
        raise FilesystemError(f"Directory is not readable: {directory}", path=directory) from e

    ancestors.add(real)
    try:
        for child in children:
            child_path = directory / child.name
            try:
                is_dir = child.is_dir()
            except OSError:
                is_dir = False
            if is_dir:
                _walk(child_path, base, tolerant, ancestors, files)
            else:
                files.append(FileEntry(path=child_path, base=base))
    finally:
        ancestors.discard(real)
