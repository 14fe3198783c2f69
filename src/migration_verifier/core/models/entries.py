"""
Module: entries

Purpose:
    Provides ProjectRoot and FileEntry - read-only snapshots of the two
    trees under verification and the files found inside them.

Key Functions:
    - ProjectRoot.source(path) / ProjectRoot.target(path)
    - FileEntry.under(path, base): Entry with a relative path

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - walking.walker
    - resolution.imports
    - properties.suite
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional


RootRole = Literal["source", "target"]


@dataclass(frozen=True, slots=True)
class ProjectRoot:
    """
    Root directory of the Source or Target project.

    Attributes:
        role: "source" (migration origin) or "target" (destination)
        path: Absolute path to the project root

    Invariants:
        - path is absolute (relative paths are resolved on construction)

    Example:
        >>> root = ProjectRoot.target("/work/app")
        >>> root / "src/components"
        PosixPath('/work/app/src/components')
    """

    role: RootRole
    path: Path

    def __post_init__(self) -> None:
        if self.role not in ("source", "target"):
            raise ValueError(f"Invalid root role: {self.role!r}")
        path = Path(self.path)
        if not path.is_absolute():
            path = path.resolve()
        object.__setattr__(self, "path", path)

    @classmethod
    def source(cls, path: Path | str) -> ProjectRoot:
        return cls(role="source", path=Path(path))

    @classmethod
    def target(cls, path: Path | str) -> ProjectRoot:
        return cls(role="target", path=Path(path))

    def __truediv__(self, other: str | Path) -> Path:
        return self.path / other

    def __str__(self) -> str:
        return f"{self.role}:{self.path}"


@dataclass(frozen=True, slots=True)
class FileEntry:
    """
    A file found by the tree walker.

    Attributes:
        path: Absolute path of the file
        base: Subtree root the relative path is computed against (optional)

    Invariants:
        - If base is set, path lies under base (relative never uses "..")

    Example:
        >>> entry = FileEntry(Path("/p/src/components/ui/Button.tsx"),
        ...                   base=Path("/p/src/components"))
        >>> entry.relative
        PosixPath('ui/Button.tsx')
    """

    path: Path
    base: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.base is not None and not self.path.is_relative_to(self.base):
            raise ValueError(f"{self.path} is not under subtree root {self.base}")

    @classmethod
    def under(cls, path: Path, base: Path) -> FileEntry:
        return cls(path=path, base=base)

    @property
    def relative(self) -> Path:
        """Path relative to base, or just the file name when no base is set."""
        if self.base is None:
            return Path(self.path.name)
        return self.path.relative_to(self.base)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def suffix(self) -> str:
        return self.path.suffix

    def __str__(self) -> str:
        return str(self.path)
