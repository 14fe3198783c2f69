"""
Module: config

Purpose:
    Configuration dataclasses for a verification run. Immutable
    configuration with validation on construction; passed explicitly to
    the driver instead of living in module globals.

Key Classes:
    - ProjectLayout: Directory and naming conventions of both trees
    - VerifierConfig: Roots, sampling settings and layout for one run

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - properties.runner: Sampling settings
    - properties.suite: Universe locations
    - cli: Built from command-line arguments
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from migration_verifier.core.models import ProjectRoot


DEFAULT_SAMPLE_COUNT = 100


@dataclass(frozen=True)
class ProjectLayout:
    """
    Conventional layout shared by the Source and Target projects
    (immutable).

    Attributes:
        components_dir: Component subtree, relative to a project root
        assets_dir: Asset subtree
        public_dir: Public/static subtree
        presence_dirs: Subtrees whose files must all exist in the target.
            Staged migrations list only the artifact classes already moved.
        source_style_sheets: Style sheets concatenated on the source side
        target_style_sheet: Consolidated style sheet on the target side
        manifest_name: Dependency manifest file name
        alias_prefix: Project-internal root-relative import marker
        alias_target: Directory the alias marker stands for
        relative_prefix: Marker of path-relative imports
        module_extensions: Extensions tried, in order, when resolving
        index_name: Stem of directory index files
        deferred_prefixes: Reference prefixes skipped pending a later
            migration phase (e.g. "@/assets")
        scope_prefix: Dependency names checked for completeness

    Example:
        >>> layout = ProjectLayout(presence_dirs=("src/components", "public"))
        >>> layout.module_extensions
        ('.ts', '.tsx')
    """

    components_dir: str = "src/components"
    assets_dir: str = "src/assets"
    public_dir: str = "public"
    presence_dirs: Tuple[str, ...] = ("src/components",)

    source_style_sheets: Tuple[str, ...] = ("src/App.css", "src/index.css")
    target_style_sheet: str = "src/styles.css"

    manifest_name: str = "package.json"

    alias_prefix: str = "@/"
    alias_target: str = "src/"
    relative_prefix: str = "."
    module_extensions: Tuple[str, ...] = (".ts", ".tsx")
    index_name: str = "index"
    deferred_prefixes: Tuple[str, ...] = ()

    scope_prefix: str = "@radix-ui/"

    def __post_init__(self) -> None:
        """Validate layout on construction."""
        if not self.alias_prefix:
            raise ValueError("alias_prefix must not be empty")
        if not self.relative_prefix:
            raise ValueError("relative_prefix must not be empty")
        if (self.alias_prefix.startswith(self.relative_prefix)
                or self.relative_prefix.startswith(self.alias_prefix)):
            raise ValueError(
                f"alias_prefix {self.alias_prefix!r} is ambiguous with "
                f"relative_prefix {self.relative_prefix!r}"
            )
        if not self.module_extensions:
            raise ValueError("module_extensions must not be empty")
        for ext in self.module_extensions:
            if not ext.startswith("."):
                raise ValueError(f"module extension must start with '.': {ext!r}")
        for rel in (*self.presence_dirs, *self.source_style_sheets, self.target_style_sheet):
            if Path(rel).is_absolute():
                raise ValueError(f"layout paths must be relative to a project root: {rel!r}")


@dataclass(frozen=True)
class VerifierConfig:
    """
    Configuration for one verification run (immutable).

    Attributes:
        source_root: Migration origin
        target_root: Migration destination
        sample_count: Draws per property (with replacement)
        seed: Random seed; None draws a fresh one per run (recorded in
            the report so failures can be replayed)
        shrink: Report the lowest-index failing element of the universe
        layout: Directory conventions

    Invariants:
        - sample_count > 0
        - source_root.role == "source", target_root.role == "target"

    Example:
        >>> config = VerifierConfig.from_paths("/work/vite-app", "/work/vite-app/tanstack")
        >>> config.sample_count
        100
    """

    source_root: ProjectRoot
    target_root: ProjectRoot
    sample_count: int = DEFAULT_SAMPLE_COUNT
    seed: Optional[int] = None
    shrink: bool = True
    layout: ProjectLayout = field(default_factory=ProjectLayout)

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive: {self.sample_count}")
        if self.seed is not None and self.seed < 0:
            raise ValueError(f"seed must be non-negative: {self.seed}")
        if self.source_root.role != "source":
            raise ValueError(f"source_root has role {self.source_root.role!r}")
        if self.target_root.role != "target":
            raise ValueError(f"target_root has role {self.target_root.role!r}")

    @classmethod
    def from_paths(
        cls,
        source: Path | str,
        target: Path | str,
        **kwargs,
    ) -> VerifierConfig:
        return cls(
            source_root=ProjectRoot.source(source),
            target_root=ProjectRoot.target(target),
            **kwargs,
        )
