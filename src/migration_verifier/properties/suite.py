"""
Module: properties.suite

Purpose:
    The four built-in migration properties and the suite runner that
    executes them independently against a Source/Target pair.

Key Functions:
    - verify_file_presence(): Source files exist at the same relative
      path, with the same name and extension, in the target
    - verify_import_resolution(): Alias/relative imports of target
      component files resolve
    - verify_dependency_completeness(): Scoped source dependencies are in
      the target manifest with valid specifiers on both sides
    - verify_symbol_preservation(): Source custom properties are declared
      in the target style sheet
    - run_suite(): Run a selection of the above with one shared seed

Dependencies:
    - walking, resolution, manifest, symbols: Checkers and universes
    - properties.runner: Sampling driver

Used By:
    - cli
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from migration_verifier.config import VerifierConfig
from migration_verifier.core.errors import FilesystemError
from migration_verifier.core.models import (
    FileEntry,
    ImportReference,
    PropertyOutcome,
    PropertyResult,
    VerificationReport,
    ViolationKind,
    ViolationReport,
)
from migration_verifier.manifest import check_dependency, load_manifest, scope_filter
from migration_verifier.resolution import is_deferred, read_references, resolve
from migration_verifier.symbols import extract_symbols, preserved, read_style_sheets
from migration_verifier.walking import list_files

from .runner import check_property, fresh_seed

logger = logging.getLogger(__name__)


FILE_PRESENCE = "file_presence"
IMPORT_RESOLUTION = "import_resolution"
DEPENDENCY_COMPLETENESS = "dependency_completeness"
SYMBOL_PRESERVATION = "symbol_preservation"


# ─────────────────────────────────────────────────────────────────────────────
# Universe elements
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class PresenceCandidate:
    """A source file together with the subtree it was found in."""
    subtree: str
    entry: FileEntry

    @property
    def key(self) -> str:
        return f"{self.subtree}/{self.entry.relative.as_posix()}"


@dataclass(frozen=True)
class DependencyCandidate:
    """A scoped source dependency and the target mapping it is checked against."""
    name: str
    source_version: str
    target: Mapping[str, str]


@dataclass(frozen=True)
class SymbolCandidate:
    """A source custom property name and the target text it must appear in."""
    name: str
    target_text: str


# ─────────────────────────────────────────────────────────────────────────────
# Property 1: file presence
# ─────────────────────────────────────────────────────────────────────────────

def verify_file_presence(config: VerifierConfig, *, seed: Optional[int] = None) -> PropertyResult:
    """
    Every file under the source presence subtrees exists in the target.

    Subtrees missing on the source side contribute nothing to the
    universe (a staged migration may not have them yet).
    """
    source = config.source_root
    target = config.target_root

    def universe() -> List[PresenceCandidate]:
        candidates: List[PresenceCandidate] = []
        for subtree in config.layout.presence_dirs:
            directory = source / subtree
            if not directory.is_dir():
                logger.warning(f"{FILE_PRESENCE}: source subtree {directory} does not exist, skipping")
                continue
            candidates.extend(
                PresenceCandidate(subtree=subtree, entry=entry)
                for entry in list_files(directory, base=directory)
            )
        return candidates

    def checker(candidate: PresenceCandidate) -> Optional[ViolationReport]:
        relative = candidate.entry.relative
        target_path = target / candidate.subtree / relative
        details = {"source": str(candidate.entry.path), "expected": str(target_path)}

        if not target_path.exists():
            return ViolationReport(
                kind=ViolationKind.PRESENCE,
                element=str(candidate.entry.path),
                description=f"absent in target: expected {target_path}",
                details=details,
            )
        if not target_path.is_file():
            return ViolationReport(
                kind=ViolationKind.PRESENCE,
                element=str(candidate.entry.path),
                description=f"not a file in target: {target_path}",
                details=details,
            )

        try:
            names = {p.name for p in target_path.parent.iterdir()}
        except OSError as e:
            raise FilesystemError(
                f"Cannot list {target_path.parent}: {e}", path=target_path.parent
            ) from e
        if candidate.entry.name not in names:
            # Only reachable on case-insensitive file systems.
            return ViolationReport(
                kind=ViolationKind.PRESENCE,
                element=str(candidate.entry.path),
                description=(
                    f"name or extension differs in target: no entry named "
                    f"{candidate.entry.name!r} in {target_path.parent}"
                ),
                details=details,
            )
        return None

    return check_property(FILE_PRESENCE, universe, checker, config, seed=seed, key=lambda c: c.key)


# ─────────────────────────────────────────────────────────────────────────────
# Property 2: import resolution
# ─────────────────────────────────────────────────────────────────────────────

def verify_import_resolution(config: VerifierConfig, *, seed: Optional[int] = None) -> PropertyResult:
    """
    Every alias or relative reference in target component files resolves.

    External package references and references under a deferred prefix
    are outside the universe.
    """
    layout = config.layout
    target = config.target_root

    def universe() -> List[ImportReference]:
        components = target / layout.components_dir
        if not components.is_dir():
            logger.warning(f"{IMPORT_RESOLUTION}: target components {components} do not exist, skipping")
            return []
        references: List[ImportReference] = []
        for entry in list_files(components, base=components):
            if entry.suffix not in layout.module_extensions:
                continue
            references.extend(
                ref for ref in read_references(entry, layout)
                if ref.is_checked and not is_deferred(ref, layout)
            )
        return references

    def checker(reference: ImportReference) -> Optional[ViolationReport]:
        resolution = resolve(reference, target, layout)
        if resolution.resolved:
            return None
        return ViolationReport(
            kind=ViolationKind.RESOLUTION,
            element=str(reference),
            description=resolution.describe(),
            details={
                "file": str(reference.origin.path),
                "reference": reference.raw,
                "candidates": [str(c) for c in resolution.candidates],
            },
        )

    return check_property(
        IMPORT_RESOLUTION, universe, checker, config,
        seed=seed, key=lambda r: f"{r.origin.path}\0{r.raw}",
    )


# ─────────────────────────────────────────────────────────────────────────────
# Property 3: dependency completeness
# ─────────────────────────────────────────────────────────────────────────────

def verify_dependency_completeness(config: VerifierConfig, *, seed: Optional[int] = None) -> PropertyResult:
    """
    Every scoped source dependency is in the target manifest with a valid
    version specifier on both sides.

    The target manifest is only read when the source has at least one
    scoped dependency.
    """
    layout = config.layout
    in_scope = scope_filter(layout.scope_prefix)

    def universe() -> List[DependencyCandidate]:
        source = load_manifest(config.source_root, layout)
        names = [name for name in source if in_scope(name)]
        if not names:
            return []
        target = load_manifest(config.target_root, layout)
        return [DependencyCandidate(name, source[name], target) for name in names]

    def checker(candidate: DependencyCandidate) -> Optional[ViolationReport]:
        problems = check_dependency(
            candidate.name, {candidate.name: candidate.source_version}, candidate.target
        )
        if not problems:
            return None
        return ViolationReport(
            kind=ViolationKind.MANIFEST,
            element=candidate.name,
            description="; ".join(p.describe() for p in problems),
            details={
                "reasons": [p.reason.value for p in problems],
                "sides": [p.side for p in problems if p.side],
            },
        )

    return check_property(
        DEPENDENCY_COMPLETENESS, universe, checker, config, seed=seed, key=lambda c: c.name
    )


# ─────────────────────────────────────────────────────────────────────────────
# Property 4: symbol preservation
# ─────────────────────────────────────────────────────────────────────────────

def verify_symbol_preservation(config: VerifierConfig, *, seed: Optional[int] = None) -> PropertyResult:
    """Every custom property declared in the source style sheets is declared in the target."""
    layout = config.layout

    def universe() -> List[SymbolCandidate]:
        source_text = read_style_sheets(config.source_root / p for p in layout.source_style_sheets)
        target_text = read_style_sheets([config.target_root / layout.target_style_sheet])
        return [SymbolCandidate(name, target_text) for name in extract_symbols(source_text)]

    def checker(candidate: SymbolCandidate) -> Optional[ViolationReport]:
        if not preserved({candidate.name}, candidate.target_text):
            return None
        return ViolationReport(
            kind=ViolationKind.PRESERVATION,
            element=candidate.name,
            description=(
                f"--{candidate.name} is not declared in "
                f"{config.target_root / layout.target_style_sheet}"
            ),
        )

    return check_property(
        SYMBOL_PRESERVATION, universe, checker, config, seed=seed, key=lambda c: c.name
    )


# ─────────────────────────────────────────────────────────────────────────────
# Suite
# ─────────────────────────────────────────────────────────────────────────────

PropertyFn = Callable[..., PropertyResult]

PROPERTIES: Dict[str, PropertyFn] = {
    FILE_PRESENCE: verify_file_presence,
    IMPORT_RESOLUTION: verify_import_resolution,
    DEPENDENCY_COMPLETENESS: verify_dependency_completeness,
    SYMBOL_PRESERVATION: verify_symbol_preservation,
}


def run_suite(
    config: VerifierConfig,
    names: Optional[Sequence[str]] = None,
) -> VerificationReport:
    """
    Run migration properties against the configured trees.

    Properties are independent: a violation or infrastructure error in
    one never stops the others. They run in PROPERTIES order so reports
    read the same every time.

    Args:
        config: Roots, sampling settings and layout
        names: Subset of PROPERTIES keys to run (default: all)

    Returns:
        VerificationReport carrying the seed used by every property

    Raises:
        ValueError: If names contains an unknown property
    """
    selected = list(PROPERTIES) if names is None else list(names)
    unknown = [n for n in selected if n not in PROPERTIES]
    if unknown:
        raise ValueError(f"Unknown properties: {unknown} (known: {list(PROPERTIES)})")

    seed = config.seed if config.seed is not None else fresh_seed()
    logger.info(
        f"Verifying {config.target_root.path} against {config.source_root.path} "
        f"(seed={seed}, samples={config.sample_count})"
    )

    results: List[PropertyResult] = []
    for name in (n for n in PROPERTIES if n in selected):
        result = PROPERTIES[name](config, seed=seed)
        _log_result(result)
        results.append(result)

    return VerificationReport(seed=seed, results=tuple(results))


def _log_result(result: PropertyResult) -> None:
    if result.outcome is PropertyOutcome.PASSED:
        if result.vacuous:
            logger.info(f"PASS {result.name} (vacuous: empty universe)")
        else:
            logger.info(
                f"PASS {result.name} ({result.samples_drawn} samples over "
                f"{result.universe_size} elements)"
            )
    elif result.outcome is PropertyOutcome.VIOLATED:
        logger.warning(f"FAIL {result.name}: {result.violation}")
    else:
        logger.error(f"ERROR {result.name}: {result.error_type}: {result.error}")
