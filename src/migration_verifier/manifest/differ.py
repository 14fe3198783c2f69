"""
Module: manifest.differ

Purpose:
    Compare two dependency manifests: every qualifying source dependency
    must be present in the target, with a syntactically valid version
    specifier on both sides.

Key Functions:
    - scope_filter(): Predicate "name begins with prefix"
    - check_dependency(): Discrepancies of a single package
    - missing_or_invalid(): Discrepancies of every qualifying package

Dependencies:
    - core.models.manifest: DependencySpec, ManifestDiscrepancy

Used By:
    - properties.suite: dependency_completeness property

Scope:
    Only syntax is checked. "^1.0.0" in the source and "^1.1.2" in the
    target both pass; whether the ranges are compatible is not decided
    here.
"""

from __future__ import annotations

from typing import Callable, List, Mapping

from migration_verifier.core.models import (
    DependencySpec,
    DiscrepancyReason,
    ManifestDiscrepancy,
)


NamePredicate = Callable[[str], bool]


def scope_filter(prefix: str) -> NamePredicate:
    """Build a predicate selecting package names that begin with prefix."""
    def _matches(name: str) -> bool:
        return name.startswith(prefix)
    return _matches


def check_dependency(
    name: str,
    source: Mapping[str, str],
    target: Mapping[str, str],
) -> List[ManifestDiscrepancy]:
    """
    Check one source dependency against the target manifest.

    Args:
        name: Package name (a key of source)
        source: Source dependencies mapping
        target: Target dependencies mapping

    Returns:
        Empty list if the package passes. Otherwise ABSENT_IN_TARGET
        alone, or one INVALID_VERSION_SYNTAX per failing side.

    Example:
        >>> check_dependency("@radix-ui/react-dialog",
        ...                  {"@radix-ui/react-dialog": "^1.0.0"}, {})
        [ManifestDiscrepancy(name='@radix-ui/react-dialog', reason=<...ABSENT_IN_TARGET...>, ...)]
    """
    if name not in target:
        return [ManifestDiscrepancy(name=name, reason=DiscrepancyReason.ABSENT_IN_TARGET)]

    sides = (
        ("source", DependencySpec(name, source.get(name))),
        ("target", DependencySpec(name, target[name])),
    )
    problems: List[ManifestDiscrepancy] = []
    for side, spec in sides:
        if not spec.is_valid:
            problems.append(ManifestDiscrepancy(
                name=name,
                reason=DiscrepancyReason.INVALID_VERSION_SYNTAX,
                side=side,
                version=spec.version,
            ))
    return problems


def missing_or_invalid(
    source: Mapping[str, str],
    target: Mapping[str, str],
    filter: NamePredicate,
) -> List[ManifestDiscrepancy]:
    """
    Find every qualifying source dependency that fails the check.

    Args:
        source: Source dependencies mapping
        target: Target dependencies mapping
        filter: Selects which source names are checked

    Returns:
        Discrepancies in source manifest order
    """
    problems: List[ManifestDiscrepancy] = []
    for name in source:
        if filter(name):
            problems.extend(check_dependency(name, source, target))
    return problems
