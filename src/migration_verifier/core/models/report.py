"""
Module: report

Purpose:
    Provides the report types surfaced to callers: ViolationReport for a
    single failing element, PropertyResult for one property run and
    VerificationReport for a whole suite.

Key Classes:
    - ViolationKind: PRESENCE / RESOLUTION / MANIFEST / PRESERVATION
    - ViolationReport: Failing element plus unmet condition
    - PropertyOutcome: PASSED / VIOLATED / ERROR
    - PropertyResult: Result of one property (with sampling metadata)
    - VerificationReport: All property results of one run

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - properties.runner
    - properties.suite
    - cli

Design Notes:
    Violations are the expected output of a failing property and are
    values. Infrastructure failures (FilesystemError, ManifestParseError)
    end up in PropertyResult.error with outcome ERROR so callers can log
    the two differently.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional


class ViolationKind(str, Enum):
    PRESENCE = "presence"
    RESOLUTION = "resolution"
    MANIFEST = "manifest"
    PRESERVATION = "preservation"


@dataclass(frozen=True)
class ViolationReport:
    """
    A domain violation found for one sampled element.

    Checkers create reports with just kind/element/description; the
    driver fills in the sampling coordinates via `located()`.

    Attributes:
        kind: Which class of invariant failed
        element: Identity of the failing element (path, reference,
            package name or symbol name)
        description: Human-readable unmet condition
        property_name: Property that produced the report
        seed: Seed of the run that found it
        draw_index: Which draw (0-based) hit the failure
        universe_index: Index of the element in the canonical universe
        details: Extra structured context (e.g. importing file)
    """

    kind: ViolationKind
    element: str
    description: str
    property_name: str = ""
    seed: Optional[int] = None
    draw_index: Optional[int] = None
    universe_index: Optional[int] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def located(
        self,
        property_name: str,
        seed: int,
        draw_index: int,
        universe_index: int,
    ) -> ViolationReport:
        return replace(
            self,
            property_name=property_name,
            seed=seed,
            draw_index=draw_index,
            universe_index=universe_index,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = {
            "kind": self.kind.value,
            "element": self.element,
            "description": self.description,
            "property": self.property_name,
            "seed": self.seed,
            "draw_index": self.draw_index,
            "universe_index": self.universe_index,
        }
        if self.details:
            d["details"] = dict(self.details)
        return d

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.element}: {self.description}"


class PropertyOutcome(str, Enum):
    PASSED = "passed"
    VIOLATED = "violated"
    ERROR = "error"


@dataclass(frozen=True)
class PropertyResult:
    """
    Outcome of running one property.

    Attributes:
        name: Property name
        outcome: PASSED, VIOLATED or ERROR
        seed: Seed used for sampling
        universe_size: Number of elements in the universe
        samples_drawn: Draws checked before finishing or failing
        violation: Set when outcome is VIOLATED
        error: Infrastructure error message when outcome is ERROR
        error_type: Exception class name for ERROR outcomes
    """

    name: str
    outcome: PropertyOutcome
    seed: int
    universe_size: int = 0
    samples_drawn: int = 0
    violation: Optional[ViolationReport] = None
    error: Optional[str] = None
    error_type: Optional[str] = None

    @property
    def passed(self) -> bool:
        return self.outcome is PropertyOutcome.PASSED

    @property
    def vacuous(self) -> bool:
        """True when the property passed because its universe was empty."""
        return self.passed and self.universe_size == 0

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "name": self.name,
            "outcome": self.outcome.value,
            "seed": self.seed,
            "universe_size": self.universe_size,
            "samples_drawn": self.samples_drawn,
        }
        if self.violation is not None:
            d["violation"] = self.violation.to_dict()
        if self.error is not None:
            d["error"] = self.error
            d["error_type"] = self.error_type
        return d


@dataclass(frozen=True)
class VerificationReport:
    """All property results of one verification run."""

    seed: int
    results: tuple[PropertyResult, ...]

    @property
    def passed(self) -> bool:
        return all(r.passed for r in self.results)

    @property
    def violations(self) -> tuple[ViolationReport, ...]:
        return tuple(r.violation for r in self.results if r.violation is not None)

    @property
    def errors(self) -> tuple[PropertyResult, ...]:
        return tuple(r for r in self.results if r.outcome is PropertyOutcome.ERROR)

    def result(self, name: str) -> PropertyResult:
        for r in self.results:
            if r.name == name:
                return r
        raise KeyError(name)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "passed": self.passed,
            "properties": [r.to_dict() for r in self.results],
        }
