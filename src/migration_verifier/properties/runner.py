"""
Module: properties.runner

Purpose:
    Bind a finite universe to a checker and run the checker against
    randomly sampled elements. A property passes when every draw passes;
    the first failing draw aborts it.

Key Functions:
    - check_property(): Run one property with a VerifierConfig
    - replay(): Re-check a single element by universe index
    - fresh_seed(): Seed used when none is configured

Key Classes:
    - PropertyRunner: Sampling settings plus the sampling loop

Algorithm:
    1. Build the universe (called fresh every run, never memoised)
    2. Sort it into canonical order so a seed replays the same draws
       whatever order the file system enumerated it in
    3. Empty universe -> vacuous pass, zero samples
    4. Draw sample_count indices with replacement from Random(seed)
    5. First violation -> optionally shrink to the lowest failing index,
       then report
    6. VerifierError during 1-5 -> ERROR outcome (infrastructure, not a
       violation)

Dependencies:
    - random (std): Seedable sampling
    - core.models.report: PropertyResult, ViolationReport
    - core.errors.VerifierError

Used By:
    - properties.suite: Built-in migration properties
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from migration_verifier.config import DEFAULT_SAMPLE_COUNT, VerifierConfig
from migration_verifier.core.errors import VerifierError
from migration_verifier.core.models import PropertyOutcome, PropertyResult, ViolationReport

logger = logging.getLogger(__name__)

T = TypeVar("T")

Universe = Callable[[], Iterable[T]]
Checker = Callable[[T], Optional[ViolationReport]]

_SEED_BITS = 32


def fresh_seed() -> int:
    """Draw a seed from the system entropy source."""
    return random.SystemRandom().getrandbits(_SEED_BITS)


def canonical_order(elements: Iterable[T], key: Callable[[T], str] = str) -> List[T]:
    """Sort a universe so sampling does not depend on enumeration order."""
    return sorted(elements, key=key)


@dataclass
class PropertyRunner:
    """
    Seeded sampler for property checks.

    Each property gets its own Random(seed), so properties can run in
    any order (or separately) and still draw the same elements.

    Attributes:
        sample_count: Draws per property
        seed: Seed to use; a fresh one is drawn if None
        shrink: Report the lowest-index failing element

    Example:
        >>> runner = PropertyRunner(sample_count=10, seed=7)
        >>> result = runner.check("even", lambda: [2, 4, 6], lambda n: None)
        >>> result.passed, result.samples_drawn
        (True, 10)
    """

    sample_count: int = DEFAULT_SAMPLE_COUNT
    seed: Optional[int] = None
    shrink: bool = True

    _seed: int = field(init=False)

    def __post_init__(self) -> None:
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive: {self.sample_count}")
        self._seed = self.seed if self.seed is not None else fresh_seed()

    @classmethod
    def from_config(cls, config: VerifierConfig, seed: Optional[int] = None) -> PropertyRunner:
        return cls(
            sample_count=config.sample_count,
            seed=seed if seed is not None else config.seed,
            shrink=config.shrink,
        )

    @property
    def effective_seed(self) -> int:
        return self._seed

    def check(
        self,
        name: str,
        universe: Universe,
        checker: Checker,
        *,
        key: Callable[[T], str] = str,
    ) -> PropertyResult:
        """
        Run one property.

        Args:
            name: Property name used in the result and violation
            universe: Zero-argument callable returning the elements
            checker: Returns a ViolationReport for a failing element,
                None for a passing one
            key: String key defining canonical universe order

        Returns:
            PropertyResult (PASSED, VIOLATED or ERROR)
        """
        try:
            elements = canonical_order(universe(), key=key)
        except VerifierError as e:
            return self._error(name, e, universe_size=0, samples_drawn=0)

        if not elements:
            logger.info(f"{name}: empty universe, passes vacuously")
            return PropertyResult(
                name=name,
                outcome=PropertyOutcome.PASSED,
                seed=self._seed,
                universe_size=0,
                samples_drawn=0,
            )

        rng = random.Random(self._seed)
        size = len(elements)
        logger.debug(f"{name}: sampling {self.sample_count} of {size} elements (seed={self._seed})")

        for draw in range(self.sample_count):
            index = rng.randrange(size)
            try:
                violation = checker(elements[index])
                if violation is not None and self.shrink:
                    index, violation = self._shrink(elements, index, violation, checker)
            except VerifierError as e:
                return self._error(name, e, universe_size=size, samples_drawn=draw + 1)

            if violation is not None:
                located = violation.located(
                    property_name=name,
                    seed=self._seed,
                    draw_index=draw,
                    universe_index=index,
                )
                logger.debug(f"{name}: draw {draw} failed on universe[{index}]")
                return PropertyResult(
                    name=name,
                    outcome=PropertyOutcome.VIOLATED,
                    seed=self._seed,
                    universe_size=size,
                    samples_drawn=draw + 1,
                    violation=located,
                )

        return PropertyResult(
            name=name,
            outcome=PropertyOutcome.PASSED,
            seed=self._seed,
            universe_size=size,
            samples_drawn=self.sample_count,
        )

    def _shrink(
        self,
        elements: Sequence[T],
        failing_index: int,
        violation: ViolationReport,
        checker: Checker,
    ) -> tuple[int, ViolationReport]:
        """Find the lowest universe index that fails, scanning up to failing_index."""
        for index in range(failing_index):
            smaller = checker(elements[index])
            if smaller is not None:
                logger.debug(f"Shrunk universe[{failing_index}] to universe[{index}]")
                return index, smaller
        return failing_index, violation

    def _error(
        self,
        name: str,
        error: VerifierError,
        *,
        universe_size: int,
        samples_drawn: int,
    ) -> PropertyResult:
        return PropertyResult(
            name=name,
            outcome=PropertyOutcome.ERROR,
            seed=self._seed,
            universe_size=universe_size,
            samples_drawn=samples_drawn,
            error=str(error),
            error_type=type(error).__name__,
        )


def check_property(
    name: str,
    universe: Universe,
    checker: Checker,
    config: VerifierConfig,
    *,
    seed: Optional[int] = None,
    key: Callable[[T], str] = str,
) -> PropertyResult:
    """
    Run one property with the sampling settings of config.

    Args:
        name: Property name
        universe: Zero-argument callable returning the elements
        checker: Element -> ViolationReport or None
        config: Supplies sample_count, seed and shrink
        seed: Overrides config.seed (used by run_suite to share one seed)
        key: String key defining canonical universe order

    Returns:
        PropertyResult
    """
    return PropertyRunner.from_config(config, seed=seed).check(name, universe, checker, key=key)


def replay(
    universe: Universe,
    index: int,
    checker: Checker,
    *,
    key: Callable[[T], str] = str,
) -> Optional[ViolationReport]:
    """
    Re-check the element at a universe index.

    Uses the same canonical ordering as the sampler, so universe_index
    from a ViolationReport identifies the same element as long as the
    trees are unchanged.

    Raises:
        IndexError: If index is outside the universe
    """
    elements = canonical_order(universe(), key=key)
    if not 0 <= index < len(elements):
        raise IndexError(f"universe index {index} out of range (size {len(elements)})")
    return checker(elements[index])
