"""
Module: properties

Purpose:
    Property verification driver: seeded sampling over finite universes
    plus the built-in migration properties.

Key Functions:
    - check_property(): Run one property
    - replay(): Re-check one element by universe index
    - run_suite(): Run the built-in properties

Key Classes:
    - PropertyRunner: Sampling loop with shrinking
"""

from .runner import PropertyRunner, check_property, replay, fresh_seed, canonical_order
from .suite import (
    PROPERTIES,
    FILE_PRESENCE,
    IMPORT_RESOLUTION,
    DEPENDENCY_COMPLETENESS,
    SYMBOL_PRESERVATION,
    run_suite,
    verify_file_presence,
    verify_import_resolution,
    verify_dependency_completeness,
    verify_symbol_preservation,
)

__all__ = [
    "PropertyRunner",
    "check_property",
    "replay",
    "fresh_seed",
    "canonical_order",
    "PROPERTIES",
    "FILE_PRESENCE",
    "IMPORT_RESOLUTION",
    "DEPENDENCY_COMPLETENESS",
    "SYMBOL_PRESERVATION",
    "run_suite",
    "verify_file_presence",
    "verify_import_resolution",
    "verify_dependency_completeness",
    "verify_symbol_preservation",
]
