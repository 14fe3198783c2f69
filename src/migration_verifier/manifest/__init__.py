"""
Module: manifest

Purpose:
    Dependency manifest loading and completeness checking.
"""

from .loader import load_manifest, parse_manifest_text
from .differ import check_dependency, missing_or_invalid, scope_filter

__all__ = [
    "load_manifest",
    "parse_manifest_text",
    "check_dependency",
    "missing_or_invalid",
    "scope_filter",
]
