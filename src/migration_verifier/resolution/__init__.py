"""
Module: resolution

Purpose:
    Import reference extraction and module resolution against the
    target tree.

Key Functions:
    - extract_references(): Find references in source text
    - classify_reference(): External / alias / relative
    - resolve() / resolves(): Fallback resolution
"""

from .imports import classify_reference, extract_references, read_references, is_deferred
from .resolver import Resolution, candidate_paths, resolve, resolves

__all__ = [
    "classify_reference",
    "extract_references",
    "read_references",
    "is_deferred",
    "Resolution",
    "candidate_paths",
    "resolve",
    "resolves",
]
