"""
Module: symbols

Purpose:
    CSS custom property extraction and preservation checks.
"""

from .extractor import extract_symbols, preserved, read_style_sheets

__all__ = ["extract_symbols", "preserved", "read_style_sheets"]
