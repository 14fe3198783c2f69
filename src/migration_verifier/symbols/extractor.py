"""
Module: symbols.extractor

Purpose:
    Extract declared CSS custom property names from style-sheet text and
    check that source declarations survive in the target style sheet.
    Names only; values are not compared.

Key Functions:
    - extract_symbols(): Set of declared names in a text
    - preserved(): Source names with no declaration in the target
    - read_style_sheets(): Concatenate several style sheets

Dependencies:
    - re (std)
    - core.errors.FilesystemError

Used By:
    - properties.suite: symbol_preservation property
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import AbstractSet, FrozenSet, Iterable, List

from migration_verifier.core.errors import FilesystemError


# "--name:" or "--name :"; the name is captured without the marker.
DECLARATION_PATTERN = re.compile(r"--([\w-]+)\s*:")


def extract_symbols(text: str) -> FrozenSet[str]:
    """
    Collect every custom property declared in text.

    Examples:
        >>> sorted(extract_symbols(":root { --primary: #fff; --radius : 0.5rem; }"))
        ['primary', 'radius']
    """
    return frozenset(DECLARATION_PATTERN.findall(text))


def preserved(source_symbols: AbstractSet[str], target_text: str) -> List[str]:
    """
    Find source names that are not declared in the target text.

    A name counts as declared only for an exact match: "--primary:" does
    not satisfy "primary-foreground" and vice versa.

    Args:
        source_symbols: Names declared on the source side
        target_text: Target style-sheet text

    Returns:
        Sorted list of names that are NOT preserved

    Example:
        >>> preserved({"primary"}, ":root { --background: #000; }")
        ['primary']
    """
    declared = extract_symbols(target_text)
    return sorted(name for name in source_symbols if name not in declared)


def read_style_sheets(paths: Iterable[Path]) -> str:
    """
    Read and concatenate style sheets (newline separated).

    Raises:
        FilesystemError: If any sheet is missing, unreadable or not UTF-8
    """
    texts = []
    for path in paths:
        try:
            texts.append(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise FilesystemError(f"Cannot read style sheet {path}: {e}", path=path) from e
        except UnicodeDecodeError as e:
            raise FilesystemError(f"Style sheet {path} is not valid UTF-8: {e}", path=path) from e
    return "\n".join(texts)
