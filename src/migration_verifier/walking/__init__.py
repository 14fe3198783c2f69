"""
Module: walking

Purpose:
    Recursive, read-only enumeration of project files.

Key Functions:
    - list_files(): Walk a directory and return FileEntry objects
"""

from .walker import list_files

__all__ = ["list_files"]
