from __future__ import annotations

"""
Folder Structure Data Models.

Provides the recursive type definitions used to describe a scanned
directory, both in its flat (pre-grouping) and nested (final) shapes.
"""

from typing import Dict, List, Tuple, Union

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

# Ordered path segments relative to a scanned folder. The empty tuple
# designates the scanned folder itself.
PathKey = Tuple[str, ...]

# Output of the recursive scanner: one file list per folder that holds files
FlatStructure = Dict[PathKey, List[str]]

# Keys are folder names, 'root', or slash-joined sub-paths.
# Values are either file lists or nested structures.
FileStructure = Dict[str, Union[List[str], "FileStructure"]]


def iter_filenames(structure: FileStructure) -> List[str]:
    """
    Collect every filename stored anywhere in a FileStructure.

    Args:
        structure: Nested structure produced by the scanner.

    Returns:
        List[str]: Filenames in traversal order (duplicates preserved).
    """
    names: List[str] = []
    for value in structure.values():
        if isinstance(value, dict):
            names.extend(iter_filenames(value))
        else:
            names.extend(value)
    return names
