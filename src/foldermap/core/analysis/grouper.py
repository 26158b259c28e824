from __future__ import annotations

"""
Parent Grouping.

Turns the flat mapping produced by the recursive scanner into the two-tier
structure written to disk: first path segment, then the remaining segments
joined with '/'.
"""

from typing import Dict, List

from foldermap.domain.constants import PATH_KEY_SEPARATOR
from foldermap.domain.tree_models import FileStructure, FlatStructure, PathKey

# Second-tier key for the files a folder holds itself when it also has
# deeper content grouped beneath it.
OWN_FILES_KEY = ""


def join_path_key(key: PathKey) -> str:
    """Serialize a PathKey; the empty key becomes the empty string."""
    return PATH_KEY_SEPARATOR.join(key)


def group_by_parent(flat: FlatStructure) -> FileStructure:
    """
    Group a flat path-keyed mapping by its first path segment.

    Keys with zero or one segment stay at the top level. Longer keys are
    split into (parent, rest) and stored at grouped[parent][rest], where rest
    keeps its remaining segments slash-joined. Grouping happens exactly once.

    Args:
        flat: Mapping from PathKey to file lists.

    Returns:
        FileStructure: The grouped structure.
    """
    grouped: FileStructure = {}

    for key, files in flat.items():
        if len(key) <= 1:
            name = join_path_key(key)
            existing = grouped.get(name)
            if isinstance(existing, dict):
                existing[OWN_FILES_KEY] = files
            else:
                grouped[name] = files
            continue

        parent, rest = key[0], key[1:]
        bucket = grouped.get(parent)
        if not isinstance(bucket, dict):
            bucket = _promote(bucket)
            grouped[parent] = bucket
        bucket[join_path_key(rest)] = files

    return grouped


def _promote(own_files: object) -> Dict[str, List[str]]:
    """Start a second-tier mapping, keeping files already stored for the folder."""
    if isinstance(own_files, list):
        return {OWN_FILES_KEY: own_files}
    return {}
