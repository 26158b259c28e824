from __future__ import annotations

"""
Folder Scanning Service.

Walks the scan root and assembles the FileStructure summary. Each immediate
child folder is scanned either deeply (it holds non-ignored subfolders) or
as a flat listing of its own files. Loose files under the root are gathered
under the 'root' key.

Every visited file is reported to the progress tracker exactly once.
Errors on paths below the root are treated as empty content.
"""

import logging
import os
from typing import AbstractSet, List

from foldermap.core.analysis.grouper import group_by_parent
from foldermap.domain.constants import IGNORED_FOLDERS, ROOT_FILES_KEY
from foldermap.domain.progress import ProgressTracker
from foldermap.domain.tree_models import FileStructure, FlatStructure, PathKey
from foldermap.infra.fs import try_classify, try_list_entries

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def scan_target(root: str, progress: ProgressTracker) -> FileStructure:
    """
    Build the summary for every immediate child of root.

    Args:
        root: Scan root (already verified to be accessible).
        progress: Tracker advanced once per visited file.

    Returns:
        FileStructure: Folder names mapped to file lists or grouped
                       sub-structures, plus 'root' for loose files.
    """
    result: FileStructure = {}
    root_files: List[str] = []

    for name in try_list_entries(root):
        child = os.path.join(root, name)
        kind = try_classify(child)
        if kind is None:
            continue

        if kind.is_directory:
            if has_subfolders(child):
                contents = scan_folder(child, (), progress)
                if contents:
                    result[name] = group_by_parent(contents)
            else:
                files = list_direct_files(child, progress)
                if files:
                    result[name] = files
        elif kind.is_file:
            root_files.append(name)
            progress.advance()

    if root_files:
        result[ROOT_FILES_KEY] = root_files

    logger.debug(f"Scanned {len(result)} top-level entries under {root}")
    return result


def has_subfolders(path: str, ignored: AbstractSet[str] = IGNORED_FOLDERS) -> bool:
    """
    Tell whether a directory holds at least one non-ignored subdirectory.

    Only immediate children are inspected. A folder whose sole subfolder is
    ignored (e.g. 'dist') counts as flat, so the content of that subfolder
    is never visited.

    Args:
        path: Directory to inspect.
        ignored: Folder names that do not count as nested structure.

    Returns:
        bool: True if a non-ignored child directory exists.
    """
    for name in try_list_entries(path):
        if name in ignored:
            continue
        kind = try_classify(os.path.join(path, name))
        if kind is not None and kind.is_directory:
            return True
    return False


def scan_folder(path: str, relative_path: PathKey, progress: ProgressTracker) -> FlatStructure:
    """
    Recursively collect file lists keyed by their path relative to the scan.

    Subfolders are visited depth-first before the folder's own files are
    listed. Sibling subtrees never share a key prefix, so merging cannot
    overwrite entries.

    Args:
        path: Directory being visited.
        relative_path: Segments from the scanned folder down to path.
        progress: Tracker advanced once per file.

    Returns:
        FlatStructure: Flat mapping of PathKey to filenames.
    """
    result: FlatStructure = {}

    for name in try_list_entries(path):
        child = os.path.join(path, name)
        kind = try_classify(child)
        if kind is not None and kind.is_directory:
            result.update(scan_folder(child, relative_path + (name,), progress))

    files = list_direct_files(path, progress)
    if files:
        result[relative_path] = files

    return result


def list_direct_files(path: str, progress: ProgressTracker) -> List[str]:
    """
    List the non-directory entries directly inside path.

    Entries whose stat fails are skipped.

    Args:
        path: Directory to list.
        progress: Tracker advanced once per file returned.

    Returns:
        List[str]: Filenames, no recursion.
    """
    files: List[str] = []
    for name in try_list_entries(path):
        kind = try_classify(os.path.join(path, name))
        if kind is None or kind.is_directory:
            continue
        files.append(name)
        progress.advance()
    return files
