from __future__ import annotations

"""
File Counting Pre-Pass.

Sizes the progress indicator before the main scan. The count is best effort:
unreadable subtrees contribute nothing and the ignore set does not apply.
"""

import logging
import os

from foldermap.infra.fs import try_classify, try_list_entries

logger = logging.getLogger(__name__)


def count_files(root: str) -> int:
    """
    Recursively count the non-directory entries under root.

    Args:
        root: Directory to count. A plain file or an unreadable path yields 0.

    Returns:
        int: Number of files found at any depth.
    """
    count = 0
    for name in try_list_entries(root):
        kind = try_classify(os.path.join(root, name))
        if kind is None:
            continue
        if kind.is_directory:
            count += count_files(os.path.join(root, name))
        else:
            count += 1
    return count
