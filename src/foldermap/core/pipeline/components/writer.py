from __future__ import annotations

"""
Artifact Naming and Persistence.

Builds the timestamped artifact name and serializes the folder summary as
pretty-printed JSON.
"""

import json
import os
from datetime import datetime, timezone
from typing import Optional

from foldermap.domain.constants import (
    DEFAULT_JSON_INDENT,
    OUTPUT_EXTENSION,
    ROOT_FILES_KEY,
    TIMESTAMP_FORMAT,
)
from foldermap.domain.tree_models import FileStructure
from foldermap.infra.fs import safe_mkdir

# -----------------------------------------------------------------------------
# NAMING
# -----------------------------------------------------------------------------

def get_timestamp(now: Optional[datetime] = None) -> str:
    """
    Format a UTC wall-clock time as YYYYMMDD_HHMMSS.

    Args:
        now: Moment to format. Naive values are taken as UTC. Defaults to
             the current UTC time.

    Returns:
        str: The formatted timestamp.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime(TIMESTAMP_FORMAT)


def build_output_filename(target_path: str, timestamp: str) -> str:
    """
    Name the artifact after the scanned folder: <basename>_<timestamp>.json.

    A filesystem root has no basename and is named 'root'.
    """
    folder_name = os.path.basename(os.path.normpath(os.path.abspath(target_path)))
    if not folder_name:
        folder_name = ROOT_FILES_KEY
    return f"{folder_name}_{timestamp}{OUTPUT_EXTENSION}"


# -----------------------------------------------------------------------------
# PERSISTENCE
# -----------------------------------------------------------------------------

def write_structure(
        output_path: str,
        structure: FileStructure,
        indent: int = DEFAULT_JSON_INDENT,
) -> None:
    """
    Write the folder summary as JSON, creating the parent directory if needed.

    Args:
        output_path: Target artifact path.
        structure: Summary to serialize.
        indent: JSON indentation width.

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    parent = os.path.dirname(os.path.abspath(output_path))
    ok, err = safe_mkdir(parent)
    if not ok:
        raise OSError(f"Cannot create output directory '{parent}': {err}")

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(structure, f, ensure_ascii=False, indent=indent)
