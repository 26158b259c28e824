from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem probe used by the scanner (entry listing and
classification), cross-platform path normalization and the resolution of
the per-user application data directory.
"""

import logging
import os
import stat
from dataclasses import dataclass
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "FolderMap"
UNIX_APP_DIR_NAME = ".foldermap"


class PathNotAccessibleError(OSError):
    """Raised when a path does not exist or cannot be stat'ed or listed."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"Cannot access path: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


@dataclass(frozen=True)
class EntryKind:
    """
    Classification of a filesystem entry.

    Attributes:
        is_directory: True for directories (symlinks are followed).
        is_file: True for regular files only.
    """
    is_directory: bool
    is_file: bool


# -----------------------------------------------------------------------------
# FILESYSTEM PROBE API
# -----------------------------------------------------------------------------

def list_entries(path: str) -> List[str]:
    """
    List the names of the immediate children of a directory.

    Names are sorted so that repeated scans of an unchanged tree produce
    identical output.

    Args:
        path: Directory to enumerate.

    Returns:
        List[str]: Child names (not full paths).

    Raises:
        PathNotAccessibleError: If the directory cannot be listed.
    """
    try:
        return sorted(os.listdir(path))
    except OSError as e:
        raise PathNotAccessibleError(path, e.strerror or str(e)) from e


def classify(path: str) -> EntryKind:
    """
    Report whether a path is a directory and/or a regular file.

    Args:
        path: Path to stat.

    Returns:
        EntryKind: Classification of the target.

    Raises:
        PathNotAccessibleError: If the path does not exist or cannot be stat'ed.
    """
    try:
        st = os.stat(path)
    except OSError as e:
        raise PathNotAccessibleError(path, e.strerror or str(e)) from e
    return EntryKind(
        is_directory=stat.S_ISDIR(st.st_mode),
        is_file=stat.S_ISREG(st.st_mode),
    )


def try_list_entries(path: str) -> List[str]:
    """Tolerant variant of list_entries: unreadable directories are empty."""
    try:
        return list_entries(path)
    except PathNotAccessibleError as e:
        logger.debug(f"Skipping unreadable directory: {e}")
        return []


def try_classify(path: str) -> Optional[EntryKind]:
    """Tolerant variant of classify: returns None when the stat fails."""
    try:
        return classify(path)
    except PathNotAccessibleError as e:
        logger.debug(f"Skipping inaccessible entry: {e}")
        return None


# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/FolderMap
    - Linux/Mac: ~/.foldermap

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        logger.debug(f"Could not create user data directory '{path}': {e}")

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Attempt to recursively create a directory structure safely.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
