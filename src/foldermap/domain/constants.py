from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values shared by the scanner, the artifact writer
and the configuration layer.
"""

from typing import FrozenSet

CURRENT_CONFIG_VERSION = "1.0.0"

# Folder names that never count as evidence of nested structure.
# They are still counted and scanned when reached through another path.
IGNORED_FOLDERS: FrozenSet[str] = frozenset({
    "node_modules",
    ".git",
    ".next",
    "dist",
    "build",
})

# Key holding loose files found directly under the scan root
ROOT_FILES_KEY = "root"

PATH_KEY_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# ARTIFACT NAMING
# -----------------------------------------------------------------------------
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
OUTPUT_EXTENSION = ".json"
DEFAULT_JSON_INDENT = 2
