from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration and its persistence as JSON in
the user data directory. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from foldermap.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_JSON_INDENT
from foldermap.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

# Always taken from the invocation, never restored from disk
_NON_PERSISTED_KEYS = ("target_path", "dry_run")


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration for a scan.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths (an empty output_dir resolves to the cwd at scan time)
        "target_path": os.getcwd(),
        "output_dir": "",

        # Output Format
        "json_indent": DEFAULT_JSON_INDENT,

        # Runtime
        "show_progress": True,
        "dry_run": False,

        # Diagnostics
        "save_log": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """
    Load the last saved session configuration merged over the defaults.

    Only keys known to the default schema are taken from disk.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    config = get_default_config()

    if not os.path.exists(CONFIG_FILE):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    session = data.get("last_session") if isinstance(data, dict) else None
    if not isinstance(session, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in session and key not in _NON_PERSISTED_KEYS:
            config[key] = session[key]
    return config


def save_config(config: Dict[str, Any]) -> None:
    """
    Persist the session configuration to disk.

    Args:
        config: The configuration dictionary to save.
    """
    session = {k: v for k, v in config.items() if k not in _NON_PERSISTED_KEYS}
    # An explicit output_dir is pinned; an empty one keeps following the cwd
    if session.get("output_dir"):
        session["output_dir"] = os.path.abspath(session["output_dir"])

    state = {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": session,
    }
    try:
        os.makedirs(os.path.dirname(CONFIG_FILE), exist_ok=True)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {CONFIG_FILE}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
