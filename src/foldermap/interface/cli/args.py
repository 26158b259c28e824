from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the FolderMap CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="foldermap",
        description="Scan a directory tree and save a JSON summary of its files grouped by folder.",
    )

    # --- Path Management ---
    p.add_argument(
        "target_path",
        nargs="?",
        default=None,
        help="Directory to scan (default: current working directory).",
    )
    p.add_argument(
        "-o", "--output-dir",
        dest="output_dir",
        default=None,
        help="Directory where the JSON file is written (default: current working directory).",
    )

    # --- Output Format ---
    p.add_argument(
        "--indent",
        dest="json_indent",
        type=int,
        default=None,
        help="Indentation width of the JSON file (default: 2).",
    )

    # --- Runtime ---
    p.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not render the progress bar.",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Scan without writing the JSON file.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON on stdout.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration for later runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--save-log",
        action="store_true",
        help="Also write logs to the rotating file in the user data directory.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides; None means 'not given'.
    """
    overrides: Dict[str, Any] = {
        "target_path": args.target_path,
        "output_dir": args.output_dir,
        "json_indent": args.json_indent,
    }

    if args.no_progress:
        overrides["show_progress"] = False
    if args.dry_run:
        overrides["dry_run"] = True
    if args.save_log:
        overrides["save_log"] = True

    return overrides
