from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates a complete scan:
1. Validates configuration and resolves the target directory.
2. Verifies the target is reachable.
3. Counts files to size the progress indicator.
4. Scans the tree while advancing the progress tracker.
5. Writes the timestamped JSON artifact.
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional

from foldermap.core.pipeline.components.writer import (
    build_output_filename,
    get_timestamp,
    write_structure,
)
from foldermap.core.pipeline.stages.validator import validate_config
from foldermap.core.services.counter import count_files
from foldermap.core.services.scanner import scan_target
from foldermap.domain.constants import ROOT_FILES_KEY
from foldermap.domain.pipeline_models import (
    PipelineResult,
    ScanErrorKind,
    create_error_result,
    create_success_result,
)
from foldermap.domain.progress import NullProgress, ProgressTracker
from foldermap.domain.tree_models import iter_filenames
from foldermap.infra.fs import PathNotAccessibleError, classify, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        progress: Optional[ProgressTracker] = None,
        now: Optional[datetime] = None,
) -> PipelineResult:
    """
    Execute a full folder scan and persist its summary.

    Args:
        config: The configuration dictionary (raw or partial).
        progress: Tracker receiving start/advance/stop. Silent if omitted.
        now: Clock override for the artifact timestamp.

    Returns:
        PipelineResult: Object containing status, structure and summary.
    """
    logger.info("Scan started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    cwd = os.getcwd()
    target_path = normalize_path(cfg.get("target_path", ""), cwd)

    # -------------------------------------------------------------------------
    # 2) Target Reachability
    # -------------------------------------------------------------------------
    try:
        classify(target_path)
    except PathNotAccessibleError as e:
        msg = f"Cannot access directory: {target_path}"
        logger.error(f"{msg} ({e.reason})")
        return create_error_result(msg, ScanErrorKind.TARGET_UNREACHABLE, target_path)

    # -------------------------------------------------------------------------
    # 3) Counting Pre-Pass
    # -------------------------------------------------------------------------
    total = count_files(target_path)
    logger.debug(f"Counted {total} files under {target_path}")

    if total == 0:
        msg = "No files found in directory"
        logger.error(f"{msg}: {target_path}")
        return create_error_result(msg, ScanErrorKind.EMPTY_TARGET, target_path)

    # -------------------------------------------------------------------------
    # 4) Main Scan
    # -------------------------------------------------------------------------
    tracker = progress if progress is not None else NullProgress()
    tracker.start(total)
    try:
        structure = scan_target(target_path, tracker)
    finally:
        tracker.stop()

    # The scanner advances once per reported file
    scanned = len(iter_filenames(structure))

    summary: Dict[str, Any] = {
        "folders": len([k for k in structure if k != ROOT_FILES_KEY]),
        "root_files": len(structure.get(ROOT_FILES_KEY, [])),
        "dry_run": cfg["dry_run"],
        "generated_file": "",
    }

    # -------------------------------------------------------------------------
    # 5) Artifact Persistence
    # -------------------------------------------------------------------------
    if cfg["dry_run"]:
        logger.info("Dry run: artifact not written.")
        return create_success_result(
            target_path, "", structure, total, scanned, summary_extra=summary
        )

    output_dir = normalize_path(cfg.get("output_dir", ""), cwd)
    file_name = build_output_filename(target_path, get_timestamp(now))
    output_path = os.path.join(output_dir, file_name)

    try:
        write_structure(output_path, structure, indent=cfg["json_indent"])
    except OSError as e:
        msg = f"Failed to write output file '{output_path}': {e}"
        logger.critical(msg)
        return create_error_result(
            msg, ScanErrorKind.UNEXPECTED_FAILURE, target_path, total_files=total
        )

    summary["generated_file"] = file_name
    logger.info(f"Summary saved to {output_path}")

    return create_success_result(
        target_path, output_path, structure, total, scanned, summary_extra=summary
    )
