from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object exchanged between the scan pipeline and the
interface layer, together with the factory functions that build it.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from foldermap.domain.tree_models import FileStructure


class ScanErrorKind(str, Enum):
    """Fatal conditions that abort a scan."""
    TARGET_UNREACHABLE = "target_unreachable"
    EMPTY_TARGET = "empty_target"
    UNEXPECTED_FAILURE = "unexpected_failure"


# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete scan.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        error_kind: Category of the failure, None on success.
        target_path: Normalized directory that was scanned.
        output_path: Absolute path of the written JSON artifact.
        total_files: Result of the counting pre-pass.
        scanned_files: Files visited during the main scan.
        structure: The nested folder summary.
        summary: Execution statistics for the interface layer.
    """
    ok: bool
    error: str
    error_kind: Optional[ScanErrorKind]

    target_path: str
    output_path: str = ""

    total_files: int = 0
    scanned_files: int = 0

    structure: FileStructure = field(default_factory=dict)
    summary: Dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        kind: ScanErrorKind,
        target_path: str,
        total_files: int = 0,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a failed pipeline result instance.

    Args:
        error: Detailed error description.
        kind: Failure category, drives the CLI exit status.
        target_path: The directory the scan was aimed at.
        total_files: Files counted before the failure, if any.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        PipelineResult: An immutable error result object.
    """
    return PipelineResult(
        ok=False,
        error=error,
        error_kind=kind,
        target_path=target_path,
        total_files=total_files,
        summary=summary_extra or {},
    )


def create_success_result(
        target_path: str,
        output_path: str,
        structure: FileStructure,
        total_files: int,
        scanned_files: int,
        summary_extra: Optional[Dict[str, Any]] = None
) -> PipelineResult:
    """
    Create a successful pipeline result instance.

    Args:
        target_path: Normalized scanned directory.
        output_path: Artifact location (empty on dry runs).
        structure: The assembled folder summary.
        total_files: Counting pre-pass result.
        scanned_files: Files visited by the scanner.
        summary_extra: Final execution metrics.

    Returns:
        PipelineResult: An immutable success result object.
    """
    return PipelineResult(
        ok=True,
        error="",
        error_kind=None,
        target_path=target_path,
        output_path=output_path,
        total_files=total_files,
        scanned_files=scanned_files,
        structure=structure,
        summary=summary_extra or {},
    )
