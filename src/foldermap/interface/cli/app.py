from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, persisted session and command-line overrides), scan execution
with a live progress bar, and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from foldermap.core.pipeline.engine import run_pipeline
from foldermap.core.pipeline.stages.validator import validate_config
from foldermap.domain.config import get_default_config, load_config, save_config
from foldermap.domain.pipeline_models import PipelineResult
from foldermap.domain.progress import NullProgress, ProgressTracker
from foldermap.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from foldermap.interface.cli import args as cli_args
from foldermap.interface.cli.progress import RichProgressBar

logger = get_logger(__name__)

_CONFIG_KEYS = ["target_path", "output_dir", "json_indent", "show_progress", "dry_run", "save_log"]

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 for success, non-zero for failure).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 1. Resolve base configuration (Default vs Persistent state)
    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 2. Logging bootstrap (console on stderr, optional rotating file)
    log_file = get_default_log_path() if raw_conf.get("save_log") is True else None
    configure_logging(LoggingConfig(
        level="DEBUG" if args.debug else "INFO",
        console=True,
        log_file=log_file,
    ))
    logger.debug("CLI execution initiated.")

    # 3. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if args.save_config:
        save_config(clean_conf)

    # 4. Scan execution phase
    progress: ProgressTracker = RichProgressBar() if clean_conf["show_progress"] else NullProgress()
    try:
        result = run_pipeline(clean_conf, progress=progress)
    except KeyboardInterrupt:
        logger.warning("Scan interrupted by user.")
        print("Interrupted.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 5. Output rendering phase
    if args.json_output:
        payload = asdict(result)
        payload.pop("structure", None)
        print(json.dumps(payload, ensure_ascii=False, indent=2, default=str))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known override keys into the base configuration.

    None values mean 'not provided on the command line' and are skipped.
    """
    out = dict(base)
    for k in _CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: PipelineResult) -> None:
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return

    if result.summary.get("dry_run"):
        print(f"Dry run complete: {result.scanned_files} files in {result.target_path}")
        return

    print(f"Saved to {result.output_path}")


if __name__ == "__main__":
    sys.exit(main())
