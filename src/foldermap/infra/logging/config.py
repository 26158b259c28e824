from __future__ import annotations

"""
Logging Settings.

A single frozen record describing where scan diagnostics go: the stderr
console, an optional size-rotated file, or both.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings consumed by configure_logging().

    Attributes:
        level: Level name ('DEBUG', 'INFO', ...). Unknown names mean INFO.
        console: Echo records on stderr, next to the progress bar.
        log_file: Path of the rotating log file, or None to skip it.
        max_bytes: Size at which the log file rolls over.
        backup_count: Rolled-over files kept beside the active one.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    @property
    def level_int(self) -> int:
        value = logging.getLevelName(str(self.level or "").strip().upper())
        return value if isinstance(value, int) else logging.INFO
