from __future__ import annotations

from .config import LoggingConfig
from .core import (
    _QUEUE_HANDLER_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_default_log_path,
    get_logger,
    shutdown_logging,
)

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "shutdown_logging",
    "get_logger",
    "get_default_log_path",
    "_QUEUE_HANDLER_ATTR",
    "_QUEUE_LISTENER_ATTR",
]
