from __future__ import annotations

"""
Logging Bootstrap.

Installs one QueueHandler on the root logger; a QueueListener thread fans the
records out to the console and file handlers so that log I/O never stalls the
directory walk. Calling configure_logging() again is a no-op unless forced.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from foldermap.infra.fs import get_user_data_dir, safe_mkdir
from foldermap.infra.logging.config import LoggingConfig

# Attributes stored on the root logger to find our own chain again
_QUEUE_HANDLER_ATTR: str = "_foldermap_queue_handler"
_QUEUE_LISTENER_ATTR: str = "_foldermap_queue_listener"


def get_default_log_path(file_name: str = "foldermap.log") -> str:
    """Path of the persistent log inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Route root logging through a queue to the configured outputs.

    Args:
        cfg: Output settings.
        force: Tear down an existing chain and rebuild it from cfg.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _QUEUE_HANDLER_ATTR, None) is not None and not force:
        return root

    shutdown_logging()
    root.setLevel(cfg.level_int)

    outputs: List[logging.Handler] = []
    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter(cfg.console_fmt))
        outputs.append(console)

    file_error: Optional[str] = None
    if cfg.log_file:
        try:
            outputs.append(_open_log_file(cfg))
        except OSError as e:
            file_error = f"Log file disabled, cannot open '{cfg.log_file}': {e}"

    if not outputs:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *outputs, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    queue_handler = QueueHandler(log_queue)
    root.addHandler(queue_handler)
    setattr(root, _QUEUE_HANDLER_ATTR, queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    if file_error:
        root.warning(file_error)
    return root


def shutdown_logging() -> None:
    """Flush and detach the chain installed by configure_logging(), if any."""
    root = logging.getLogger()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    queue_handler = getattr(root, _QUEUE_HANDLER_ATTR, None)
    if queue_handler is not None:
        root.removeHandler(queue_handler)
        queue_handler.close()
    setattr(root, _QUEUE_HANDLER_ATTR, None)


def _open_log_file(cfg: LoggingConfig) -> RotatingFileHandler:
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(cfg.log_file)))
    if not ok:
        raise OSError(err)
    handler = RotatingFileHandler(
        cfg.log_file,
        maxBytes=cfg.max_bytes,
        backupCount=cfg.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(cfg.file_fmt))
    return handler


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # stop() is not re-entrant: atexit and shutdown_logging() may both get here
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
