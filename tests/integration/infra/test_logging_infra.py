from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
log file rotation and the degraded path when the log file cannot be opened.
"""

import logging
import time
from logging.handlers import QueueHandler
from pathlib import Path
from unittest.mock import patch

import pytest

from foldermap.infra.logging import (
    _QUEUE_HANDLER_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach the queue chain before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def _queue_handlers() -> list:
    return [h for h in logging.getLogger().handlers if isinstance(h, QueueHandler)]


def test_logging_idempotency() -> None:
    """TC-01: Verify that multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    """TC-02: force=True rebuilds the chain with the new level."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert len(_queue_handlers()) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: Verify file rotation when size limit is exceeded."""
    log_file = tmp_path / "logs" / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (log_file.parent / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: The root logger gets exactly one QueueHandler and a running listener."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    assert _queue_handlers() == [getattr(root, _QUEUE_HANDLER_ATTR)]
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_chain() -> None:
    configure_logging(LoggingConfig(level="INFO"))

    shutdown_logging()

    root = logging.getLogger()
    assert _queue_handlers() == []
    assert getattr(root, _QUEUE_LISTENER_ATTR) is None


def test_unknown_level_defaults_to_info() -> None:
    """TC-05: Unrecognized level names fall back to INFO."""
    configure_logging(LoggingConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO


def test_unopenable_log_file_keeps_console(tmp_path: Path) -> None:
    cfg = LoggingConfig(level="INFO", console=True, log_file=str(tmp_path / "x.log"))

    with patch("foldermap.infra.logging.core.RotatingFileHandler", side_effect=PermissionError("denied")):
        configure_logging(cfg)

    assert len(_queue_handlers()) == 1


def test_default_log_path_lives_under_logs(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr("foldermap.infra.logging.core.get_user_data_dir", lambda: str(tmp_path))

    assert get_default_log_path() == str(tmp_path / "logs" / "foldermap.log")
